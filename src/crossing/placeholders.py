"""Placeholder syntaxes, extraction, and template compilation.

A placeholder syntax is a regex with exactly one capturing group for the
placeholder identifier. Built-in syntaxes cover ``<name>``, ``:name`` and
``{name}``.
"""

import re
from dataclasses import dataclass

from crossing.errors import ConfigurationError

# Characters a placeholder identifier and a captured value may contain
IDENTIFIER = r"[a-zA-Z0-9_-]+"
VALUE = r"[a-zA-Z0-9_-]{0,}"


@dataclass(frozen=True, slots=True)
class PlaceholderSyntax:
    """A named placeholder delimiter syntax.

    The compiled ``pattern`` is built once and shared for the lifetime of
    every registry that uses it. Matching always goes through fresh
    ``finditer``/``sub`` calls, so no scan position is carried between uses.
    """

    name: str
    pattern: re.Pattern[str]

    def __post_init__(self) -> None:
        if self.pattern.groups != 1:
            msg = (
                f"Placeholder syntax {self.name!r} must have exactly one capturing "
                f"group for the placeholder name, got {self.pattern.groups}: "
                f"{self.pattern.pattern!r}"
            )
            raise ConfigurationError(msg)

    @classmethod
    def from_regex(cls, regex: str | re.Pattern[str], name: str = "custom") -> "PlaceholderSyntax":
        """Build a syntax from a regex string or an already compiled pattern."""
        if isinstance(regex, re.Pattern):
            return cls(name=name, pattern=regex)
        try:
            pattern = re.compile(regex)
        except re.error as exc:
            msg = f"Invalid placeholder regex {regex!r}: {exc}"
            raise ConfigurationError(msg) from exc
        return cls(name=name, pattern=pattern)


ANGLE = PlaceholderSyntax("angle", re.compile(f"<({IDENTIFIER})>"))
COLON = PlaceholderSyntax("colon", re.compile(f":({IDENTIFIER})"))
BRACE = PlaceholderSyntax("brace", re.compile(rf"\{{({IDENTIFIER})\}}"))

SYNTAXES: dict[str, PlaceholderSyntax] = {
    syntax.name: syntax for syntax in (ANGLE, COLON, BRACE)
}


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A placeholder occurrence inside a raw template.

    ``token`` is the literal text as written (``<slug>``), ``start`` and
    ``end`` its offsets in the template.
    """

    name: str
    token: str
    start: int
    end: int


def find_placeholders(template: str, syntax: PlaceholderSyntax = ANGLE) -> tuple[Placeholder, ...]:
    """Return every placeholder in *template*, left to right.

    Examples::

        find_placeholders("<team_slug>/<slug>/")
        -> (Placeholder("team_slug", "<team_slug>", 0, 11),
            Placeholder("slug", "<slug>", 12, 18))
    """
    return tuple(
        Placeholder(name=m.group(1), token=m.group(0), start=m.start(), end=m.end())
        for m in syntax.pattern.finditer(template)
    )


def compile_template(
    template: str,
    syntax: PlaceholderSyntax = ANGLE,
    *,
    trailing_slash: bool = False,
    placeholders: tuple[Placeholder, ...] | None = None,
) -> re.Pattern[str]:
    """Compile a raw template into an anchored matcher.

    Each placeholder becomes one capturing group; the literal text between
    placeholders is escaped. Pass *placeholders* when they were already
    extracted from *template* so the groups line up with that scan.

    With *trailing_slash*, a ``/`` that ends the final literal piece becomes
    optional, and a path may carry one even when the template has none.
    """
    if placeholders is None:
        placeholders = find_placeholders(template, syntax)

    parts: list[str] = []
    cursor = 0
    for placeholder in placeholders:
        parts.append(re.escape(template[cursor : placeholder.start]))
        parts.append(f"({VALUE})")
        cursor = placeholder.end

    tail = template[cursor:]
    if trailing_slash and tail.endswith("/"):
        tail = tail[:-1]
    parts.append(re.escape(tail))

    suffix = "/?" if trailing_slash else ""
    return re.compile("^" + "".join(parts) + suffix + r"\Z")
