"""Template registry with compiled matchers.

Templates are loaded in one pass and compiled into anchored regexes.
The registry then generates paths from names and values (``get``) and
resolves paths back to names and values (``resolve``).
"""

import dataclasses
import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, cast

from crossing.config import RegistryConfig
from crossing.errors import (
    InvalidParameter,
    MissingArguments,
    MissingParameter,
    NotFound,
    TooManyValues,
)
from crossing.placeholders import (
    Placeholder,
    PlaceholderSyntax,
    compile_template,
    find_placeholders,
)

logger = logging.getLogger("crossing.registry")


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """A raw template together with its matcher and placeholders.

    Created by ``TemplateRegistry.load()``, one per registered name.
    """

    name: str
    template: str
    matcher: re.Pattern[str]
    placeholders: tuple[Placeholder, ...]

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.placeholders)


@dataclass(frozen=True, slots=True)
class Resolved:
    """Result of a successful resolve."""

    name: str
    kwargs: dict[str, str]


class TemplateRegistry:
    """Named URL templates, compiled for generation and resolution.

    Usage::

        urls = TemplateRegistry().load({
            "discussion:detail": "<team_slug>/<discussion_id>/<slug>/",
            "search": "search/",
        })
        urls.get("discussion:detail", team_slug="loop", discussion_id=3, slug="hi")
        urls.get("discussion:detail", "loop", 3, "hi")
        match = urls.resolve("loop/3/hi/")
        # Resolved(name="discussion:detail", kwargs={"team_slug": "loop", ...})

    Configuration is fixed at construction; ``load`` may be called again
    and replaces every template.
    """

    __slots__ = ("_compiled", "_syntax", "_templates", "config")

    def __init__(self, config: RegistryConfig | None = None, **overrides: Any) -> None:
        config = config or RegistryConfig()
        if overrides:
            config = dataclasses.replace(config, **overrides)
        self.config: RegistryConfig = config
        self._syntax: PlaceholderSyntax = cast("PlaceholderSyntax", config.placeholder)
        self._templates: dict[str, str] = {}
        self._compiled: dict[str, CompiledTemplate] = {}

    # -- Loading -----------------------------------------------------------

    def load(self, templates: Mapping[str, str]) -> "TemplateRegistry":
        """Compile *templates* and replace the registry contents.

        Names keep the iteration order of *templates*; ``resolve`` scans
        them in that order. Returns ``self`` for chaining.
        """
        raw: dict[str, str] = {}
        compiled: dict[str, CompiledTemplate] = {}
        for name, template in templates.items():
            if not isinstance(template, str):
                msg = f"Template {name!r} must be a string, got {type(template).__name__}"
                raise TypeError(msg)
            raw[name] = template
            # One scan feeds both the matcher groups and the placeholder names
            placeholders = find_placeholders(template, self._syntax)
            compiled[name] = CompiledTemplate(
                name=name,
                template=template,
                matcher=compile_template(
                    template,
                    self._syntax,
                    trailing_slash=self.config.trailing_slash,
                    placeholders=placeholders,
                ),
                placeholders=placeholders,
            )

        # Swap both maps together so they never disagree
        self._templates = raw
        self._compiled = compiled
        logger.debug("Loaded %d URL templates", len(compiled))
        return self

    # -- Introspection -----------------------------------------------------

    @property
    def names(self) -> tuple[str, ...]:
        """Registered template names in load order."""
        return tuple(self._templates)

    @property
    def templates(self) -> Mapping[str, str]:
        """Read-only view of name -> raw template."""
        return MappingProxyType(self._templates)

    def compiled(self, name: str) -> CompiledTemplate:
        try:
            return self._compiled[name]
        except KeyError:
            raise NotFound(name) from None

    def placeholders(self, name: str) -> tuple[str, ...]:
        """Placeholder names of *name*, left to right, duplicates included."""
        return self.compiled(name).param_names

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    # -- Generation --------------------------------------------------------

    def get(self, name: str, /, *args: Any, **kwargs: Any) -> str:
        """Build a path for the template registered as *name*.

        Values are given either by keyword (a single mapping argument and/or
        keyword arguments) or positionally, one per placeholder occurrence
        from left to right. Values are converted with ``str()``.

        Raises ``NotFound`` for an unknown name, ``InvalidParameter`` (strict
        mode) for values that match no placeholder, ``MissingParameter`` when
        a keyword value is absent, and ``MissingArguments`` when placeholders
        remain unsubstituted.
        """
        entry = self.compiled(name)

        if len(args) == 1 and isinstance(args[0], Mapping):
            path = self._substitute_keywords(entry, {**args[0], **kwargs})
        elif args and kwargs:
            msg = f"get() for {name!r} takes positional or keyword values, not both"
            raise TypeError(msg)
        elif kwargs:
            path = self._substitute_keywords(entry, kwargs)
        else:
            path = self._substitute_positional(entry, args)

        remaining = find_placeholders(path, self._syntax)
        if remaining:
            raise MissingArguments(
                entry.template,
                tuple(p.token for p in remaining),
                tuple(p.name for p in remaining),
            )
        return path

    def _substitute_keywords(self, entry: CompiledTemplate, params: Mapping[str, Any]) -> str:
        if self.config.strict:
            known = set(entry.param_names)
            for key in params:
                if key not in known:
                    raise InvalidParameter(entry.name, key)

        for placeholder in entry.placeholders:
            if placeholder.name not in params:
                raise MissingParameter(entry.name, placeholder.name)

        return self._syntax.pattern.sub(lambda m: str(params[m.group(1)]), entry.template)

    def _substitute_positional(self, entry: CompiledTemplate, values: tuple[Any, ...]) -> str:
        if self.config.strict and len(values) > len(entry.placeholders):
            raise TooManyValues(entry.name, len(values), len(entry.placeholders))

        pieces: list[str] = []
        cursor = 0
        for placeholder, value in zip(entry.placeholders, values, strict=False):
            pieces.append(entry.template[cursor : placeholder.start])
            pieces.append(str(value))
            cursor = placeholder.end
        pieces.append(entry.template[cursor:])
        return "".join(pieces)

    # -- Resolution --------------------------------------------------------

    def resolve(self, path: str) -> Resolved | None:
        """Return the first template matching *path*, or ``None``.

        Templates are tried in load order. Captured values are returned as
        strings keyed by placeholder name; when a name repeats, the last
        occurrence wins.
        """
        for entry in self._compiled.values():
            match = entry.matcher.match(path)
            if match is None:
                continue
            kwargs = dict(zip(entry.param_names, match.groups(), strict=True))
            logger.debug("Resolved %r to %r", path, entry.name)
            return Resolved(name=entry.name, kwargs=kwargs)

        return None
