"""Crossing exception hierarchy.

Shared by the registry, placeholder parsing, and the CLI so every module
raises and catches the same types.
"""


class CrossingError(Exception):
    """Base for all crossing-specific errors."""


class ConfigurationError(CrossingError):
    """Raised when registry configuration is invalid.

    Typically raised while constructing a ``PlaceholderSyntax`` or a
    ``TemplateRegistry``.
    """


class NotFound(CrossingError, LookupError):  # noqa: N818 — mirrors the lookup it reports
    """No template is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"URL not found: {name}")


class InvalidParameter(CrossingError):
    """A value was supplied that refers to no placeholder in the template.

    Only raised when the registry runs in strict mode. ``parameter`` is the
    offending keyword, or ``None`` for surplus positional values.
    """

    def __init__(self, name: str, parameter: str | None, message: str = "") -> None:
        self.name = name
        self.parameter = parameter
        super().__init__(message or f"Invalid parameter ({parameter}) for {name}")


class TooManyValues(InvalidParameter):
    """Positional generation received more values than the template has placeholders."""

    def __init__(self, name: str, given: int, expected: int) -> None:
        self.given = given
        self.expected = expected
        super().__init__(
            name,
            None,
            f"Too many values ({given}) for {name}, expected at most {expected}",
        )


class MissingParameter(CrossingError):
    """Keyword generation omitted a value for a placeholder."""

    def __init__(self, name: str, parameter: str) -> None:
        self.name = name
        self.parameter = parameter
        super().__init__(f"Missing parameter ({parameter}) for {name}")


class MissingArguments(CrossingError):
    """Placeholders remain unsubstituted after generation.

    ``missing`` holds the placeholder tokens exactly as written in the
    template, in left-to-right order; ``names`` holds their identifiers.
    """

    def __init__(
        self,
        template: str,
        missing: tuple[str, ...],
        names: tuple[str, ...] = (),
    ) -> None:
        self.template = template
        self.missing = missing
        self.names = names
        super().__init__(f"Missing arguments ({', '.join(missing)}) for url {template}")
