"""Registry configuration.

RegistryConfig is a frozen dataclass — fixed for the lifetime of the
registry that holds it, no module-level mutable settings.
"""

import re
from dataclasses import dataclass

from crossing.errors import ConfigurationError
from crossing.placeholders import ANGLE, PlaceholderSyntax


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Template registry configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RegistryConfig(placeholder=COLON, trailing_slash=True)

    ``placeholder`` also accepts a regex string or compiled pattern with a
    single capturing group; it is normalized to a ``PlaceholderSyntax``.
    """

    # Placeholder delimiters, default <name>
    placeholder: PlaceholderSyntax | str | re.Pattern[str] = ANGLE

    # Matchers accept an optional trailing "/"
    trailing_slash: bool = False

    # get() rejects values that refer to no placeholder
    strict: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.placeholder, str | re.Pattern):
            object.__setattr__(self, "placeholder", PlaceholderSyntax.from_regex(self.placeholder))
        elif not isinstance(self.placeholder, PlaceholderSyntax):
            msg = (
                "placeholder must be a PlaceholderSyntax, regex string or compiled "
                f"pattern, got {type(self.placeholder).__name__}"
            )
            raise ConfigurationError(msg)
