"""Crossing — a bidirectional URL template registry.

Generates paths from named templates and resolves paths back to the
template name and its placeholder values.

Basic usage::

    from crossing import TemplateRegistry

    urls = TemplateRegistry().load({
        "discussion:detail": "<team_slug>/<discussion_id>/<slug>/",
        "search": "search/",
    })

    urls.get("discussion:detail", team_slug="loop", discussion_id=3, slug="hello")
    # 'loop/3/hello/'

    urls.resolve("loop/3/hello/")
    # Resolved(name='discussion:detail', kwargs={'team_slug': 'loop', ...})

Alternate placeholder syntax::

    from crossing import COLON, TemplateRegistry

    urls = TemplateRegistry(placeholder=COLON, trailing_slash=True)
    urls.load({"task:edit": "/task/edit/:task_id/"})
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ANGLE",
    "BRACE",
    "COLON",
    "CompiledTemplate",
    "ConfigurationError",
    "CrossingError",
    "InvalidParameter",
    "MissingArguments",
    "MissingParameter",
    "NotFound",
    "PlaceholderSyntax",
    "RegistryConfig",
    "Resolved",
    "TemplateRegistry",
    "TooManyValues",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crossing`` fast while providing a clean top-level API.
    """
    if name in ("TemplateRegistry", "Resolved", "CompiledTemplate"):
        from crossing import registry as _registry

        return getattr(_registry, name)

    if name == "RegistryConfig":
        from crossing.config import RegistryConfig

        return RegistryConfig

    if name in ("ANGLE", "BRACE", "COLON", "PlaceholderSyntax"):
        from crossing import placeholders as _placeholders

        return getattr(_placeholders, name)

    if name in (
        "ConfigurationError",
        "CrossingError",
        "InvalidParameter",
        "MissingArguments",
        "MissingParameter",
        "NotFound",
        "TooManyValues",
    ):
        from crossing import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
