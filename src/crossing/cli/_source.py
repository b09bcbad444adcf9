"""Template source resolution — turns a CLI ``SOURCE`` into a mapping.

A source is either a JSON file holding an object of name -> template, or
an import string ``"module:attribute"``.
"""

import importlib
import json
from collections.abc import Mapping
from pathlib import Path


def load_templates(source: str) -> dict[str, str]:
    """Resolve *source* to a mapping of template name to raw template.

    Accepts a path to a ``.json`` file (or any existing file) or a
    ``"module:attribute"`` import string. When the attribute portion is
    omitted it defaults to ``"urls"`` (e.g. ``"myapp"`` resolves to
    ``myapp.urls``). A callable attribute is called and its return value
    used.

    Raises:
        FileNotFoundError: If a ``.json`` path does not exist.
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the source does not produce a mapping of strings.

    """
    path = Path(source)
    if source.endswith(".json") or path.is_file():
        with path.open(encoding="utf-8") as fh:
            obj = json.load(fh)
    else:
        obj = _import_object(source)

    if not isinstance(obj, Mapping):
        msg = f"{source!r} resolved to {type(obj).__name__}, not a mapping of URL templates"
        raise TypeError(msg)

    templates: dict[str, str] = {}
    for name, template in obj.items():
        if not isinstance(name, str) or not isinstance(template, str):
            msg = f"{source!r} contains a non-string entry: {name!r}: {template!r}"
            raise TypeError(msg)
        templates[name] = template
    return templates


def _import_object(import_string: str) -> object:
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "urls"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    # Support factory functions
    if callable(obj) and not isinstance(obj, Mapping):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc
    return obj
