"""Crossing CLI — inspect, generate, and resolve URL templates.

Entry point registered as ``crossing`` in ``pyproject.toml``::

    [project.scripts]
    crossing = "crossing.cli:main"
"""

import argparse
import sys

from crossing.placeholders import SYNTAXES


def _add_registry_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "source",
        help="JSON file of name -> template, or import string (e.g. myapp:urls)",
    )
    parser.add_argument(
        "--syntax",
        choices=sorted(SYNTAXES),
        default="angle",
        help="Placeholder syntax (default: angle, i.e. <name>)",
    )
    parser.add_argument(
        "--trailing-slash",
        action="store_true",
        help="Accept paths with or without a trailing slash",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Ignore values that refer to no placeholder",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``crossing`` command."""
    parser = argparse.ArgumentParser(
        prog="crossing",
        description="Crossing — a bidirectional URL template registry.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- crossing list ----------------------------------------------------
    list_parser = subparsers.add_parser("list", help="List registered templates")
    _add_registry_options(list_parser)

    # -- crossing get -----------------------------------------------------
    get_parser = subparsers.add_parser("get", help="Generate a path from a template")
    _add_registry_options(get_parser)
    get_parser.add_argument("name", help="Template name (e.g. discussion:detail)")
    get_parser.add_argument("values", nargs="*", help="Positional placeholder values")
    get_parser.add_argument(
        "-p",
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Keyword placeholder value (repeatable)",
    )

    # -- crossing resolve -------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a path to a template")
    _add_registry_options(resolve_parser)
    resolve_parser.add_argument("path", help="Concrete path to resolve")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "list":
        from crossing.cli._commands import run_list

        run_list(args)
    elif args.command == "get":
        from crossing.cli._commands import run_get

        run_get(args)
    elif args.command == "resolve":
        from crossing.cli._commands import run_resolve

        run_resolve(args)
