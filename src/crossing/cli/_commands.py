"""Implementations of ``crossing list``, ``crossing get`` and ``crossing resolve``."""

import argparse
import json
import sys

from crossing.cli._source import load_templates
from crossing.config import RegistryConfig
from crossing.errors import CrossingError
from crossing.placeholders import SYNTAXES
from crossing.registry import TemplateRegistry


def build_registry(args: argparse.Namespace) -> TemplateRegistry:
    """Create and load a registry from the shared CLI options."""
    config = RegistryConfig(
        placeholder=SYNTAXES[args.syntax],
        trailing_slash=args.trailing_slash,
        strict=not args.lenient,
    )
    try:
        templates = load_templates(args.source)
    except (OSError, ValueError, ImportError, AttributeError, TypeError) as exc:
        print(f"error: cannot load templates from {args.source!r}: {exc}", file=sys.stderr)
        sys.exit(1)
    return TemplateRegistry(config).load(templates)


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` strings from ``-p`` options."""
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"Expected KEY=VALUE, got {pair!r}"
            raise ValueError(msg)
        params[key] = value
    return params


def run_list(args: argparse.Namespace) -> None:
    registry = build_registry(args)
    for name, template in registry.templates.items():
        print(f"{name}\t{template}")


def run_get(args: argparse.Namespace) -> None:
    registry = build_registry(args)
    try:
        params = parse_params(args.param)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    try:
        if params:
            path = registry.get(args.name, *args.values, **params)
        else:
            path = registry.get(args.name, *args.values)
    except (CrossingError, TypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
    print(path)


def run_resolve(args: argparse.Namespace) -> None:
    registry = build_registry(args)
    match = registry.resolve(args.path)
    if match is None:
        print(f"error: no URL template matches {args.path!r}", file=sys.stderr)
        sys.exit(1)
    print(json.dumps({"name": match.name, "kwargs": match.kwargs}))
