"""Command line interface for the Unit Converter plugin."""

from __future__ import annotations

import argparse
import json
from typing import Any

from .core import (
    CATALOG_VERSION,
    ConversionError,
    convert_text,
    list_categories,
    list_unit_names,
    list_units,
    validate,
)


def _print(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def command_categories(args: argparse.Namespace) -> None:
    _print({"categories": list_categories(), "version": CATALOG_VERSION})


def command_units(args: argparse.Namespace) -> None:
    units = list_unit_names(args.category) if args.names else list_units(args.category)
    _print({"category": args.category, "units": units})


def command_validate(args: argparse.Namespace) -> None:
    _print({"value": args.value, "valid": validate(args.value)})


def command_convert(args: argparse.Namespace) -> None:
    result = convert_text(args.value, args.category, args.from_unit, args.to_unit)
    _print(result.to_dict())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Unit Converter CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    categories_parser = subparsers.add_parser("categories", help="List unit categories")
    categories_parser.set_defaults(func=command_categories)

    units_parser = subparsers.add_parser("units", help="List the units of a category")
    units_parser.add_argument("category", help="Category name (e.g. length)")
    units_parser.add_argument("--names", action="store_true", help="Print unit names only")
    units_parser.set_defaults(func=command_units)

    validate_parser = subparsers.add_parser("validate", help="Check a raw numeric input")
    validate_parser.add_argument("value", help="Raw text to check")
    validate_parser.set_defaults(func=command_validate)

    convert_parser = subparsers.add_parser("convert", help="Convert a value between units")
    convert_parser.add_argument("value", help="Value to convert (e.g. -40 or 2.5)")
    convert_parser.add_argument("--category", required=True, help="Unit category")
    convert_parser.add_argument("--from", dest="from_unit", required=True, help="Source unit name")
    convert_parser.add_argument("--to", dest="to_unit", required=True, help="Target unit name")
    convert_parser.set_defaults(func=command_convert)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except ConversionError as exc:
        _print({"error": {"type": type(exc).__name__, "message": str(exc)}})
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
