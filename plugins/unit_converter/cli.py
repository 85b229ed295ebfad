"""Command line interface for the Unit Converter plugin."""

from __future__ import annotations

import argparse
import json
from typing import Any

from .core import (
    ConversionError,
    InvalidInputError,
    InvalidPrecisionError,
    describe_categories,
    describe_units,
    get_converter,
    list_categories,
)


def _print(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False))


def _fail(code: str, message: str) -> None:
    _print({"success": False, "error": {"code": code, "message": message}})
    raise SystemExit(2)


def command_categories(args: argparse.Namespace) -> None:
    _print({"categories": describe_categories()})


def command_units(args: argparse.Namespace) -> None:
    _print({"category": args.category, "units": describe_units(args.category)})


def command_convert(args: argparse.Namespace) -> None:
    converter = get_converter(args.decimals)
    result = converter.convert_text(args.category, args.from_unit, args.to_unit, args.value)
    if not result.ok:
        _fail("unit.invalid_input", result.error or "Invalid input")
    _print(result.to_dict())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="eunits", description="eUnits unit converter")
    subparsers = parser.add_subparsers(dest="command", required=True)
    category_choices = [category.value for category in list_categories()]

    categories_parser = subparsers.add_parser("categories", help="List categories and their units")
    categories_parser.set_defaults(func=command_categories)

    units_parser = subparsers.add_parser("units", help="List the units of one category")
    units_parser.add_argument("--category", required=True, type=str.lower, choices=category_choices)
    units_parser.set_defaults(func=command_units)

    convert_parser = subparsers.add_parser("convert", help="Convert a value between two units")
    convert_parser.add_argument("--category", required=True, type=str.lower, choices=category_choices)
    convert_parser.add_argument("--from", dest="from_unit", required=True, help="Source unit id or label")
    convert_parser.add_argument("--to", dest="to_unit", required=True, help="Target unit id or label")
    convert_parser.add_argument("--decimals", type=int, default=3, help="Decimal places in the result")
    convert_parser.add_argument("value", help="Value to convert")
    convert_parser.set_defaults(func=command_convert)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except InvalidInputError as exc:
        _fail("unit.invalid_input", str(exc))
    except InvalidPrecisionError as exc:
        _fail("unit.invalid_request", str(exc))
    except ConversionError as exc:
        _fail("unit.invalid_unit", str(exc))


if __name__ == "__main__":
    main()
