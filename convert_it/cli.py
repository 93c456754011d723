"""Command-line interface for the unit converter."""

import argparse
import logging
import sys

from convert_it.config import CATEGORIES, get_log_level
from convert_it.converter import (
    conversion_table,
    default_units,
    display_result,
    format_conversion,
    format_value,
    try_convert,
    units_for,
)
from convert_it.models import Conversion

logger = logging.getLogger(__name__)


def _check_units(category: str, *units: str) -> None:
    valid = units_for(category)
    for unit in units:
        if unit not in valid:
            print(f"Invalid unit. Choose from: {', '.join(valid)}")
            sys.exit(1)


# --- Command handlers ---

def cmd_convert(args):
    if args.strict:
        _check_units(args.category, args.source, args.target)
        result = try_convert(args.category, args.value, args.source, args.target)
    else:
        result = display_result(args.category, args.value, args.source, args.target)

    conversion = Conversion(
        category=args.category,
        value=args.value,
        source_unit=args.source,
        target_unit=args.target,
        result=result,
    )
    logger.debug("Converted %s", conversion)
    print(format_conversion(conversion))


def cmd_units(args):
    categories = [args.category] if args.category else CATEGORIES
    for category in categories:
        source, target = default_units(category)
        print(f"{category}:")
        print(f"  Units:   {', '.join(units_for(category))}")
        print(f"  Default: {source} -> {target}")


def cmd_table(args):
    _check_units(args.category, args.source)

    print(f"{format_value(args.value)} {args.source}")
    print("-" * 30)
    for unit, value in conversion_table(args.category, args.value, args.source):
        print(f"  {unit:<12}  {format_value(value):>14}")


# --- Argument parser ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="convert_it",
        description="Convert It - Temperature, Length, Time and Volume Conversion",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- convert ---
    convert_p = subparsers.add_parser("convert", help="Convert a value between two units")
    convert_p.add_argument("category", choices=CATEGORIES, help="Conversion type")
    convert_p.add_argument("value", type=float, help="Value to convert")
    convert_p.add_argument("source", help="Unit to convert from (e.g., Meters)")
    convert_p.add_argument("target", help="Unit to convert to (e.g., Kilometers)")
    convert_p.add_argument("--strict", action="store_true",
                           help="Fail on unknown units instead of printing 0")
    convert_p.set_defaults(func=cmd_convert)

    # --- units ---
    units_p = subparsers.add_parser("units", help="List available units")
    units_p.add_argument("category", nargs="?", choices=CATEGORIES, help="Only this category")
    units_p.set_defaults(func=cmd_units)

    # --- table ---
    table_p = subparsers.add_parser("table", help="Show a value in every unit of its category")
    table_p.add_argument("category", choices=CATEGORIES, help="Conversion type")
    table_p.add_argument("value", type=float, help="Value to convert")
    table_p.add_argument("source", help="Unit the value is given in")
    table_p.set_defaults(func=cmd_table)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return

    args.func(args)
