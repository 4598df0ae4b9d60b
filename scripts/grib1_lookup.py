#!/usr/bin/env python3
"""
GRIB1 code lookup script.

Resolves GRIB1 header codes (originating center, parameter, level type) into
the labels gribtables attaches to decoded fields. Useful when checking what a
message will be called before running the pipeline.

Usage:
    # Parameter for a center
    uv run scripts/grib1_lookup.py --center 98 --parameter 167

    # Level type
    uv run scripts/grib1_lookup.py --level 100

    # Dump the table a center resolves against
    uv run scripts/grib1_lookup.py --center 7 --list
"""

import argparse
import sys

from gribtables.grib1 import (
    center_name,
    lookup_level_type,
    lookup_parameter,
    parameter_table,
    select_table,
)
from gribtables.grib1.models import Owned


def describe_center(center_id: int) -> str:
    """Format a center code with its WMO name and table kind."""
    kind = "own table" if isinstance(select_table(center_id), Owned) else "standard table"
    name = center_name(center_id) or "unknown center"
    return f"{center_id} - {name} ({kind})"


def print_parameter(center_id: int, parameter_number: int) -> bool:
    """Print metadata for one parameter. Returns False if it is unknown."""
    record = lookup_parameter(center_id, parameter_number)
    if record is None:
        print(f"❌ No parameter {parameter_number} for center {center_id}", file=sys.stderr)
        return False

    print(f"  abbreviation:  {record.abbreviation}")
    print(f"  name:          {record.name}")
    print(f"  units:         {record.unit or '-'}")
    return True


def print_level(level_type: int) -> None:
    """Print metadata for one level type."""
    name, unit = lookup_level_type(level_type)
    print(f"  level type:    {level_type} - {name}")
    print(f"  level units:   {unit or '-'}")


def print_table(center_id: int) -> None:
    """Print every parameter the center resolves against, ordered by code."""
    table = parameter_table(center_id)
    print(f"📊 Total parameters: {len(table)}")
    print()
    for code in sorted(table):
        record = table[code]
        print(f"  {code:>3}  {record.abbreviation:<8} {record.name} [{record.unit}]")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Resolve GRIB1 header codes into parameter and level metadata.",
        epilog="Centers without their own table resolve against WMO Table 2.",
    )
    parser.add_argument("--center", type=int, default=98, help="Originating center (default: 98, ECMWF)")
    parser.add_argument("--parameter", type=int, help="Indicator of parameter")
    parser.add_argument("--level", type=int, help="Indicator of type of level")
    parser.add_argument("--list", action="store_true", help="List the center's parameter table")
    args = parser.parse_args(argv)

    if args.parameter is None and args.level is None and not args.list:
        parser.error("nothing to look up: pass --parameter, --level or --list")

    print(f"🏢 Center: {describe_center(args.center)}")
    print()

    if args.list:
        print_table(args.center)
        print()

    if args.level is not None:
        print_level(args.level)

    if args.parameter is not None:
        if not print_parameter(args.center, args.parameter):
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
