"""CLI to apportion a chamber's seats among entities with Huntington-Hill."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

import pandas as pd

if __package__ in (None, ""):
    # Allows running this file directly by putting the package root on ``sys.path``.
    PACKAGE_ROOT = Path(__file__).resolve().parents[1]
    if str(PACKAGE_ROOT) not in sys.path:
        sys.path.insert(0, str(PACKAGE_ROOT))

from apportionment.constants import DEFAULT_MIN_SEATS, HOUSE_SEATS, NAME_COLUMN, POPULATION_COLUMN
from apportionment.data_loader import load_populations
from apportionment.huntington_hill import ApportionmentResult, allocate
from apportionment.reports import final_seats_table, minimum_seat_table, seat_order_table

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Apportion the seats of a chamber among entities with the Huntington-Hill method."
    )
    parser.add_argument(
        "--inputs",
        type=Path,
        required=True,
        help="CSV or Excel file with one row per entity",
    )
    parser.add_argument(
        "--seats",
        type=int,
        default=HOUSE_SEATS,
        help=f"Total number of seats to allocate (default: {HOUSE_SEATS})",
    )
    parser.add_argument(
        "--min-seats",
        type=int,
        default=DEFAULT_MIN_SEATS,
        help=f"Seats guaranteed to every entity (default: {DEFAULT_MIN_SEATS})",
    )
    parser.add_argument(
        "--exclude",
        nargs="*",
        default=[],
        help="Entities left out of the allocation (for example: 'District of Columbia')",
    )
    parser.add_argument("--name-column", default=NAME_COLUMN, help="Column holding entity names")
    parser.add_argument(
        "--population-column", default=POPULATION_COLUMN, help="Column holding populations"
    )
    parser.add_argument("--sheet", default=0, help="Excel sheet to read (name or index)")
    parser.add_argument(
        "--seat-order", action="store_true", help="Also print the order in which seats were awarded"
    )
    parser.add_argument(
        "--include-floor",
        action="store_true",
        help="List the guaranteed minimum seats at the start of the seat order",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON instead of tables"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log a progress line for every seat awarded"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    sheet = int(args.sheet) if isinstance(args.sheet, str) and args.sheet.isdigit() else args.sheet
    try:
        entities = load_populations(
            args.inputs,
            name_column=args.name_column,
            population_column=args.population_column,
            sheet_name=sheet,
        )
        logger.info("Loaded %d entities from %s", len(entities), args.inputs)
        result = allocate(
            entities,
            args.seats,
            min_seats=args.min_seats,
            excluded=args.exclude,
            verbose=args.verbose,
            detailed=args.seat_order or args.json,
            include_floor=args.include_floor,
        )
    except (FileNotFoundError, ValueError) as exc:
        # ApportionmentError is a ValueError, as are the loader's column errors
        print(f"Could not apportion seats: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    print(f"\n=== Apportionment of {result.total_seats} seats ({len(result.final_allocation)} entities) ===")
    _print_final_seats(result)
    _print_minimum_seats(result)
    if args.seat_order:
        _print_seat_order(result)
    return 0


def _print_final_seats(result: ApportionmentResult) -> None:
    table = final_seats_table(result)
    if table.empty:
        print("   No entities received seats")
        return
    ordered = table.sort_values(["seats", "entity"], ascending=[False, True], kind="stable")
    for row in ordered.itertuples(index=False):
        suffix = "seats" if row.seats != 1 else "seat"
        print(f"   {row.entity}: {row.seats} {suffix} ({row.population:,} people)")


def _print_minimum_seats(result: ApportionmentResult) -> None:
    table = minimum_seat_table(result)
    print(f"\nEntities held at the minimum of {result.min_seats}:")
    if table.empty:
        print("   (none)")
        return
    print("   " + ", ".join(table["entity"]))


def _print_seat_order(result: ApportionmentResult) -> None:
    table = seat_order_table(result)
    print("\nSeat order:")
    for row in table.itertuples(index=False):
        score = "floor" if pd.isna(row.priority_score) else f"{row.priority_score:,.3f}"
        print(f"   {row.chamber_seat_number:4d} {row.entity} (seat {row.entity_seat_number}, priority {score})")


if __name__ == "__main__":
    sys.exit(main())
