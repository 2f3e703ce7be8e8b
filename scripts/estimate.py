"""Estimate UK take-home pay from the command line.

Usage:
    python scripts/estimate.py 30000
    python scripts/estimate.py 2500 --period month --tax-code S1257L
    python scripts/estimate.py 2093.30 --period month --net
    python scripts/estimate.py --list-ni-categories
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings
from takehome.calculators.national_insurance import NI_CATEGORIES, describe_ni_category
from takehome.calculators.periods import Period
from takehome.calculators.tax_data import Jurisdiction
from takehome.calculators.take_home import calculate
from takehome.models import CalculationInput, Direction

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="UK income tax and NI take-home estimator")
    parser.add_argument("amount", nargs="?", help="Gross pay (or target net pay with --net)")
    parser.add_argument("--period", choices=[p.value for p in Period], default=Period.YEAR.value)
    parser.add_argument("--jurisdiction", choices=[j.value for j in Jurisdiction])
    parser.add_argument("--tax-code", help="PAYE tax code, e.g. 1257L, S1257L, BR, K475")
    parser.add_argument("--ni-category", default=settings.default_ni_category)
    parser.add_argument("--days-per-year", type=int, default=settings.default_days_per_year)
    parser.add_argument("--net", action="store_true", help="Treat amount as net and solve for gross")
    parser.add_argument("--list-ni-categories", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run one calculation and print the result as JSON."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s: %(message)s",
    )

    if args.list_ni_categories:
        for category in NI_CATEGORIES:
            print(f"{category}  {describe_ni_category(category)}")
        return 0

    if args.amount is None:
        parser.error("amount is required")

    try:
        data = CalculationInput(
            amount=args.amount,
            period=args.period,
            jurisdiction=args.jurisdiction,
            tax_code=args.tax_code,
            ni_category=args.ni_category,
            days_per_year=args.days_per_year,
            direction=Direction.NET_TO_GROSS if args.net else Direction.GROSS_TO_NET,
        )
    except ValidationError as exc:
        logger.error("Invalid input: %s", exc)
        return 2

    print(calculate(data).model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
