"""Pay period conversion and currency rounding."""

from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum

PENNY = Decimal("0.01")
DEFAULT_DAYS_PER_YEAR = 260


class Period(StrEnum):
    """Reporting period for an amount."""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"


_FIXED_PERIODS: dict[Period, int] = {
    Period.YEAR: 1,
    Period.MONTH: 12,
    Period.WEEK: 52,
}


def periods_per_year(period: Period, days_per_year: int = DEFAULT_DAYS_PER_YEAR) -> int:
    """Number of times `period` occurs in a year; days come from the caller."""
    period = Period(period)
    if period is Period.DAY:
        return days_per_year
    return _FIXED_PERIODS[period]


def to_annual(amount: Decimal, period: Period, days_per_year: int = DEFAULT_DAYS_PER_YEAR) -> Decimal:
    """Annual equivalent of a per-period amount. No rounding."""
    return amount * periods_per_year(period, days_per_year)


def from_annual(amount: Decimal, period: Period, days_per_year: int = DEFAULT_DAYS_PER_YEAR) -> Decimal:
    """Per-period equivalent of an annual amount. No rounding."""
    return amount / periods_per_year(period, days_per_year)


def round_money(value: Decimal) -> Decimal:
    """Round to whole pence, halves away from zero."""
    return value.quantize(PENNY, rounding=ROUND_HALF_UP)
