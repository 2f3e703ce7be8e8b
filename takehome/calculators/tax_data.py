"""UK tax constants: income tax bands, personal allowance, NI thresholds and rates.

Hardcoded Python constants (not DB-driven). Only the 2025/26 tax year is
modelled. Trivially testable, no external dependencies.
"""

from decimal import Decimal
from enum import StrEnum
from typing import NamedTuple


class Jurisdiction(StrEnum):
    """Regional income tax rate table selector."""

    RUK = "ruk"  # England, Wales and Northern Ireland
    SCOTLAND = "scotland"


class TaxBand(NamedTuple):
    """A single income tax band on taxable income (after allowance)."""

    upper: Decimal | None  # cumulative taxable GBP; None = no cap
    rate: Decimal
    name: str


class NIRates(NamedTuple):
    """Employee NI rates for one category letter."""

    main: Decimal  # between primary threshold and upper earnings limit
    upper: Decimal  # above upper earnings limit


class TaxYearData(NamedTuple):
    """All tax parameters for a single UK tax year."""

    label: str
    personal_allowance: Decimal
    taper_threshold: Decimal
    bands: dict[Jurisdiction, tuple[TaxBand, ...]]
    ni_primary_threshold: Decimal
    ni_upper_earnings_limit: Decimal
    ni_rates: dict[str, NIRates]


_RUK_BANDS = (
    TaxBand(Decimal("37700"), Decimal("0.20"), "basic"),
    TaxBand(Decimal("125140"), Decimal("0.40"), "higher"),
    TaxBand(None, Decimal("0.45"), "additional"),
)

_SCOTLAND_BANDS = (
    TaxBand(Decimal("2827"), Decimal("0.19"), "starter"),
    TaxBand(Decimal("14921"), Decimal("0.20"), "basic"),
    TaxBand(Decimal("31092"), Decimal("0.21"), "intermediate"),
    TaxBand(Decimal("62430"), Decimal("0.42"), "higher"),
    TaxBand(Decimal("125140"), Decimal("0.45"), "advanced"),
    TaxBand(None, Decimal("0.48"), "top"),
)

_STANDARD = NIRates(Decimal("0.08"), Decimal("0.02"))
_REDUCED = NIRates(Decimal("0.0185"), Decimal("0.02"))
_DEFERRED = NIRates(Decimal("0.02"), Decimal("0.02"))
_ZERO = NIRates(Decimal("0"), Decimal("0"))

# Source: HMRC employee (primary) Class 1 rates by category letter, 2025/26
_NI_RATES: dict[str, NIRates] = {
    "A": _STANDARD,
    "B": _REDUCED,
    "C": _ZERO,
    "D": _DEFERRED,
    "E": _REDUCED,
    "F": _STANDARD,
    "H": _STANDARD,
    "I": _REDUCED,
    "J": _DEFERRED,
    "K": _ZERO,
    "L": _DEFERRED,
    "M": _STANDARD,
    "N": _STANDARD,
    "S": _ZERO,
    "V": _STANDARD,
    "Z": _DEFERRED,
}

TAX_YEAR_2025_26 = TaxYearData(
    label="2025/26",
    personal_allowance=Decimal("12570"),
    taper_threshold=Decimal("100000"),
    bands={
        Jurisdiction.RUK: _RUK_BANDS,
        Jurisdiction.SCOTLAND: _SCOTLAND_BANDS,
    },
    ni_primary_threshold=Decimal("12570"),
    ni_upper_earnings_limit=Decimal("50270"),
    ni_rates=_NI_RATES,
)

TAX_YEAR = TAX_YEAR_2025_26

# Reverse search ceiling is REVERSE_SEARCH_MULTIPLIER x target net. Valid while
# the combined top marginal burden stays under 1 - 1/multiplier.
REVERSE_SEARCH_MULTIPLIER = Decimal("3")


def validate_bands(bands: tuple[TaxBand, ...]) -> None:
    """Raise ValueError unless uppers strictly increase and the last band is uncapped."""
    if not bands:
        raise ValueError("Band table must not be empty")
    if bands[-1].upper is not None:
        raise ValueError(f"Last band '{bands[-1].name}' must be unbounded")

    previous = Decimal("0")
    for band in bands:
        if not Decimal("0") <= band.rate <= Decimal("1"):
            raise ValueError(f"Band '{band.name}' rate {band.rate} outside [0, 1]")
        if band.upper is None:
            continue
        if band.upper <= previous:
            raise ValueError(f"Band '{band.name}' upper {band.upper} not above {previous}")
        previous = band.upper


def max_marginal_burden(data: TaxYearData) -> Decimal:
    """Top income tax rate plus top NI upper rate across all tables."""
    top_tax = max(band.rate for bands in data.bands.values() for band in bands)
    top_ni = max(rates.upper for rates in data.ni_rates.values())
    return top_tax + top_ni


def validate_tax_year(data: TaxYearData) -> None:
    """Check every band table and NI rate, and the reverse search ceiling."""
    for bands in data.bands.values():
        validate_bands(bands)

    for category, rates in data.ni_rates.items():
        for rate in rates:
            if not Decimal("0") <= rate <= Decimal("1"):
                raise ValueError(f"NI category {category} rate {rate} outside [0, 1]")

    burden = max_marginal_burden(data)
    if burden >= 1 - 1 / REVERSE_SEARCH_MULTIPLIER:
        raise ValueError(
            f"Marginal burden {burden} too high for a {REVERSE_SEARCH_MULTIPLIER}x search ceiling"
        )


validate_tax_year(TAX_YEAR)
