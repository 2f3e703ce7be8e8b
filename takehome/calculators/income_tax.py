"""Income tax calculator: band-by-band breakdown."""

from decimal import Decimal
from typing import NamedTuple

from takehome.calculators.periods import round_money
from takehome.calculators.tax_code import FlatRate, NoTax, TaxCodeMode
from takehome.calculators.tax_data import TAX_YEAR, Jurisdiction
from takehome.models import BandTaxLine


class IncomeTaxResult(NamedTuple):
    """Annual income tax and its per-band breakdown."""

    total_tax: Decimal
    breakdown: tuple[BandTaxLine, ...]


def calculate_income_tax(
    taxable_income: Decimal,
    jurisdiction: Jurisdiction = Jurisdiction.RUK,
    mode: TaxCodeMode | None = None,
) -> IncomeTaxResult:
    """Calculate UK income tax on taxable income with per-band breakdown.

    Each breakdown line is rounded to pence on its own. The total is summed
    from unrounded band amounts and rounded once, so the displayed lines may
    differ from the total by a penny or so.

    Args:
        taxable_income: Annual income after personal allowance (>= 0).
        jurisdiction: Which band table to use.
        mode: Tax code mode; None means standard bands.

    Returns:
        IncomeTaxResult with total_tax and breakdown.
    """
    if isinstance(mode, NoTax):
        line = BandTaxLine(
            band_name="nt",
            taxable_in_band=round_money(taxable_income),
            rate=Decimal("0"),
            tax=Decimal("0.00"),
        )
        return IncomeTaxResult(Decimal("0.00"), (line,))

    if isinstance(mode, FlatRate):
        tax = round_money(taxable_income * mode.rate)
        line = BandTaxLine(
            band_name="flat",
            taxable_in_band=round_money(taxable_income),
            rate=mode.rate,
            tax=tax,
        )
        return IncomeTaxResult(tax, (line,))

    breakdown: list[BandTaxLine] = []
    total_tax = Decimal("0")
    remaining = taxable_income
    lower = Decimal("0")

    for band in TAX_YEAR.bands[jurisdiction]:
        if remaining <= 0:
            break

        in_band = remaining if band.upper is None else min(remaining, band.upper - lower)
        if band.upper is not None:
            lower = band.upper
        if in_band <= 0:
            continue

        tax = in_band * band.rate
        breakdown.append(BandTaxLine(
            band_name=band.name,
            taxable_in_band=round_money(in_band),
            rate=band.rate,
            tax=round_money(tax),
        ))
        total_tax += tax
        remaining -= in_band

    return IncomeTaxResult(round_money(total_tax), tuple(breakdown))
