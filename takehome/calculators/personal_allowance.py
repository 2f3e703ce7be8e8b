"""Personal allowance with the high-income taper."""

from decimal import ROUND_FLOOR, Decimal

from takehome.calculators.tax_code import Standard, TaxCodeMode, ZeroAllowance
from takehome.calculators.tax_data import TAX_YEAR


def compute_personal_allowance(
    annual_gross: Decimal,
    base_allowance: Decimal,
    taper_threshold: Decimal = TAX_YEAR.taper_threshold,
) -> Decimal:
    """Apply the taper: £1 of allowance lost per whole £2 above the threshold.

    The result never drops below zero, so the allowance reaches zero at
    ``taper_threshold + 2 * base_allowance`` (£125,140 for the standard
    allowance).
    """
    if annual_gross <= taper_threshold:
        return base_allowance

    reduction = ((annual_gross - taper_threshold) / 2).to_integral_value(rounding=ROUND_FLOOR)
    return max(Decimal("0"), base_allowance - reduction)


def base_allowance_for(mode: TaxCodeMode | None) -> Decimal:
    """Allowance implied by a tax code before any taper."""
    if mode is None:
        return TAX_YEAR.personal_allowance
    if isinstance(mode, Standard):
        return mode.allowance
    return Decimal("0")


def tapers(mode: TaxCodeMode | None) -> bool:
    """Whether the high-income taper applies under this mode."""
    return mode is None or isinstance(mode, Standard | ZeroAllowance)


def resolve_personal_allowance(annual_gross: Decimal, mode: TaxCodeMode | None) -> Decimal:
    """Base allowance for the mode, tapered where the mode allows it."""
    base = base_allowance_for(mode)
    if tapers(mode):
        return compute_personal_allowance(annual_gross, base)
    return base
