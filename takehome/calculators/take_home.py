"""Take-home calculator: composes income tax and NI, and inverts it for net-to-gross."""

import logging
from decimal import Decimal

from config.settings import settings
from takehome.calculators.income_tax import calculate_income_tax
from takehome.calculators.national_insurance import calculate_national_insurance
from takehome.calculators.periods import Period, from_annual, round_money, to_annual
from takehome.calculators.personal_allowance import base_allowance_for, resolve_personal_allowance
from takehome.calculators.tax_code import ParsedTaxCode, parse_tax_code
from takehome.calculators.tax_data import REVERSE_SEARCH_MULTIPLIER, Jurisdiction
from takehome.models import (
    AnnualSummary,
    CalculationInput,
    Direction,
    PeriodSummary,
    ResultMeta,
    TakeHomeResult,
)

logger = logging.getLogger(__name__)


class ReverseEstimateError(RuntimeError):
    """The net-to-gross search finished without evaluating a single gross figure."""


def _resolve_jurisdiction(explicit: Jurisdiction | None, parsed: ParsedTaxCode) -> Jurisdiction:
    if explicit is not None:
        return Jurisdiction(explicit)
    if parsed.implied_jurisdiction is not None:
        return parsed.implied_jurisdiction
    return Jurisdiction(settings.default_jurisdiction)


def _per_period(annual: AnnualSummary, period: Period, days_per_year: int, gross: Decimal) -> PeriodSummary:
    def convert(value: Decimal) -> Decimal:
        return round_money(from_annual(value, period, days_per_year))

    return PeriodSummary(
        period=period,
        gross=round_money(gross),
        taxable_income=convert(annual.taxable_income),
        income_tax=convert(annual.income_tax),
        national_insurance=convert(annual.national_insurance),
        take_home=convert(annual.take_home),
    )


def estimate_take_home(data: CalculationInput) -> TakeHomeResult:
    """Gross to net.

    Annualizes the amount, applies the tax code and personal allowance
    taper, runs income tax and NI independently, and reports annual and
    per-period figures. Every monetary field is rounded to pence on its own;
    take-home is derived from the rounded tax and NI so that
    ``gross - income_tax - national_insurance == take_home`` holds exactly.
    """
    annual_gross = to_annual(data.amount, data.period, data.days_per_year)

    parsed = parse_tax_code(data.tax_code)
    jurisdiction = _resolve_jurisdiction(data.jurisdiction, parsed)

    allowance = resolve_personal_allowance(annual_gross, parsed.mode)
    taxable = max(Decimal("0"), annual_gross - allowance)

    income_tax = calculate_income_tax(taxable, jurisdiction, parsed.mode)
    national_insurance = calculate_national_insurance(annual_gross, data.ni_category)
    take_home = annual_gross - income_tax.total_tax - national_insurance

    logger.debug(
        "Gross %s/yr (%s, code=%s, NI %s): tax %s, NI %s, take-home %s",
        annual_gross, jurisdiction, parsed.code, data.ni_category,
        income_tax.total_tax, national_insurance, take_home,
    )

    annual = AnnualSummary(
        gross=round_money(annual_gross),
        personal_allowance=round_money(allowance),
        taxable_income=round_money(taxable),
        income_tax=income_tax.total_tax,
        income_tax_breakdown=income_tax.breakdown,
        national_insurance=national_insurance,
        take_home=round_money(take_home),
    )

    return TakeHomeResult(
        annual=annual,
        per_period=_per_period(annual, data.period, data.days_per_year, data.amount),
        meta=ResultMeta(
            jurisdiction=jurisdiction,
            ni_category=data.ni_category,
            tax_code_used=parsed.code,
        ),
    )


def _zero_result(data: CalculationInput) -> TakeHomeResult:
    parsed = parse_tax_code(data.tax_code)
    zero = Decimal("0.00")
    annual = AnnualSummary(
        gross=zero,
        personal_allowance=round_money(base_allowance_for(parsed.mode)),
        taxable_income=zero,
        income_tax=zero,
        national_insurance=zero,
        take_home=zero,
    )
    return TakeHomeResult(
        annual=annual,
        per_period=_per_period(annual, data.period, data.days_per_year, zero),
        meta=ResultMeta(
            jurisdiction=_resolve_jurisdiction(data.jurisdiction, parsed),
            ni_category=data.ni_category,
            tax_code_used=parsed.code,
        ),
    )


def estimate_gross_from_net(data: CalculationInput) -> TakeHomeResult:
    """Net to gross, by bisection over the gross-to-net calculation.

    Take-home is non-decreasing in gross, so the search brackets the target
    between ``target`` (no deductions) and ``3 * target`` (see
    ``REVERSE_SEARCH_MULTIPLIER``). The last evaluated result is returned
    even if the tolerance is not met within the iteration budget.

    Raises:
        ReverseEstimateError: if no gross figure was evaluated at all.
    """
    target = to_annual(data.amount, data.period, data.days_per_year)
    if target <= 0:
        return _zero_result(data)

    tolerance = settings.reverse_tolerance
    low = target
    high = target * REVERSE_SEARCH_MULTIPLIER
    best: TakeHomeResult | None = None
    converged = False

    for iteration in range(1, settings.reverse_max_iterations + 1):
        mid = (low + high) / 2
        best = estimate_take_home(data.model_copy(update={
            "amount": mid,
            "period": Period.YEAR,
            "direction": Direction.GROSS_TO_NET,
        }))

        diff = best.annual.take_home - target
        if abs(diff) < tolerance:
            converged = True
            logger.debug("Net %s/yr reached at gross %s after %d iterations", target, mid, iteration)
            break

        if diff < 0:
            low = mid
        else:
            high = mid

    if best is None:
        raise ReverseEstimateError(f"No gross figure evaluated for target net {target}")

    if not converged:
        logger.warning(
            "Net-to-gross search for %s/yr stopped after %d iterations, take-home %s",
            target, settings.reverse_max_iterations, best.annual.take_home,
        )

    annual = best.annual
    return TakeHomeResult(
        annual=annual,
        per_period=_per_period(
            annual, data.period, data.days_per_year,
            from_annual(annual.gross, data.period, data.days_per_year),
        ),
        meta=best.meta,
    )


def calculate(data: CalculationInput) -> TakeHomeResult:
    """Run the calculation in the direction the input asks for."""
    if data.direction is Direction.NET_TO_GROSS:
        return estimate_gross_from_net(data)
    return estimate_take_home(data)
