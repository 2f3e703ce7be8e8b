"""Pydantic models for calculation inputs and results."""

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.settings import settings
from takehome.calculators.periods import Period
from takehome.calculators.tax_data import TAX_YEAR, Jurisdiction


class Direction(StrEnum):
    """Which way a calculation runs."""

    GROSS_TO_NET = "gross_to_net"
    NET_TO_GROSS = "net_to_gross"


# --- Inputs ---


class CalculationInput(BaseModel):
    """A single take-home calculation request.

    ``amount`` is gross pay for gross_to_net and target net pay for
    net_to_gross, in ``period`` terms.
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(allow_inf_nan=False)
    period: Period = Period.YEAR
    jurisdiction: Jurisdiction | None = None
    tax_code: str | None = None
    ni_category: str = Field(default_factory=lambda: settings.default_ni_category)
    days_per_year: int = Field(default_factory=lambda: settings.default_days_per_year, gt=0)
    direction: Direction = Direction.GROSS_TO_NET

    @field_validator("amount")
    @classmethod
    def clamp_negative(cls, value: Decimal) -> Decimal:
        return max(value, Decimal("0"))

    @field_validator("ni_category")
    @classmethod
    def known_ni_category(cls, value: str) -> str:
        category = value.strip().upper()
        if category not in TAX_YEAR.ni_rates:
            valid = ", ".join(sorted(TAX_YEAR.ni_rates))
            raise ValueError(f"Unknown NI category: {value}. Must be one of: {valid}")
        return category


# --- Results ---


class BandTaxLine(BaseModel):
    """Tax owed on the slice of taxable income falling in one band."""

    model_config = ConfigDict(frozen=True)

    band_name: str
    taxable_in_band: Decimal
    rate: Decimal
    tax: Decimal


class AnnualSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    gross: Decimal
    personal_allowance: Decimal
    taxable_income: Decimal
    income_tax: Decimal
    income_tax_breakdown: tuple[BandTaxLine, ...] = ()
    national_insurance: Decimal
    take_home: Decimal


class PeriodSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    period: Period
    gross: Decimal
    taxable_income: Decimal
    income_tax: Decimal
    national_insurance: Decimal
    take_home: Decimal


class ResultMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    jurisdiction: Jurisdiction
    ni_category: str
    tax_code_used: str | None = None
    tax_year: str = TAX_YEAR.label


class TakeHomeResult(BaseModel):
    """Full result of a forward or reverse calculation."""

    model_config = ConfigDict(frozen=True)

    annual: AnnualSummary
    per_period: PeriodSummary
    meta: ResultMeta
