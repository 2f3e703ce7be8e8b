"""Employee National Insurance calculator."""

from decimal import Decimal

from config import load_yaml_config
from takehome.calculators.periods import round_money
from takehome.calculators.tax_data import TAX_YEAR

NI_CATEGORIES: tuple[str, ...] = tuple(sorted(TAX_YEAR.ni_rates))


def calculate_national_insurance(annual_gross: Decimal, category: str = "A") -> Decimal:
    """Calculate annual employee NI for a category letter.

    The main rate applies between the primary threshold and the upper
    earnings limit, the upper rate above it. Independent of tax code and
    personal allowance.

    Raises:
        ValueError: if the category letter is unknown.
    """
    rates = TAX_YEAR.ni_rates.get(category.upper())
    if rates is None:
        raise ValueError(f"Unknown NI category: {category}. Available: {', '.join(NI_CATEGORIES)}")

    threshold = TAX_YEAR.ni_primary_threshold
    limit = TAX_YEAR.ni_upper_earnings_limit
    main_base = max(Decimal("0"), min(annual_gross, limit) - threshold)
    upper_base = max(Decimal("0"), annual_gross - limit)
    return round_money(main_base * rates.main + upper_base * rates.upper)


def describe_ni_category(category: str) -> str:
    """Human-readable description of a category letter."""
    descriptions = load_yaml_config("ni_categories.yaml")
    try:
        return descriptions[category.upper()]
    except KeyError:
        raise ValueError(f"Unknown NI category: {category}") from None
