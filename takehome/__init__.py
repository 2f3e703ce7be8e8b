"""UK take-home pay estimator for a single tax year."""

from takehome.calculators.take_home import (
    ReverseEstimateError,
    calculate,
    estimate_gross_from_net,
    estimate_take_home,
)
from takehome.models import CalculationInput, Direction, TakeHomeResult

__all__ = [
    "CalculationInput",
    "Direction",
    "ReverseEstimateError",
    "TakeHomeResult",
    "calculate",
    "estimate_gross_from_net",
    "estimate_take_home",
]
