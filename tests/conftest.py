"""Shared test fixtures."""

from typing import Any

import pytest

from takehome.models import CalculationInput


@pytest.fixture
def make_input():
    """Factory for CalculationInput with yearly, rUK, category A defaults."""

    def _make(amount: str | int = 30000, **overrides: Any) -> CalculationInput:
        return CalculationInput(amount=amount, **overrides)

    return _make
