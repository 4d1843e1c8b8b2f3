"""Shared fixtures for calcexpr tests."""

from typing import Any, Callable

import pytest

from calcexpr import CalcExpr


@pytest.fixture
def calc():
    """Create a fresh float calculator for each test."""
    return CalcExpr()


@pytest.fixture
def calc_int():
    """Create a fresh integer calculator for each test."""
    return CalcExpr(int)


@pytest.fixture
def calc_custom():
    """Factory for calculators over a custom numeric type."""
    def _create_calc(number_type: Callable[[str], Any]) -> CalcExpr:
        return CalcExpr(number_type)
    return _create_calc
