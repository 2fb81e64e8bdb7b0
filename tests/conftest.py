"""Pytest fixtures for net pay estimator tests."""

from __future__ import annotations

import pytest

from netpay_engine.calculators.contribution import ContributionCalculator
from netpay_engine.calculators.engine import PayrollAggregator
from netpay_engine.calculators.tax_calculator import TaxBracketEngine


@pytest.fixture
def tax_engine() -> TaxBracketEngine:
    return TaxBracketEngine()


@pytest.fixture
def contribution_calculator() -> ContributionCalculator:
    return ContributionCalculator()


@pytest.fixture
def aggregator() -> PayrollAggregator:
    return PayrollAggregator()
