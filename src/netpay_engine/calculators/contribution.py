"""Flat-rate social contribution."""

from __future__ import annotations

from decimal import Decimal

from netpay_engine.calculators.types import as_decimal


class ContributionCalculator:
    """Computes the employee social contribution as a flat share of gross.

    No clamping happens here: a negative gross yields a negative amount.
    Guarding the input is the aggregator's job.
    """

    FLAT_RATE = Decimal("0.064")

    def __init__(self, rate: Decimal = FLAT_RATE):
        self.rate = rate

    def compute_annual_contribution(self, gross_annual: Decimal | int | float) -> Decimal:
        return as_decimal(gross_annual) * self.rate
