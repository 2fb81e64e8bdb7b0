"""Signed per-installment breakdown of an estimate."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from netpay_engine.calculators.contribution import ContributionCalculator
from netpay_engine.calculators.types import BreakdownLine, CalculationResult, LineType


class BreakdownBuilder:
    """Builds the per-installment breakdown shown next to the net figure.

    Sign conventions:
    - EARNING: positive
    - TAX (withholding): negative
    - CONTRIBUTION: negative
    - NET: positive, equal to the sum of the lines above it

    Amounts are not rounded; only the percentage in labels is.
    """

    @staticmethod
    def withholding_percent(rate: Decimal) -> int:
        """Rate as a whole percentage, rounding halves up."""
        return int((rate * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    @staticmethod
    def build(
        result: CalculationResult,
        contribution_rate: Decimal = ContributionCalculator.FLAT_RATE,
    ) -> list[BreakdownLine]:
        installments = result.installments_per_year
        percent = BreakdownBuilder.withholding_percent(result.withholding_rate)
        contribution_percent = (contribution_rate * 100).normalize()

        return [
            BreakdownLine(
                line_type=LineType.EARNING,
                label=f"Gross per installment ({installments} installments)",
                amount=result.gross_monthly,
            ),
            BreakdownLine(
                line_type=LineType.TAX,
                label=f"Income tax withholding ({percent}% est.)",
                amount=-result.withholding_monthly,
                rate=result.withholding_rate,
            ),
            BreakdownLine(
                line_type=LineType.CONTRIBUTION,
                label=f"Social contribution ({contribution_percent:f}%)",
                amount=-result.contribution_monthly,
                rate=contribution_rate,
            ),
            BreakdownLine(
                line_type=LineType.NET,
                label="Net per installment",
                amount=result.net_monthly,
            ),
        ]
