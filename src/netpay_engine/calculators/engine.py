"""Net pay estimation - main orchestrator."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from netpay_engine.calculators.contribution import ContributionCalculator
from netpay_engine.calculators.tax_calculator import TaxBracketEngine
from netpay_engine.calculators.types import (
    CalculationResult,
    MaritalStatus,
    PersonalSituation,
    SalaryInput,
)

logger = logging.getLogger(__name__)


def coerce_amount(value: object) -> Decimal:
    """Convert a raw gross amount to a non-negative Decimal.

    Missing, non-numeric and non-finite values become 0. Floats go through
    str() so 0.1 stays 0.1.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return Decimal("0")
    if not amount.is_finite():
        return Decimal("0")
    return max(Decimal("0"), amount)


def coerce_installments(value: object) -> int:
    """Installment count used as divisor; never below 1."""
    try:
        installments = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return 1
    return max(1, installments)


class PayrollAggregator:
    """Combines withholding and contribution into annual and per-installment pay.

    Calculation pipeline (stable order):
    1) Normalize gross annual (non-numeric -> 0, negative -> 0)
    2) Zero gross short-circuits to the all-zero result
    3) Effective withholding rate from TaxBracketEngine
    4) Annual contribution from ContributionCalculator
    5) Net annual = gross - withholding - contribution
    6) Divide gross, withholding, contribution and net by the installments

    Each call is independent; identical inputs give identical results.
    """

    def __init__(
        self,
        tax_engine: TaxBracketEngine | None = None,
        contribution_calculator: ContributionCalculator | None = None,
    ):
        self.tax_engine = tax_engine or TaxBracketEngine()
        self.contribution_calculator = contribution_calculator or ContributionCalculator()

    def aggregate(
        self,
        salary: SalaryInput,
        situation: PersonalSituation | None = None,
    ) -> CalculationResult:
        """Estimate net pay for one salary and personal situation."""
        situation = situation or PersonalSituation()
        gross = coerce_amount(salary.gross_annual)
        installments = coerce_installments(salary.installments_per_year)

        if gross <= 0:
            logger.debug("Zero gross income, returning zero result")
            return CalculationResult.zero(installments)

        withholding_rate = self.tax_engine.compute_effective_withholding_rate(
            gross,
            situation.dependent_count,
            situation.marital_status,
        )
        contribution_annual = self.contribution_calculator.compute_annual_contribution(gross)
        withholding_annual = gross * withholding_rate
        net_annual = gross - withholding_annual - contribution_annual

        logger.debug(
            "Estimated gross=%s installments=%s dependents=%s status=%s rate=%s net=%s",
            gross,
            installments,
            situation.dependent_count,
            situation.marital_status,
            withholding_rate,
            net_annual,
        )

        return CalculationResult(
            gross_annual=gross,
            gross_monthly=gross / installments,
            withholding_rate=withholding_rate,
            withholding_annual=withholding_annual,
            withholding_monthly=withholding_annual / installments,
            contribution_annual=contribution_annual,
            contribution_monthly=contribution_annual / installments,
            net_annual=net_annual,
            net_monthly=net_annual / installments,
            installments_per_year=installments,
        )


def estimate_net_pay(
    gross_annual: object,
    installments_per_year: int = 14,
    dependent_count: int = 0,
    marital_status: str = "SINGLE",
) -> CalculationResult:
    """Convenience wrapper around PayrollAggregator for plain arguments."""
    return PayrollAggregator().aggregate(
        SalaryInput(gross_annual=gross_annual, installments_per_year=installments_per_year),
        PersonalSituation(
            dependent_count=dependent_count,
            marital_status=MaritalStatus.parse(marital_status),
        ),
    )
