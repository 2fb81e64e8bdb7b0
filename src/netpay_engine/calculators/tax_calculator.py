"""Income tax withholding estimation using progressive brackets."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from netpay_engine.calculators.types import MaritalStatus, TaxBracket, as_decimal

INFINITY = Decimal("Infinity")

DEFAULT_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(upper_limit=Decimal("12450"), rate=Decimal("0.19")),
    TaxBracket(upper_limit=Decimal("20200"), rate=Decimal("0.24")),
    TaxBracket(upper_limit=Decimal("35200"), rate=Decimal("0.30")),
    TaxBracket(upper_limit=Decimal("60000"), rate=Decimal("0.37")),
    TaxBracket(upper_limit=Decimal("300000"), rate=Decimal("0.45")),
    TaxBracket(upper_limit=INFINITY, rate=Decimal("0.47")),
)


class TaxBracketEngine:
    """Estimates an effective withholding rate from gross annual income.

    Pipeline:
    1) Subtract the earned income reduction from gross (floored at 0)
    2) Subtract the personal minimum (dependents, marital status)
    3) Accumulate tax bracket by bracket over the remaining base
    4) Divide by gross and clamp to the policy range

    The clamp is applied unconditionally for positive gross, so incomes whose
    bracket tax would exceed 45% are still reported at the 45% ceiling.
    """

    EARNED_INCOME_REDUCTION = Decimal("2000")
    PERSONAL_MINIMUM_BASE = Decimal("5550")
    DEPENDENT_INCREMENTS = (
        Decimal("0"),
        Decimal("2400"),
        Decimal("4800"),
        Decimal("7200"),  # 3 or more
    )
    MARITAL_INCREMENT = Decimal("1200")
    MIN_RATE = Decimal("0.02")
    MAX_RATE = Decimal("0.45")

    def __init__(self, brackets: Sequence[TaxBracket] = DEFAULT_BRACKETS):
        self.brackets = tuple(brackets)

    def compute_effective_withholding_rate(
        self,
        gross_annual: Decimal | int | float,
        dependent_count: int | None = 0,
        marital_status: MaritalStatus | str = MaritalStatus.SINGLE,
    ) -> Decimal:
        """Return the clamped effective withholding rate, or 0 for no income.

        Non-finite gross (NaN, infinities) counts as no income.
        """
        gross_annual = as_decimal(gross_annual)
        if not gross_annual.is_finite() or gross_annual <= 0:
            return Decimal("0")

        taxable_base = max(Decimal("0"), gross_annual - self.EARNED_INCOME_REDUCTION)
        minimum = self.personal_minimum(dependent_count, marital_status)
        base = max(Decimal("0"), taxable_base - minimum)

        tax = self.calculate_progressive_tax(base)
        effective_rate = tax / gross_annual

        return min(self.MAX_RATE, max(self.MIN_RATE, effective_rate))

    def personal_minimum(
        self,
        dependent_count: int | None,
        marital_status: MaritalStatus | str,
    ) -> Decimal:
        """Untaxed allowance for the given personal situation.

        Dependent counts below 1 (or missing, or NaN) add nothing; the increment
        stops growing at 3 dependents.
        """
        status = MaritalStatus.parse(marital_status)

        top = len(self.DEPENDENT_INCREMENTS) - 1
        dependents = dependent_count if dependent_count and dependent_count > 0 else 0
        index = int(min(dependents, top))

        minimum = self.PERSONAL_MINIMUM_BASE + self.DEPENDENT_INCREMENTS[index]
        if status is MaritalStatus.MARRIED:
            minimum += self.MARITAL_INCREMENT
        return minimum

    def calculate_progressive_tax(self, base: Decimal) -> Decimal:
        """Accumulate tax over the brackets the base reaches."""
        total_tax = Decimal("0")
        previous_limit = Decimal("0")

        for bracket in self.brackets:
            if base > previous_limit:
                taxable_in_bracket = min(base, bracket.upper_limit) - previous_limit
                total_tax += taxable_in_bracket * bracket.rate
            if base <= bracket.upper_limit:
                break
            previous_limit = bracket.upper_limit

        return total_tax
