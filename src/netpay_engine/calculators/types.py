"""Type definitions for the net pay calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


def as_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a number to Decimal without clamping. Floats go through str()."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class InvalidMaritalStatusError(ValueError):
    """Raised when a marital status value is not recognized."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Unrecognized marital status {value!r}; expected one of "
            f"{', '.join(m.value for m in MaritalStatus)}"
        )


class MaritalStatus(str, Enum):
    """Marital status used for the personal minimum."""

    SINGLE = "SINGLE"
    MARRIED = "MARRIED"

    @classmethod
    def parse(cls, value: MaritalStatus | str) -> MaritalStatus:
        """Resolve a member from its name or one of the Spanish labels.

        Raises InvalidMaritalStatusError for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in _MARITAL_ALIASES:
                return _MARITAL_ALIASES[key]
        raise InvalidMaritalStatusError(value)


_MARITAL_ALIASES: dict[str, MaritalStatus] = {
    "SINGLE": MaritalStatus.SINGLE,
    "MARRIED": MaritalStatus.MARRIED,
    "SOLTERO": MaritalStatus.SINGLE,
    "CASADO": MaritalStatus.MARRIED,
}


class LineType(str, Enum):
    """Breakdown line types."""

    EARNING = "EARNING"
    TAX = "TAX"
    CONTRIBUTION = "CONTRIBUTION"
    NET = "NET"


@dataclass(frozen=True)
class TaxBracket:
    """Tax bracket for progressive taxation."""

    upper_limit: Decimal  # Decimal("Infinity") for the last bracket
    rate: Decimal  # As decimal, e.g., 0.24 for 24%


@dataclass(frozen=True)
class PersonalSituation:
    """Dependents and marital status of the employee."""

    dependent_count: int = 0
    marital_status: MaritalStatus = MaritalStatus.SINGLE


@dataclass(frozen=True)
class SalaryInput:
    """Gross annual salary and how many installments it is paid in."""

    gross_annual: Decimal | int | float | str | None = Decimal("30000")
    installments_per_year: int = 14


@dataclass(frozen=True)
class CalculationResult:
    """Result of a single net pay estimation.

    Per-installment figures are the annual figure divided by the number of
    installments. Nothing is rounded; formatting is left to the caller.
    """

    gross_annual: Decimal
    gross_monthly: Decimal
    withholding_rate: Decimal
    withholding_annual: Decimal
    withholding_monthly: Decimal
    contribution_annual: Decimal
    contribution_monthly: Decimal
    net_annual: Decimal
    net_monthly: Decimal
    installments_per_year: int

    @classmethod
    def zero(cls, installments_per_year: int) -> CalculationResult:
        """All-zero result for the zero-income case."""
        zero = Decimal("0")
        return cls(
            gross_annual=zero,
            gross_monthly=zero,
            withholding_rate=zero,
            withholding_annual=zero,
            withholding_monthly=zero,
            contribution_annual=zero,
            contribution_monthly=zero,
            net_annual=zero,
            net_monthly=zero,
            installments_per_year=installments_per_year,
        )

    def to_dict(self) -> dict[str, Decimal | int]:
        """Return the raw (unformatted) figures keyed by field name."""
        return {
            "gross_annual": self.gross_annual,
            "gross_monthly": self.gross_monthly,
            "withholding_rate": self.withholding_rate,
            "withholding_annual": self.withholding_annual,
            "withholding_monthly": self.withholding_monthly,
            "contribution_annual": self.contribution_annual,
            "contribution_monthly": self.contribution_monthly,
            "net_annual": self.net_annual,
            "net_monthly": self.net_monthly,
            "installments_per_year": self.installments_per_year,
        }


@dataclass(frozen=True)
class BreakdownLine:
    """One signed line of the per-installment breakdown."""

    line_type: LineType
    label: str
    amount: Decimal  # Signed: deductions are negative
    rate: Decimal | None = None
