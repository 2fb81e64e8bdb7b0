"""Net pay calculation engine."""

from netpay_engine.calculators.contribution import ContributionCalculator
from netpay_engine.calculators.engine import PayrollAggregator, estimate_net_pay
from netpay_engine.calculators.line_builder import BreakdownBuilder
from netpay_engine.calculators.tax_calculator import DEFAULT_BRACKETS, TaxBracketEngine
from netpay_engine.calculators.types import (
    BreakdownLine,
    CalculationResult,
    InvalidMaritalStatusError,
    LineType,
    MaritalStatus,
    PersonalSituation,
    SalaryInput,
    TaxBracket,
)

__all__ = [
    "BreakdownBuilder",
    "BreakdownLine",
    "CalculationResult",
    "ContributionCalculator",
    "DEFAULT_BRACKETS",
    "InvalidMaritalStatusError",
    "LineType",
    "MaritalStatus",
    "PayrollAggregator",
    "PersonalSituation",
    "SalaryInput",
    "TaxBracket",
    "TaxBracketEngine",
    "estimate_net_pay",
]
