"""Unit tests for PayrollAggregator.

Tests normalization, the zero-income case and installment division.
"""

import logging

import pytest
from decimal import Decimal

from netpay_engine.calculators.engine import (
    PayrollAggregator,
    coerce_amount,
    coerce_installments,
    estimate_net_pay,
)
from netpay_engine.calculators.types import (
    CalculationResult,
    InvalidMaritalStatusError,
    MaritalStatus,
    PersonalSituation,
    SalaryInput,
)


def _all_amounts(result: CalculationResult) -> list[Decimal]:
    return [
        result.gross_annual,
        result.gross_monthly,
        result.withholding_rate,
        result.withholding_annual,
        result.withholding_monthly,
        result.contribution_annual,
        result.contribution_monthly,
        result.net_annual,
        result.net_monthly,
    ]


class TestCoercion:
    """Test input normalization."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (30000, Decimal("30000")),
            ("30000", Decimal("30000")),
            (" 2500.50 ", Decimal("2500.50")),
            (0.1, Decimal("0.1")),
            (Decimal("123.45"), Decimal("123.45")),
            (-100, Decimal("0")),
            (None, Decimal("0")),
            ("", Decimal("0")),
            ("abc", Decimal("0")),
            ("NaN", Decimal("0")),
            (float("inf"), Decimal("0")),
            (True, Decimal("0")),
            ([1, 2], Decimal("0")),
        ],
    )
    def test_coerce_amount(self, raw, expected):
        assert coerce_amount(raw) == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [(12, 12), (14, 14), ("12", 12), (0, 1), (-3, 1), (None, 1), ("x", 1)],
    )
    def test_coerce_installments_never_below_one(self, raw, expected):
        assert coerce_installments(raw) == expected


class TestZeroIncome:
    """Zero or invalid gross yields an all-zero result."""

    @pytest.mark.parametrize("gross", [0, -1, "-25000", None, "not a number"])
    def test_all_fields_zero(self, aggregator, gross):
        result = aggregator.aggregate(
            SalaryInput(gross_annual=gross, installments_per_year=12),
            PersonalSituation(dependent_count=3, marital_status=MaritalStatus.MARRIED),
        )
        assert all(value == 0 for value in _all_amounts(result))
        assert result.withholding_rate == Decimal("0")


class TestReferenceScenario:
    """30000 gross, 14 installments, no dependents, single."""

    @pytest.fixture
    def result(self, aggregator) -> CalculationResult:
        return aggregator.aggregate(
            SalaryInput(gross_annual=30000, installments_per_year=14),
            PersonalSituation(dependent_count=0, marital_status=MaritalStatus.SINGLE),
        )

    def test_rate(self, result):
        assert result.withholding_rate == Decimal("0.16335")

    def test_annual_figures(self, result):
        assert result.withholding_annual == Decimal("4900.5")
        assert result.contribution_annual == Decimal("1920")
        assert result.net_annual == Decimal("23179.5")

    def test_per_installment_figures(self, result):
        assert result.gross_monthly == Decimal("30000") / 14
        assert result.withholding_monthly == Decimal("4900.5") / 14
        assert result.contribution_monthly == Decimal("1920") / 14
        assert result.net_monthly == Decimal("23179.5") / 14
        assert abs(result.net_monthly - Decimal("1655.6786")) < Decimal("0.0001")

    def test_twelve_installments(self, aggregator):
        result = aggregator.aggregate(SalaryInput(gross_annual=30000, installments_per_year=12))
        assert result.net_annual == Decimal("23179.5")
        assert result.net_monthly == Decimal("1931.625")
        assert result.gross_monthly == Decimal("2500")


class TestAggregation:
    """Test aggregation identities."""

    def test_net_identity(self, aggregator):
        result = aggregator.aggregate(
            SalaryInput(gross_annual="45250", installments_per_year=14),
            PersonalSituation(dependent_count=2, marital_status=MaritalStatus.MARRIED),
        )
        gross = Decimal("45250")
        expected = gross - gross * result.withholding_rate - gross * Decimal("0.064")
        assert result.net_annual == expected

    def test_deductions_divided_by_same_installments(self, aggregator):
        result = aggregator.aggregate(SalaryInput(gross_annual=52000, installments_per_year=14))
        assert result.withholding_monthly * 14 == pytest.approx(result.withholding_annual)
        assert result.contribution_monthly * 14 == pytest.approx(result.contribution_annual)
        assert result.gross_monthly * 14 == pytest.approx(result.gross_annual)

    def test_infinite_dependents(self, aggregator):
        result = aggregator.aggregate(
            SalaryInput(gross_annual=30000, installments_per_year=14),
            PersonalSituation(dependent_count=float("inf")),
        )
        three = aggregator.aggregate(
            SalaryInput(gross_annual=30000, installments_per_year=14),
            PersonalSituation(dependent_count=3),
        )
        assert result == three

    def test_zero_installments_does_not_divide_by_zero(self, aggregator):
        result = aggregator.aggregate(SalaryInput(gross_annual=30000, installments_per_year=0))
        assert result.installments_per_year == 1
        assert result.net_monthly == result.net_annual

    def test_default_situation(self, aggregator):
        with_default = aggregator.aggregate(SalaryInput(gross_annual=30000))
        explicit = aggregator.aggregate(
            SalaryInput(gross_annual=30000),
            PersonalSituation(dependent_count=0, marital_status=MaritalStatus.SINGLE),
        )
        assert with_default == explicit

    def test_idempotent(self, aggregator):
        salary = SalaryInput(gross_annual="38750.25", installments_per_year=12)
        situation = PersonalSituation(dependent_count=1, marital_status=MaritalStatus.MARRIED)
        assert aggregator.aggregate(salary, situation) == aggregator.aggregate(salary, situation)

    def test_result_is_immutable(self, aggregator):
        result = aggregator.aggregate(SalaryInput(gross_annual=30000))
        with pytest.raises(AttributeError):
            result.net_annual = Decimal("1")

    def test_logs_estimate_at_debug(self, aggregator, caplog):
        with caplog.at_level(logging.DEBUG, logger="netpay_engine.calculators.engine"):
            aggregator.aggregate(SalaryInput(gross_annual=30000))
        assert "rate=0.16335" in caplog.text


class TestEstimateNetPay:
    """Test the plain-argument wrapper."""

    def test_matches_aggregator(self, aggregator):
        result = estimate_net_pay(30000, 14, 0, "SINGLE")
        assert result == aggregator.aggregate(SalaryInput(gross_annual=30000))

    def test_spanish_labels(self):
        assert estimate_net_pay(30000, marital_status="CASADO") == estimate_net_pay(
            30000, marital_status="MARRIED"
        )

    def test_unrecognized_marital_status(self):
        with pytest.raises(InvalidMaritalStatusError):
            estimate_net_pay(30000, marital_status="DIVORCED")
