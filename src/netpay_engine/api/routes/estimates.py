"""Net pay estimate endpoints."""

from fastapi import APIRouter, status

from netpay_engine.api.dependencies import Aggregator, AppSettings
from netpay_engine.api.schemas import (
    BracketTableResponse,
    BreakdownLineResponse,
    ErrorResponse,
    EstimateInputs,
    EstimateRequest,
    EstimateResponse,
    EstimateResult,
    TaxBracketResponse,
)
from netpay_engine.calculators.contribution import ContributionCalculator
from netpay_engine.calculators.line_builder import BreakdownBuilder
from netpay_engine.calculators.tax_calculator import TaxBracketEngine
from netpay_engine.calculators.types import PersonalSituation, SalaryInput

router = APIRouter(prefix="/estimates", tags=["estimates"])


@router.get("/defaults", response_model=EstimateInputs)
async def get_defaults(settings: AppSettings) -> EstimateInputs:
    """Inputs used when a request omits them."""
    return EstimateInputs(
        gross_annual=settings.default_gross_annual,
        installments_per_year=settings.default_installments,
        dependent_count=settings.default_dependents,
        marital_status=settings.default_marital_status,
    )


@router.post(
    "",
    response_model=EstimateResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
async def create_estimate(
    aggregator: Aggregator,
    settings: AppSettings,
    payload: EstimateRequest,
) -> EstimateResponse:
    """Estimate net pay for the given salary and personal situation."""
    inputs = EstimateInputs(
        gross_annual=(
            payload.gross_annual
            if payload.gross_annual is not None
            else settings.default_gross_annual
        ),
        installments_per_year=payload.installments_per_year or settings.default_installments,
        dependent_count=(
            payload.dependent_count
            if payload.dependent_count is not None
            else settings.default_dependents
        ),
        marital_status=payload.marital_status or settings.default_marital_status,
    )

    result = aggregator.aggregate(
        SalaryInput(
            gross_annual=inputs.gross_annual,
            installments_per_year=inputs.installments_per_year,
        ),
        PersonalSituation(
            dependent_count=inputs.dependent_count,
            marital_status=inputs.marital_status,
        ),
    )
    breakdown = BreakdownBuilder.build(
        result, aggregator.contribution_calculator.rate
    )

    return EstimateResponse(
        inputs=inputs,
        result=EstimateResult.model_validate(result),
        breakdown=[BreakdownLineResponse.model_validate(line) for line in breakdown],
        engine_version=settings.engine_version,
    )


@router.get("/brackets", response_model=BracketTableResponse)
async def get_brackets(aggregator: Aggregator) -> BracketTableResponse:
    """Constant table the estimator works with."""
    engine = aggregator.tax_engine
    return BracketTableResponse(
        brackets=[
            TaxBracketResponse(
                upper_limit=b.upper_limit if b.upper_limit.is_finite() else None,
                rate=b.rate,
            )
            for b in engine.brackets
        ],
        earned_income_reduction=TaxBracketEngine.EARNED_INCOME_REDUCTION,
        personal_minimum_base=TaxBracketEngine.PERSONAL_MINIMUM_BASE,
        dependent_increments=list(TaxBracketEngine.DEPENDENT_INCREMENTS),
        marital_increment=TaxBracketEngine.MARITAL_INCREMENT,
        contribution_rate=aggregator.contribution_calculator.rate,
        min_rate=TaxBracketEngine.MIN_RATE,
        max_rate=TaxBracketEngine.MAX_RATE,
    )
