"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from netpay_engine.calculators.engine import PayrollAggregator
from netpay_engine.config import Settings, get_settings


def get_aggregator() -> PayrollAggregator:
    """Aggregator dependency; stateless, so a fresh one per request is fine."""
    return PayrollAggregator()


# Type aliases for cleaner dependency injection
Aggregator = Annotated[PayrollAggregator, Depends(get_aggregator)]
AppSettings = Annotated[Settings, Depends(get_settings)]
