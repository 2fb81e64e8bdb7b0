"""API routes."""

from netpay_engine.api.routes.estimates import router as estimates_router
from netpay_engine.api.routes.health import router as health_router

__all__ = ["estimates_router", "health_router"]
