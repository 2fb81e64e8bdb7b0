"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from netpay_engine import __version__
from netpay_engine.api.routes import estimates_router, health_router
from netpay_engine.calculators.types import InvalidMaritalStatusError

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Net Pay Estimator API",
        description="Estimated net pay from gross annual salary",
        version=__version__,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(InvalidMaritalStatusError)
    async def marital_status_exception_handler(
        request: Request, exc: InvalidMaritalStatusError
    ) -> JSONResponse:
        """Unrecognized marital status outside request validation."""
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "code": "INVALID_MARITAL_STATUS"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(estimates_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
