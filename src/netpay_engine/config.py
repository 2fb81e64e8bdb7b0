"""Configuration management for the net pay estimator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import lru_cache

from dotenv import load_dotenv

from netpay_engine.calculators.types import MaritalStatus

ALLOWED_INSTALLMENTS = (12, 14)


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    engine_version: str
    host: str
    port: int
    debug: bool
    log_level: str
    default_gross_annual: Decimal
    default_installments: int
    default_dependents: int
    default_marital_status: MaritalStatus

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        try:
            gross = Decimal(os.getenv("DEFAULT_GROSS_ANNUAL", "30000"))
        except InvalidOperation:
            gross = Decimal("30000")

        try:
            installments = int(os.getenv("DEFAULT_INSTALLMENTS", "14"))
        except ValueError:
            installments = 14
        if installments not in ALLOWED_INSTALLMENTS:
            installments = 14

        try:
            dependents = max(0, int(os.getenv("DEFAULT_DEPENDENTS", "0")))
        except ValueError:
            dependents = 0

        return cls(
            engine_version=os.getenv("ENGINE_VERSION", "1.0.0"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            default_gross_annual=gross,
            default_installments=installments,
            default_dependents=dependents,
            default_marital_status=MaritalStatus.parse(
                os.getenv("DEFAULT_MARITAL_STATUS", "SINGLE")
            ),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
