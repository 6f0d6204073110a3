"""Mini README: Centralised configuration models and helpers for DroneNet.

Structure:
    * DronenetSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables (prefixed with
    ``DRONENET_``), pick the log level, choose service ports and tune the
    battery consumption table per deployment. ``DRONENET_CONSUMPTION_RATES``
    accepts a JSON object such as ``{"DJI Mini 3": 5.5}``. The configuration
    is cached so validation runs only once per process.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .route_planning.consumption import DEFAULT_CONSUMPTION_RATES, DEFAULT_RATE_PER_KM


class DronenetSettings(BaseSettings):
    """Runtime configuration for the DroneNet planning service."""

    model_config = SettingsConfigDict(
        env_prefix="DRONENET_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field(
        "INFO",
        description="Root log level applied by the CLI before starting work.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the HTTP API to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the HTTP API exposes.",
        ge=1,
        le=65535,
    )
    default_consumption_rate: float = Field(
        DEFAULT_RATE_PER_KM,
        description="Battery percent per km assumed for models missing from the table.",
        gt=0,
    )
    consumption_rates: Dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_CONSUMPTION_RATES),
        description="Battery percent consumed per km, keyed by drone model name.",
    )

    @field_validator("consumption_rates")
    @classmethod
    def _reject_negative_rates(cls, value: Dict[str, float]) -> Dict[str, float]:
        """Consumption rates may be zero but never negative."""

        negative = sorted(model for model, rate in value.items() if rate < 0)
        if negative:
            raise ValueError(f"Negative consumption rates for: {', '.join(negative)}")
        return value


@lru_cache()
def get_settings() -> DronenetSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return DronenetSettings()
