"""Mini README: Battery consumption table and usage estimates.

Structure:
    * ConsumptionTable - per-model battery percent per kilometre.
    * DEFAULT_CONSUMPTION_TABLE - the six models shipped with the demo fleet.
    * estimate_battery_usage - capped estimate used for display and validation.
    * estimate_raw_battery_usage - uncapped figure for ranking failing routes.

The table is passed in explicitly so deployments and tests can swap in their
own models; ``ConsumptionTable.from_settings`` builds one from configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

MAX_BATTERY_PERCENT = 100.0
DEFAULT_RATE_PER_KM = 8.0
DEFAULT_CONSUMPTION_RATES: Mapping[str, float] = MappingProxyType(
    {
        "DJI Mavic Pro": 8.0,
        "DJI Air 2S": 7.0,
        "DJI Mini 3": 6.0,
        "Autel EVO Lite+": 9.0,
        "Skydio 2+": 10.0,
        "Parrot Anafi": 8.0,
    }
)


@dataclass(frozen=True)
class ConsumptionTable:
    """Battery percent consumed per kilometre, keyed by drone model."""

    rates: Mapping[str, float] = field(default_factory=lambda: DEFAULT_CONSUMPTION_RATES)
    default_rate: float = DEFAULT_RATE_PER_KM

    def __post_init__(self) -> None:
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    @classmethod
    def from_settings(cls, settings: Any) -> "ConsumptionTable":
        """Build a table from an object exposing ``consumption_rates`` and ``default_consumption_rate``."""

        return cls(
            rates=settings.consumption_rates,
            default_rate=settings.default_consumption_rate,
        )

    def rate_for(self, drone_model: str) -> float:
        """Return the model's rate, falling back to ``default_rate`` for unknown models."""

        return self.rates.get(drone_model, self.default_rate)


DEFAULT_CONSUMPTION_TABLE = ConsumptionTable()


def estimate_raw_battery_usage(
    distance_km: float,
    drone_model: str,
    table: ConsumptionTable = DEFAULT_CONSUMPTION_TABLE,
) -> float:
    """Return ``distance_km * rate`` without the 100% ceiling."""

    return distance_km * table.rate_for(drone_model)


def estimate_battery_usage(
    distance_km: float,
    drone_model: str,
    table: ConsumptionTable = DEFAULT_CONSUMPTION_TABLE,
) -> float:
    """Return the projected battery percentage used, capped at 100.

    NaN distances stay NaN so callers can detect them before display.
    """

    return min(estimate_raw_battery_usage(distance_km, drone_model, table), MAX_BATTERY_PERCENT)
