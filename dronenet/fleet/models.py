"""Mini README: Fleet records consumed by the planning routines.

Structure:
    * DroneStatus - enum of operational states shown on the dashboard.
    * Drone - drone capabilities and last known position.
    * RechargeStop - community hosted charging hub.

Records validate their numeric ranges on construction so that the planner
never sees a non-positive range or a battery level outside 0-100.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from ..route_planning import ChargingStationCandidate, Coordinate


class DroneStatus(str, Enum):
    """Enumerate the operational states a drone can report."""

    ACTIVE = "active"
    LOW_BATTERY = "low_battery"
    CHARGING = "charging"
    OFFLINE = "offline"


@dataclass(slots=True)
class Drone:
    """Drone owned by a network member."""

    drone_id: str
    name: str
    model: str
    battery_level: float
    status: DroneStatus
    position: Coordinate
    max_range_km: float
    owner_id: str

    def __post_init__(self) -> None:
        if not 0 <= self.battery_level <= 100:
            raise ValueError(
                f"Battery level for {self.drone_id} must be between 0 and 100, got {self.battery_level}"
            )
        if not self.max_range_km > 0:
            raise ValueError(
                f"Maximum range for {self.drone_id} must be greater than 0, got {self.max_range_km}"
            )
        self.status = DroneStatus(self.status)

    def as_dict(self) -> Dict[str, object]:
        return {
            "drone_id": self.drone_id,
            "name": self.name,
            "model": self.model,
            "battery_level": self.battery_level,
            "status": self.status.value,
            "position": self.position.as_dict(),
            "max_range_km": self.max_range_km,
            "owner_id": self.owner_id,
        }


@dataclass(slots=True)
class RechargeStop:
    """Charging hub offered by a host in exchange for credits."""

    stop_id: str
    name: str
    position: Coordinate
    host_id: str
    host_name: str
    available: bool
    credits: int
    rating: float

    def as_candidate(self) -> ChargingStationCandidate:
        """Project the stop onto the fields the charging-stop selector needs."""

        return ChargingStationCandidate(
            station_id=self.stop_id,
            position=self.position,
            available=self.available,
        )

    def as_dict(self) -> Dict[str, object]:
        return {
            "stop_id": self.stop_id,
            "name": self.name,
            "position": self.position.as_dict(),
            "host_id": self.host_id,
            "host_name": self.host_name,
            "available": self.available,
            "credits": self.credits,
            "rating": self.rating,
        }
