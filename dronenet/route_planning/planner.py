"""Mini README: Route distance, validation and planning utilities.

Structure:
    * RoutePointRole / RoutePoint - tagged positions forming a route plan.
    * route_distance / segment_distances - distance aggregation.
    * ValidationResult / validate_route - range and battery checks.
    * ReachAssessment / assess_direct_reach - single-hop feasibility.
    * PlannedRoute / RoutePlanner - facade combining the above for a drone.

All functions are pure; validation reports problems as readable issue
strings rather than raising so the caller decides whether to block an action
or only warn.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence

from ..logging_utils import get_logger
from .charging import ChargingStationCandidate, find_optimal_charging_stations
from .consumption import (
    DEFAULT_CONSUMPTION_TABLE,
    ConsumptionTable,
    estimate_battery_usage,
)
from .geodesy import Coordinate, HasPosition, distance

LOGGER = get_logger(__name__)


class RoutePointRole(str, Enum):
    """Role a point plays within a route plan."""

    START = "start"
    WAYPOINT = "waypoint"
    CHARGING_STATION = "charging_station"
    END = "end"


@dataclass(frozen=True, slots=True)
class RoutePoint:
    """Position on a route, optionally tied to a known charging station."""

    position: Coordinate
    role: RoutePointRole = RoutePointRole.WAYPOINT
    identifier: Optional[str] = None

    @property
    def latitude(self) -> float:
        return self.position.latitude

    @property
    def longitude(self) -> float:
        return self.position.longitude

    @classmethod
    def at(
        cls,
        latitude: float,
        longitude: float,
        role: RoutePointRole = RoutePointRole.WAYPOINT,
        identifier: Optional[str] = None,
    ) -> "RoutePoint":
        return cls(Coordinate(latitude, longitude), RoutePointRole(role), identifier)

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {**self.position.as_dict(), "type": self.role.value}
        if self.identifier is not None:
            payload["id"] = self.identifier
        return payload


def segment_distances(points: Sequence[HasPosition]) -> List[float]:
    """Return the distance of every consecutive leg, in route order."""

    return [distance(points[index], points[index + 1]) for index in range(len(points) - 1)]


def route_distance(points: Sequence[HasPosition]) -> float:
    """Sum of leg distances in kilometres; ``0.0`` for fewer than two points."""

    return sum(segment_distances(points), 0.0)


def _format_plain_number(value: float) -> str:
    """Render numbers without a trailing ``.0`` for whole values (``35`` not ``35.0``)."""

    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


@dataclass(slots=True)
class ValidationResult:
    """Outcome of validating a route against a drone's range and battery."""

    is_valid: bool
    issues: List[str] = field(default_factory=list)
    total_distance_km: float = 0.0
    estimated_battery_usage: float = 0.0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "issues": list(self.issues),
            "total_distance_km": self.total_distance_km,
            "estimated_battery_usage": self.estimated_battery_usage,
        }


def range_issue(total_distance_km: float, max_range_km: float) -> str:
    return (
        f"Route distance ({total_distance_km:.1f} km) exceeds drone's maximum range "
        f"of {_format_plain_number(max_range_km)} km"
    )


def battery_issue(estimated_usage: float, current_battery_pct: float) -> str:
    return (
        f"Estimated battery usage ({estimated_usage:.1f}%) exceeds current battery level "
        f"({_format_plain_number(current_battery_pct)}%)"
    )


def validate_route(
    points: Sequence[HasPosition],
    max_range_km: float,
    current_battery_pct: float,
    drone_model: str,
    table: ConsumptionTable = DEFAULT_CONSUMPTION_TABLE,
) -> ValidationResult:
    """Check a route against range and battery; both checks always run."""

    total_distance = route_distance(points)
    estimated_usage = estimate_battery_usage(total_distance, drone_model, table)
    issues: List[str] = []

    if total_distance > max_range_km:
        issues.append(range_issue(total_distance, max_range_km))
    if estimated_usage > current_battery_pct:
        issues.append(battery_issue(estimated_usage, current_battery_pct))

    LOGGER.debug(
        "Validated %s-point route: %.2f km, %.1f%% battery, %s issue(s)",
        len(points),
        total_distance,
        estimated_usage,
        len(issues),
    )
    return ValidationResult(
        is_valid=not issues,
        issues=issues,
        total_distance_km=total_distance,
        estimated_battery_usage=estimated_usage,
    )


@dataclass(frozen=True, slots=True)
class ReachAssessment:
    """Direct-flight feasibility between two positions."""

    distance_km: float
    max_range_km: float

    @property
    def exceeds_range(self) -> bool:
        return self.distance_km > self.max_range_km

    def as_dict(self) -> Dict[str, Any]:
        return {
            "distance_km": self.distance_km,
            "max_range_km": self.max_range_km,
            "exceeds_range": self.exceeds_range,
        }


def assess_direct_reach(
    origin: HasPosition, destination: HasPosition, max_range_km: float
) -> ReachAssessment:
    """Measure a single hop, e.g. a drone flying straight to a charging stop."""

    return ReachAssessment(distance_km=distance(origin, destination), max_range_km=max_range_km)


class DroneProfile(Protocol):
    """Drone figures the planner consumes."""

    drone_id: str
    model: str
    battery_level: float
    max_range_km: float


@dataclass(slots=True)
class PlannedRoute:
    """Route summary ready to be stored or rendered by the caller."""

    drone_id: str
    points: List[RoutePoint]
    total_distance_km: float
    estimated_battery_usage: float
    validation: ValidationResult
    charging_stops: List[str] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "drone_id": self.drone_id,
            "waypoints": [point.as_dict() for point in self.points],
            "total_distance_km": self.total_distance_km,
            "estimated_battery_usage": self.estimated_battery_usage,
            "validation": self.validation.as_dict(),
            "charging_stops": list(self.charging_stops),
        }


class RoutePlanner:
    """Validate routes for a specific drone and suggest charging stops."""

    def __init__(self, *, consumption: ConsumptionTable = DEFAULT_CONSUMPTION_TABLE) -> None:
        self.consumption = consumption
        LOGGER.debug(
            "Initialised RoutePlanner with %s known models (default rate %s%%/km)",
            len(consumption.rates),
            consumption.default_rate,
        )

    def validate(self, drone: DroneProfile, points: Sequence[HasPosition]) -> ValidationResult:
        return validate_route(
            points,
            drone.max_range_km,
            drone.battery_level,
            drone.model,
            self.consumption,
        )

    def plan(
        self,
        drone: DroneProfile,
        points: Iterable[RoutePoint],
        stations: Iterable[ChargingStationCandidate] = (),
    ) -> PlannedRoute:
        """Summarise a route; stops are suggested only when range is exceeded."""

        points_list = list(points)
        validation = self.validate(drone, points_list)
        charging_stops: List[str] = []
        if validation.total_distance_km > drone.max_range_km:
            charging_stops = find_optimal_charging_stations(
                points_list, stations, drone.max_range_km
            )
        LOGGER.info(
            "Planned %s-point route for %s: %.2f km, valid=%s, %s charging stop(s)",
            len(points_list),
            drone.drone_id,
            validation.total_distance_km,
            validation.is_valid,
            len(charging_stops),
        )
        return PlannedRoute(
            drone_id=drone.drone_id,
            points=points_list,
            total_distance_km=validation.total_distance_km,
            estimated_battery_usage=validation.estimated_battery_usage,
            validation=validation,
            charging_stops=charging_stops,
        )
