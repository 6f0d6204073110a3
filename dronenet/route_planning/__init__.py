"""Mini README: Route/range planning subsystem for drone missions.

Exports the distance maths, the battery estimator, the route validator and
the charging-stop selector, plus the ``RoutePlanner`` facade used by the
HTTP API and CLI. Modules only depend on earlier ones:
geodesy -> consumption -> charging -> planner.
"""

from .charging import ChargingStationCandidate, find_optimal_charging_stations
from .consumption import (
    DEFAULT_CONSUMPTION_TABLE,
    ConsumptionTable,
    estimate_battery_usage,
    estimate_raw_battery_usage,
)
from .geodesy import Coordinate, distance
from .planner import (
    PlannedRoute,
    ReachAssessment,
    RoutePlanner,
    RoutePoint,
    RoutePointRole,
    ValidationResult,
    assess_direct_reach,
    route_distance,
    segment_distances,
    validate_route,
)

__all__ = [
    "ChargingStationCandidate",
    "ConsumptionTable",
    "Coordinate",
    "DEFAULT_CONSUMPTION_TABLE",
    "PlannedRoute",
    "ReachAssessment",
    "RoutePlanner",
    "RoutePoint",
    "RoutePointRole",
    "ValidationResult",
    "assess_direct_reach",
    "distance",
    "estimate_battery_usage",
    "estimate_raw_battery_usage",
    "find_optimal_charging_stations",
    "route_distance",
    "segment_distances",
    "validate_route",
]
