"""Mini README: Request and response bodies for the DroneNet HTTP API.

Each request model knows how to turn itself into the planner's dataclasses
so handlers stay short.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..recharge import RechargeRequestStatus
from ..route_planning import ChargingStationCandidate, Coordinate, RoutePoint, RoutePointRole


class PositionModel(BaseModel):
    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lng: float = Field(..., ge=-180, le=180, description="Longitude in degrees")

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.lat, self.lng)


class RoutePointModel(PositionModel):
    type: RoutePointRole = Field(RoutePointRole.WAYPOINT, description="Role of the point")
    id: Optional[str] = Field(None, description="Station identifier for charging points")

    def to_route_point(self) -> RoutePoint:
        return RoutePoint(self.to_coordinate(), self.type, self.id)


class StationModel(BaseModel):
    id: str
    position: PositionModel
    available: bool = True

    def to_candidate(self) -> ChargingStationCandidate:
        return ChargingStationCandidate(
            station_id=self.id,
            position=self.position.to_coordinate(),
            available=self.available,
        )


class RouteModel(BaseModel):
    waypoints: List[RoutePointModel] = Field(default_factory=list)

    def route_points(self) -> List[RoutePoint]:
        return [point.to_route_point() for point in self.waypoints]


class RouteDistanceResponse(BaseModel):
    total_distance_km: float
    segment_distances_km: List[float]


class ValidateRouteRequest(RouteModel):
    max_range_km: float = Field(..., ge=0, description="Drone's maximum range in km")
    battery_level: float = Field(..., ge=0, le=100, description="Current battery percentage")
    model: str = Field(..., description="Drone model used to look up the consumption rate")


class ValidationResponse(BaseModel):
    is_valid: bool
    issues: List[str]
    total_distance_km: float
    estimated_battery_usage: float


class ChargingStopsRequest(RouteModel):
    stations: List[StationModel] = Field(default_factory=list)
    max_range_km: float = Field(..., ge=0)


class ChargingStopsResponse(BaseModel):
    charging_stops: List[str]


class RechargeRequestCreate(BaseModel):
    drone_id: str
    stop_id: str
    requester_id: str = "user_1"


class RechargeStatusUpdate(BaseModel):
    status: RechargeRequestStatus
