"""Mini README: FastAPI-powered planning API for DroneNet.

Structure:
    * create_application - application factory wiring routes and services.

The API exposes the route maths to the browser front end: distance
read-outs while waypoints are edited, validation before a route is saved,
charging-stop suggestions, and the reach check performed before a recharge
request is sent. Fleet data and requests live in memory for the demo.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..fleet import FleetDirectory
from ..logging_utils import get_logger
from ..recharge import RechargeRequestBoard, RechargeRequestStatus
from ..route_planning import (
    ConsumptionTable,
    RoutePlanner,
    assess_direct_reach,
    find_optimal_charging_stations,
    route_distance,
    segment_distances,
    validate_route,
)
from .schemas import (
    ChargingStopsRequest,
    ChargingStopsResponse,
    RechargeRequestCreate,
    RechargeStatusUpdate,
    RouteDistanceResponse,
    RouteModel,
    ValidateRouteRequest,
    ValidationResponse,
)

LOGGER = get_logger(__name__)


def create_application(
    fleet: Optional[FleetDirectory] = None,
    board: Optional[RechargeRequestBoard] = None,
    consumption: Optional[ConsumptionTable] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    app = FastAPI(title="DroneNet Planning API", version="0.1.0")

    fleet = fleet or FleetDirectory()
    board = board or RechargeRequestBoard()
    consumption = consumption or ConsumptionTable.from_settings(get_settings())
    planner = RoutePlanner(consumption=consumption)

    @app.get("/drones")
    async def list_drones() -> JSONResponse:
        """Return the fleet for the map and route builder."""

        drones = [drone.as_dict() for drone in fleet.list_drones()]
        LOGGER.debug("Returning %s drones", len(drones))
        return JSONResponse({"drones": drones})

    @app.get("/stops")
    async def list_stops() -> JSONResponse:
        """Return recharge stops with availability."""

        return JSONResponse({"stops": [stop.as_dict() for stop in fleet.list_stops()]})

    @app.post("/routes/distance", response_model=RouteDistanceResponse)
    async def measure_route(route: RouteModel) -> RouteDistanceResponse:
        """Return total and per-leg distances for the edited waypoints."""

        points = route.route_points()
        return RouteDistanceResponse(
            total_distance_km=route_distance(points),
            segment_distances_km=segment_distances(points),
        )

    @app.post("/routes/validate", response_model=ValidationResponse)
    async def validate(request: ValidateRouteRequest) -> ValidationResponse:
        """Validate a route against explicit range, battery and model figures."""

        result = validate_route(
            request.route_points(),
            request.max_range_km,
            request.battery_level,
            request.model,
            consumption,
        )
        return ValidationResponse(**result.as_dict())

    @app.post("/routes/charging-stops", response_model=ChargingStopsResponse)
    async def charging_stops(request: ChargingStopsRequest) -> ChargingStopsResponse:
        """Suggest charging stops for a route and candidate stations."""

        stops = find_optimal_charging_stations(
            request.route_points(),
            [station.to_candidate() for station in request.stations],
            request.max_range_km,
        )
        LOGGER.info("Suggested %s charging stop(s)", len(stops))
        return ChargingStopsResponse(charging_stops=stops)

    @app.post("/drones/{drone_id}/plan")
    async def plan_for_drone(drone_id: str, route: RouteModel) -> JSONResponse:
        """Plan a route for a fleet drone using the registered stops."""

        try:
            drone = fleet.get_drone(drone_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        planned = planner.plan(drone, route.route_points(), fleet.station_candidates())
        return JSONResponse(planned.as_dict())

    @app.get("/drones/{drone_id}/reach/{stop_id}")
    async def reach(drone_id: str, stop_id: str) -> JSONResponse:
        """Report whether a stop is within direct flight range of a drone."""

        try:
            drone = fleet.get_drone(drone_id)
            stop = fleet.get_stop(stop_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        assessment = assess_direct_reach(drone.position, stop.position, drone.max_range_km)
        return JSONResponse({"drone_id": drone_id, "stop_id": stop_id, **assessment.as_dict()})

    @app.get("/recharge-requests")
    async def list_recharge_requests(status: Optional[RechargeRequestStatus] = None) -> JSONResponse:
        """List recharge requests, optionally filtered by status."""

        requests = [request.as_dict() for request in board.list_requests(status)]
        return JSONResponse({"requests": requests})

    @app.post("/recharge-requests")
    async def create_recharge_request(payload: RechargeRequestCreate) -> JSONResponse:
        """Open a recharge request if the stop is reachable."""

        try:
            drone = fleet.get_drone(payload.drone_id)
            stop = fleet.get_stop(payload.stop_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        try:
            request = board.create_request(drone, stop, payload.requester_id)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(request.as_dict(), status_code=201)

    @app.post("/recharge-requests/{request_id}/status")
    async def update_recharge_request(request_id: str, payload: RechargeStatusUpdate) -> JSONResponse:
        """Move a recharge request to a new status."""

        try:
            request = board.update_status(request_id, payload.status)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(request.as_dict())

    return app
