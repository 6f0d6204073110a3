"""Mini README: Entry point CLI for the DroneNet planning service.

This script exposes a Typer CLI that starts the FastAPI application and
offers quick route checks against the demo fleet from a terminal. Settings
(host, port, log level, consumption table) come from ``DRONENET_*``
environment variables when available.
"""

from __future__ import annotations

from typing import List

import typer
import uvicorn

from dronenet.configuration import get_settings
from dronenet.fleet import FleetDirectory
from dronenet.logging_utils import configure_root_logger
from dronenet.route_planning import ConsumptionTable, RoutePlanner, RoutePoint, RoutePointRole

cli = typer.Typer(help="Launch and query the DroneNet planning service.")


def _parse_waypoint(raw: str) -> tuple:
    """Parse ``"LAT,LNG"`` into a float pair."""

    try:
        latitude, longitude = (float(part) for part in raw.split(","))
    except ValueError as error:
        raise typer.BadParameter(f"Waypoint '{raw}' must look like LAT,LNG") from error
    return latitude, longitude


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 sentinel, so point them at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting DroneNet on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "dronenet.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def fleet() -> None:
    """List the demo drones and recharge stops."""

    configure_root_logger(get_settings().log_level)
    directory = FleetDirectory()
    typer.echo("Drones:")
    for drone in directory.list_drones():
        typer.echo(
            f"  {drone.drone_id}  {drone.name} ({drone.model}) "
            f"battery {drone.battery_level:g}% range {drone.max_range_km:g} km [{drone.status.value}]"
        )
    typer.echo("Recharge stops:")
    for stop in directory.list_stops():
        availability = "available" if stop.available else "busy"
        typer.echo(f"  {stop.stop_id}  {stop.name} - {stop.credits} credits, {availability}")


@cli.command()
def plan(
    drone_id: str = typer.Argument(..., help="Identifier of a demo fleet drone."),
    waypoint: List[str] = typer.Option(
        [], "--waypoint", "-w", help="Waypoint as LAT,LNG; repeat for each point."
    ),
) -> None:
    """Validate a route that starts at the drone's position."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    directory = FleetDirectory()
    try:
        drone = directory.get_drone(drone_id)
    except KeyError as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=1) from error

    points = [RoutePoint(drone.position, RoutePointRole.START)]
    coordinates = [_parse_waypoint(raw) for raw in waypoint]
    for index, (latitude, longitude) in enumerate(coordinates):
        role = RoutePointRole.END if index == len(coordinates) - 1 else RoutePointRole.WAYPOINT
        points.append(RoutePoint.at(latitude, longitude, role))

    planner = RoutePlanner(consumption=ConsumptionTable.from_settings(settings))
    planned = planner.plan(drone, points, directory.station_candidates())

    typer.echo(f"Total distance: {planned.total_distance_km:.1f} km")
    typer.echo(f"Estimated battery usage: {planned.estimated_battery_usage:.1f}%")
    if planned.validation.is_valid:
        typer.echo("Route is within range and battery limits.")
    for issue in planned.validation.issues:
        typer.echo(f"Issue: {issue}")
    if planned.charging_stops:
        typer.echo(f"Suggested charging stops: {', '.join(planned.charging_stops)}")
    if not planned.validation.is_valid:
        raise typer.Exit(code=2)


if __name__ == "__main__":
    cli()
