"""Mini README: Tests for the greedy charging-stop selector.

Exercises both the "station found" and "no station found" branches, the
availability filter, tie breaking and repeated suggestions of one hub.
"""

from __future__ import annotations

from dronenet.route_planning import (
    ChargingStationCandidate,
    Coordinate,
    RoutePoint,
    RoutePointRole,
    find_optimal_charging_stations,
)

# Legs of roughly 10 km, 0.11 km and 0.11 km along the equator.
THREE_LEG_ROUTE = [
    RoutePoint.at(0.0, 0.0, RoutePointRole.START),
    RoutePoint.at(0.0, 0.0899),
    RoutePoint.at(0.0, 0.0909),
    RoutePoint.at(0.0, 0.0919, RoutePointRole.END),
]


def test_first_long_leg_selects_single_nearest_available_station() -> None:
    """A long first leg picks the closest available station once."""

    stations = [
        ChargingStationCandidate("far", Coordinate(1.0, 1.0)),
        ChargingStationCandidate("busy", Coordinate(0.0, 0.0), available=False),
        ChargingStationCandidate("near", Coordinate(0.0, 0.001)),
    ]
    assert find_optimal_charging_stations(THREE_LEG_ROUTE, stations, 10.0) == ["near"]


def test_no_available_station_returns_empty_list() -> None:
    """Without available stations nothing is suggested."""

    stations = [ChargingStationCandidate("busy", Coordinate(0.0, 0.0), available=False)]
    assert find_optimal_charging_stations(THREE_LEG_ROUTE, stations, 10.0) == []
    assert find_optimal_charging_stations(THREE_LEG_ROUTE, [], 1.0) == []


def test_short_route_never_crosses_threshold() -> None:
    """Routes well within range need no charging stops."""

    stations = [ChargingStationCandidate("near", Coordinate(0.0, 0.001))]
    assert find_optimal_charging_stations(THREE_LEG_ROUTE, stations, 50.0) == []
    assert find_optimal_charging_stations(THREE_LEG_ROUTE[:1], stations, 0.0) == []


def test_threshold_is_eighty_percent_of_range() -> None:
    """A stop is triggered at 80% of the drone's range."""

    stations = [ChargingStationCandidate("near", Coordinate(0.0, 0.001))]
    # First leg is ~9.996 km: 12.49 km range gives a 9.992 km threshold.
    assert find_optimal_charging_stations(THREE_LEG_ROUTE[:2], stations, 12.49) == ["near"]
    assert find_optimal_charging_stations(THREE_LEG_ROUTE[:2], stations, 12.6) == []


def test_ties_go_to_the_first_station_listed() -> None:
    """Equidistant stations resolve to the first one listed."""

    stations = [
        ChargingStationCandidate("north", Coordinate(0.01, 0.0)),
        ChargingStationCandidate("south", Coordinate(-0.01, 0.0)),
    ]
    assert find_optimal_charging_stations(THREE_LEG_ROUTE, stations, 10.0) == ["north"]


def test_station_can_be_suggested_on_every_leg() -> None:
    """The same hub may be suggested repeatedly."""

    route = [
        RoutePoint.at(0.0, 0.0, RoutePointRole.START),
        RoutePoint.at(0.0, 0.0899),
        RoutePoint.at(0.0, 0.1798, RoutePointRole.END),
    ]
    stations = [ChargingStationCandidate("hub", Coordinate(0.0, 0.05))]
    assert find_optimal_charging_stations(route, stations, 10.0) == ["hub", "hub"]


def test_accumulated_distance_resets_after_each_stop() -> None:
    """Distance flown restarts from zero after each suggested stop."""

    # Legs of ~5 km each with a 10 km range: a stop every second leg.
    route = [RoutePoint.at(0.0, 0.04495 * step) for step in range(5)]
    stations = [ChargingStationCandidate("hub", Coordinate(0.0, 0.0))]
    assert find_optimal_charging_stations(route, stations, 10.0) == ["hub", "hub"]
