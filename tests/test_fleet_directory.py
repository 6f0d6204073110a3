"""Mini README: Tests for fleet records and the in-memory directory.

Ensures demo data is deterministic, lookups raise helpful errors and
record validation rejects impossible battery or range figures.
"""

from __future__ import annotations

import pytest

from dronenet.fleet import Drone, DroneStatus, FleetDirectory, RechargeStop
from dronenet.route_planning import Coordinate


def test_demo_directory_seeds_drones_and_stops() -> None:
    """The default directory holds the deterministic demo fleet."""

    directory = FleetDirectory()
    drones = directory.list_drones()
    assert [drone.drone_id for drone in drones] == ["drone_1", "drone_2", "drone_3"]
    assert drones[0].model == "DJI Mavic Pro"
    assert len(directory.list_stops()) == 8
    assert {stop.stop_id for stop in directory.available_stops()} == {
        "stop_1",
        "stop_2",
        "stop_4",
        "stop_5",
        "stop_7",
        "stop_8",
    }


def test_station_candidates_keep_unavailable_stops_flagged() -> None:
    """Busy stops stay in the candidate list marked unavailable."""

    candidates = FleetDirectory().station_candidates()
    busy = [candidate.station_id for candidate in candidates if not candidate.available]
    assert busy == ["stop_3", "stop_6"]


def test_unknown_identifiers_raise_key_error() -> None:
    """Lookups of unknown drones and stops raise KeyError."""

    directory = FleetDirectory(drones=[], stops=[])
    with pytest.raises(KeyError):
        directory.get_drone("drone_404")
    with pytest.raises(KeyError):
        directory.get_stop("stop_404")


def test_drone_rejects_out_of_range_battery() -> None:
    """Battery levels above 100% are refused."""

    with pytest.raises(ValueError):
        Drone(
            drone_id="broken",
            name="Broken",
            model="DJI Mini 3",
            battery_level=120.0,
            status=DroneStatus.ACTIVE,
            position=Coordinate(0.0, 0.0),
            max_range_km=10.0,
            owner_id="user_1",
        )


@pytest.mark.parametrize("max_range_km", [0.0, -5.0, float("nan")])
def test_drone_requires_positive_range(max_range_km: float) -> None:
    """Zero, negative and NaN ranges are refused for fleet drones."""

    with pytest.raises(ValueError):
        Drone(
            drone_id="grounded",
            name="Grounded",
            model="DJI Mini 3",
            battery_level=50.0,
            status=DroneStatus.OFFLINE,
            position=Coordinate(0.0, 0.0),
            max_range_km=max_range_km,
            owner_id="user_1",
        )


def test_drone_coerces_status_strings() -> None:
    """Status strings are converted to the enum."""

    drone = Drone(
        drone_id="d",
        name="D",
        model="Parrot Anafi",
        battery_level=50.0,
        status="charging",
        position=Coordinate(1.0, 2.0),
        max_range_km=20.0,
        owner_id="user_1",
    )
    assert drone.status is DroneStatus.CHARGING
    assert drone.as_dict()["position"] == {"lat": 1.0, "lng": 2.0}


def test_recharge_stop_projects_to_candidate() -> None:
    """Stops convert to selector candidates with matching fields."""

    stop = RechargeStop(
        stop_id="stop_x",
        name="Hub X",
        position=Coordinate(10.0, 20.0),
        host_id="host_x",
        host_name="Host",
        available=False,
        credits=7,
        rating=4.5,
    )
    candidate = stop.as_candidate()
    assert candidate.station_id == "stop_x"
    assert candidate.position == Coordinate(10.0, 20.0)
    assert candidate.available is False
