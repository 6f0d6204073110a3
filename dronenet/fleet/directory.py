"""Mini README: In-memory directory of drones and recharge stops.

Structure:
    * FleetDirectory - lookup helpers over drones and stops.

When no records are supplied the directory seeds deterministic demo data:
three drones around San Francisco, New York and London, and a charging hub
in each of eight cities. Persistence is left to the surrounding application;
the directory only offers lookups shaped for the planner.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ..logging_utils import get_logger
from ..route_planning import ChargingStationCandidate, Coordinate
from .models import Drone, DroneStatus, RechargeStop

LOGGER = get_logger(__name__)

DEMO_CITIES = [
    ("San Francisco", 37.7749, -122.4194),
    ("New York", 40.7128, -74.0060),
    ("London", 51.5074, -0.1278),
    ("Tokyo", 35.6762, 139.6503),
    ("Sydney", -33.8688, 151.2093),
    ("Paris", 48.8566, 2.3522),
    ("Berlin", 52.5200, 13.4050),
    ("Athens", 37.9838, 23.7275),
]
DEMO_HOSTS = [
    "Alex Chen",
    "Maria Rodriguez",
    "John Smith",
    "Sarah Johnson",
    "David Kim",
    "Emma Wilson",
    "Michael Brown",
    "Lisa Zhang",
]


class FleetDirectory:
    """Keep drones and recharge stops addressable by identifier."""

    def __init__(
        self,
        drones: Optional[Iterable[Drone]] = None,
        stops: Optional[Iterable[RechargeStop]] = None,
    ) -> None:
        if drones is None:
            drones = self._build_demo_drones()
        if stops is None:
            stops = self._build_demo_stops()
        self._drones: Dict[str, Drone] = {drone.drone_id: drone for drone in drones}
        self._stops: Dict[str, RechargeStop] = {stop.stop_id: stop for stop in stops}
        LOGGER.debug(
            "Initialised FleetDirectory with %s drones and %s stops",
            len(self._drones),
            len(self._stops),
        )

    @staticmethod
    def _build_demo_drones() -> List[Drone]:
        """Create deterministic demo drones for UI previews."""

        profiles = [
            ("DJI Mavic Pro", 86.0, DroneStatus.ACTIVE, 35.0, (0.004, -0.006)),
            ("DJI Air 2S", 23.0, DroneStatus.LOW_BATTERY, 18.0, (-0.003, 0.002)),
            ("DJI Mini 3", 64.0, DroneStatus.CHARGING, 47.0, (0.007, 0.005)),
        ]
        drones = []
        for index, (model, battery, status, max_range, offset) in enumerate(profiles):
            _, latitude, longitude = DEMO_CITIES[index]
            drones.append(
                Drone(
                    drone_id=f"drone_{index + 1}",
                    name=f"Falcon {index + 1}",
                    model=model,
                    battery_level=battery,
                    status=status,
                    position=Coordinate(latitude + offset[0], longitude + offset[1]),
                    max_range_km=max_range,
                    owner_id="user_1",
                )
            )
        return drones

    @staticmethod
    def _build_demo_stops() -> List[RechargeStop]:
        """Create one charging hub per demo city; every third hub is busy."""

        stops = []
        for index, (city, latitude, longitude) in enumerate(DEMO_CITIES):
            stops.append(
                RechargeStop(
                    stop_id=f"stop_{index + 1}",
                    name=f"{city} Charging Hub",
                    position=Coordinate(latitude - 0.002, longitude + 0.003),
                    host_id=f"host_{index + 1}",
                    host_name=DEMO_HOSTS[index % len(DEMO_HOSTS)],
                    available=(index + 1) % 3 != 0,
                    credits=5 + (index * 3) % 10,
                    rating=round(4.0 + (index % 5) * 0.2, 1),
                )
            )
        return stops

    def list_drones(self) -> List[Drone]:
        """Return drones ordered by identifier."""

        return sorted(self._drones.values(), key=lambda drone: drone.drone_id)

    def get_drone(self, drone_id: str) -> Drone:
        """Retrieve a drone, raising informative errors when missing."""

        if drone_id not in self._drones:
            raise KeyError(f"Drone {drone_id} is not registered")
        return self._drones[drone_id]

    def list_stops(self) -> List[RechargeStop]:
        """Return recharge stops ordered by identifier."""

        return sorted(self._stops.values(), key=lambda stop: stop.stop_id)

    def get_stop(self, stop_id: str) -> RechargeStop:
        """Retrieve a recharge stop, raising informative errors when missing."""

        if stop_id not in self._stops:
            raise KeyError(f"Recharge stop {stop_id} is not registered")
        return self._stops[stop_id]

    def available_stops(self) -> List[RechargeStop]:
        return [stop for stop in self.list_stops() if stop.available]

    def station_candidates(self) -> List[ChargingStationCandidate]:
        """Every stop as a selector candidate; the selector filters availability itself."""

        return [stop.as_candidate() for stop in self.list_stops()]
