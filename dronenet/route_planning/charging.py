"""Mini README: Greedy charging-stop suggestions along a planned route.

Structure:
    * ChargingStationCandidate - station position, availability and id.
    * find_optimal_charging_stations - greedy stop selector.

The selector walks the route leg by leg. Once the distance flown since the
last charge reaches 80% of the drone's range, it picks the available
station closest to the start of the leg that crossed the threshold.

Limitations callers should know about:
    * It is a heuristic. Stations are only matched against leg start points,
      never against positions inside a leg, and nothing guarantees the
      drone stays within range when no station is near the path.
    * The same station may be suggested more than once (a hub passed twice).
    * Availability is read once per call. When no station is available the
      running distance keeps growing and every later leg searches again,
      always without result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from ..logging_utils import get_logger
from .geodesy import Coordinate, HasPosition, distance

LOGGER = get_logger(__name__)

RANGE_SAFETY_MARGIN = 0.8


@dataclass(frozen=True, slots=True)
class ChargingStationCandidate:
    """Charging station the selector may route a drone through."""

    station_id: str
    position: Coordinate
    available: bool = True


def _nearest_station(
    origin: HasPosition, stations: Sequence[ChargingStationCandidate]
) -> Optional[ChargingStationCandidate]:
    """Return the station closest to ``origin``; the first one wins ties."""

    nearest: Optional[ChargingStationCandidate] = None
    nearest_distance = float("inf")
    for station in stations:
        station_distance = distance(origin, station.position)
        if station_distance < nearest_distance:
            nearest = station
            nearest_distance = station_distance
    return nearest


def find_optimal_charging_stations(
    points: Sequence[HasPosition],
    available_stations: Iterable[ChargingStationCandidate],
    max_range_km: float,
) -> List[str]:
    """Return station identifiers to visit, in route order."""

    candidates = [station for station in available_stations if station.available]
    threshold = max_range_km * RANGE_SAFETY_MARGIN
    selected: List[str] = []
    accumulated = 0.0

    for index in range(len(points) - 1):
        accumulated += distance(points[index], points[index + 1])
        # Written as a positive test so NaN distances never trigger a search.
        if not accumulated >= threshold:
            continue

        station = _nearest_station(points[index], candidates)
        if station is not None:
            LOGGER.debug(
                "Leg %s reached %.2f km (threshold %.2f); suggesting station %s",
                index,
                accumulated,
                threshold,
                station.station_id,
            )
            selected.append(station.station_id)
            accumulated = 0.0
        else:
            LOGGER.debug("Leg %s reached %.2f km but no station is available", index, accumulated)

    return selected
