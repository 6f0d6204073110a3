"""Mini README: Great-circle helpers shared by every planning routine.

Structure:
    * Coordinate - immutable latitude/longitude pair in degrees.
    * distance - haversine distance in kilometres between two positions.

Anything exposing ``latitude`` and ``longitude`` attributes can be passed to
``distance``; route points and stations rely on that. Values are not range
checked, so out-of-range or NaN inputs simply flow through the arithmetic.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

EARTH_RADIUS_KM = 6371.0


class HasPosition(Protocol):
    """Structural type for objects carrying latitude/longitude in degrees."""

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Latitude/longitude pair expressed in degrees."""

    latitude: float
    longitude: float

    def as_dict(self) -> dict:
        return {"lat": self.latitude, "lng": self.longitude}


def distance(a: HasPosition, b: HasPosition) -> float:
    """Return the haversine distance between ``a`` and ``b`` in kilometres.

    Infinite inputs give NaN rather than raising from ``math.sin``.
    """

    values = (a.latitude, a.longitude, b.latitude, b.longitude)
    if any(math.isinf(value) for value in values):
        return math.nan

    d_lat = math.radians(b.latitude - a.latitude)
    d_lng = math.radians(b.longitude - a.longitude)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.latitude))
        * math.cos(math.radians(b.latitude))
        * math.sin(d_lng / 2) ** 2
    )
    # Rounding can push h just outside [0, 1]; max() keeps NaN intact.
    h = max(h, 0.0)
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(max(1 - h, 0.0)))
