"""Mini README: In-memory board of recharge requests between drones and hosts.

Structure:
    * RechargeRequestStatus - lifecycle states of a request.
    * RechargeRequest - dataclass storing request details and helpers.
    * RechargeRequestBoard - creates, lists and moves requests through states.

A request is refused when the stop lies beyond the drone's range for a
direct flight. Status changes follow pending -> accepted | rejected and
accepted -> completed; anything else raises ``ValueError``.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from ..fleet import Drone, RechargeStop
from ..logging_utils import get_logger
from ..route_planning import assess_direct_reach

LOGGER = get_logger(__name__)

MIN_DURATION_MINUTES = 30
DURATION_SPREAD_MINUTES = 60


class RechargeRequestStatus(str, Enum):
    """Enumerate the lifecycle states of a recharge request."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    COMPLETED = "completed"
    REJECTED = "rejected"

    @classmethod
    def from_str(cls, value: str) -> "RechargeRequestStatus":
        """Coerce arbitrary casing into a valid status."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported recharge request status: {value}") from error


ALLOWED_TRANSITIONS = {
    RechargeRequestStatus.PENDING: {RechargeRequestStatus.ACCEPTED, RechargeRequestStatus.REJECTED},
    RechargeRequestStatus.ACCEPTED: {RechargeRequestStatus.COMPLETED},
    RechargeRequestStatus.COMPLETED: set(),
    RechargeRequestStatus.REJECTED: set(),
}


@dataclass(slots=True)
class RechargeRequest:
    """Request from a drone owner to charge at a hosted stop."""

    request_id: str
    drone_id: str
    stop_id: str
    requester_id: str
    host_id: str
    credits: int
    estimated_duration_minutes: int
    distance_km: float
    status: RechargeRequestStatus = RechargeRequestStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def as_dict(self) -> Dict[str, object]:
        """Export the request with serialisable values."""

        return {
            "request_id": self.request_id,
            "drone_id": self.drone_id,
            "stop_id": self.stop_id,
            "requester_id": self.requester_id,
            "host_id": self.host_id,
            "credits": self.credits,
            "estimated_duration_minutes": self.estimated_duration_minutes,
            "distance_km": self.distance_km,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
        }


class RechargeRequestBoard:
    """Track recharge requests and their status changes."""

    def __init__(self, *, rng: Optional[random.Random] = None) -> None:
        self._requests: Dict[str, RechargeRequest] = {}
        self._sequence = 0
        self._rng = rng or random.Random()

    def _next_id(self) -> str:
        self._sequence += 1
        return f"req_{self._sequence:04d}"

    def create_request(self, drone: Drone, stop: RechargeStop, requester_id: str) -> RechargeRequest:
        """Open a pending request, refusing stops the drone cannot reach directly."""

        reach = assess_direct_reach(drone.position, stop.position, drone.max_range_km)
        if reach.exceeds_range:
            LOGGER.warning(
                "Refused recharge request for %s at %s: %.1f km exceeds range of %s km",
                drone.drone_id,
                stop.stop_id,
                reach.distance_km,
                drone.max_range_km,
            )
            raise ValueError(
                f"{stop.name} is {reach.distance_km:.1f} km away, beyond the "
                f"{drone.max_range_km} km range of {drone.name}"
            )

        request = RechargeRequest(
            request_id=self._next_id(),
            drone_id=drone.drone_id,
            stop_id=stop.stop_id,
            requester_id=requester_id,
            host_id=stop.host_id,
            credits=stop.credits,
            estimated_duration_minutes=MIN_DURATION_MINUTES
            + self._rng.randrange(DURATION_SPREAD_MINUTES),
            distance_km=reach.distance_km,
        )
        self._requests[request.request_id] = request
        LOGGER.info(
            "Recharge request %s sent for %s at %s", request.request_id, drone.name, stop.name
        )
        return request

    def get_request(self, request_id: str) -> RechargeRequest:
        """Retrieve a request, raising informative errors when missing."""

        if request_id not in self._requests:
            raise KeyError(f"Recharge request {request_id} not found")
        return self._requests[request_id]

    def list_requests(self, status: Optional[RechargeRequestStatus] = None) -> List[RechargeRequest]:
        """Return requests newest first, optionally filtered by status."""

        if status is not None:
            status = RechargeRequestStatus.from_str(status)
        requests = [
            request
            for request in self._requests.values()
            if status is None or request.status is status
        ]
        return sorted(
            requests,
            key=lambda request: (request.created_at, request.request_id),
            reverse=True,
        )

    def active_requests(
        self, drone_id: Optional[str] = None, stop_id: Optional[str] = None
    ) -> List[RechargeRequest]:
        """Return pending requests, optionally narrowed to a drone and/or stop."""

        return [
            request
            for request in self.list_requests(RechargeRequestStatus.PENDING)
            if (drone_id is None or request.drone_id == drone_id)
            and (stop_id is None or request.stop_id == stop_id)
        ]

    def update_status(self, request_id: str, status: RechargeRequestStatus) -> RechargeRequest:
        """Move a request to ``status`` when the transition is allowed."""

        request = self.get_request(request_id)
        status = RechargeRequestStatus.from_str(status)
        if status not in ALLOWED_TRANSITIONS[request.status]:
            raise ValueError(
                f"Cannot move recharge request {request_id} from {request.status.value} to {status.value}"
            )
        LOGGER.info("Recharge request %s: %s -> %s", request_id, request.status.value, status.value)
        request.status = status
        return request
