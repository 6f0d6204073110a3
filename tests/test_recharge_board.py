"""Mini README: Tests covering the recharge request board.

Structure:
    * reachable stops open pending requests with the stop's credits.
    * out-of-range stops are refused before a request exists.
    * status transitions follow the allowed lifecycle.
"""

from __future__ import annotations

import random

import pytest

from dronenet.fleet import FleetDirectory
from dronenet.recharge import RechargeRequestBoard, RechargeRequestStatus


@pytest.fixture()
def directory() -> FleetDirectory:
    return FleetDirectory()


@pytest.fixture()
def board() -> RechargeRequestBoard:
    return RechargeRequestBoard(rng=random.Random(7))


def test_create_request_for_reachable_stop(directory: FleetDirectory, board: RechargeRequestBoard) -> None:
    """Reachable stops open a pending request carrying the stop's credits."""

    drone = directory.get_drone("drone_1")
    stop = directory.get_stop("stop_1")

    request = board.create_request(drone, stop, "user_1")

    assert request.status is RechargeRequestStatus.PENDING
    assert request.credits == stop.credits
    assert request.host_id == stop.host_id
    assert 30 <= request.estimated_duration_minutes < 90
    assert request.distance_km < drone.max_range_km
    assert board.active_requests(drone_id="drone_1") == [request]
    assert board.active_requests(stop_id="stop_2") == []


def test_out_of_range_stop_is_refused(directory: FleetDirectory, board: RechargeRequestBoard) -> None:
    """Stops beyond direct range are refused without creating a request."""

    drone = directory.get_drone("drone_1")
    london = directory.get_stop("stop_3")

    with pytest.raises(ValueError, match="beyond"):
        board.create_request(drone, london, "user_1")
    assert board.list_requests() == []


def test_status_lifecycle_is_enforced(directory: FleetDirectory, board: RechargeRequestBoard) -> None:
    """Only pending -> accepted -> completed style transitions are allowed."""

    request = board.create_request(directory.get_drone("drone_2"), directory.get_stop("stop_2"), "user_1")

    with pytest.raises(ValueError):
        board.update_status(request.request_id, RechargeRequestStatus.COMPLETED)

    board.update_status(request.request_id, RechargeRequestStatus.ACCEPTED)
    assert board.active_requests() == []
    board.update_status(request.request_id, RechargeRequestStatus.COMPLETED)
    assert board.list_requests(RechargeRequestStatus.COMPLETED)[0].request_id == request.request_id

    with pytest.raises(ValueError):
        board.update_status(request.request_id, RechargeRequestStatus.REJECTED)


def test_list_requests_accepts_status_strings(directory: FleetDirectory, board: RechargeRequestBoard) -> None:
    """Plain status strings filter the same way as enum members."""

    request = board.create_request(directory.get_drone("drone_1"), directory.get_stop("stop_1"), "user_1")

    assert board.list_requests("pending") == [request]
    assert board.list_requests(" PENDING ") == [request]
    assert board.list_requests("accepted") == []
    with pytest.raises(ValueError):
        board.list_requests("lost")


def test_unknown_request_raises_key_error(board: RechargeRequestBoard) -> None:
    """Updating a missing request raises KeyError."""

    with pytest.raises(KeyError):
        board.update_status("req_9999", RechargeRequestStatus.ACCEPTED)


def test_status_from_str_normalises_case() -> None:
    """Status parsing tolerates whitespace and casing."""

    assert RechargeRequestStatus.from_str(" Accepted ") is RechargeRequestStatus.ACCEPTED
    with pytest.raises(ValueError):
        RechargeRequestStatus.from_str("lost")
