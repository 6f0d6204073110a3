"""Mini README: Recharge request workflow between drone owners and hosts.

The board is in-memory and deliberately small: it checks that a stop is
reachable before opening a request and guards the status lifecycle.
"""

from .board import RechargeRequest, RechargeRequestBoard, RechargeRequestStatus

__all__ = ["RechargeRequest", "RechargeRequestBoard", "RechargeRequestStatus"]
