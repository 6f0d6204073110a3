"""Mini README: Fleet records and the in-memory fleet directory.

The planner works on plain drone and station figures; this package holds
the records the demo application feeds it, along with deterministic seed
data so interfaces have something to show without a backing store.
"""

from .directory import FleetDirectory
from .models import Drone, DroneStatus, RechargeStop

__all__ = ["Drone", "DroneStatus", "FleetDirectory", "RechargeStop"]
