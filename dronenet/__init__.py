"""Mini README: Core package initializer for the DroneNet planning service.

This module exposes convenience imports that allow other parts of the
application to access high-level services without needing to know the
exact module structure. Route maths lives in ``route_planning``; the demo
fleet and recharge request board build on top of it.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
