"""Mini README: Interactive interfaces (web/CLI) for DroneNet.

Exports the FastAPI application factory that serves the planning API to
the browser front end. The Typer CLI lives in ``main_control_centre.py``
at the repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
