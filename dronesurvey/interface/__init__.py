"""Mini README: Interactive interfaces (web/CLI) for Dronesurvey.

Exports the FastAPI application factory serving flight plan generation. The
command line entry point lives in ``main_planner.py`` at the repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
