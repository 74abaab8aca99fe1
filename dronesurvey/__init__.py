"""Mini README: Core package initializer for the Dronesurvey planner.

Dronesurvey turns survey-area boundaries into ordered drone waypoints.
Subpackages: ``geometry`` (shapes, geodesy, clipping), ``route_planning``
(coverage strategies and wire format), ``missions`` (flight plan service),
``interface`` (FastAPI app) and ``utils`` (GeoJSON boundary parsing).
"""

from .errors import FormatError, PlanningError
from .logging_utils import get_logger

__all__ = ["FormatError", "PlanningError", "get_logger"]
