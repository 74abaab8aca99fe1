"""Mini README: Route planning subsystem for survey coverage missions.

Exports the coverage planner, its request/response types and the waypoint
wire-format helpers. Strategies are plain dataclass variants so new sweep
patterns can be added alongside the existing three without subclassing.
"""

from .planner import (
    CoveragePath,
    CoveragePlanner,
    CoverageRequest,
    CrosshatchPattern,
    LinearPattern,
    Pattern,
    PatternType,
    PerimeterPattern,
    SweepLine,
    SweepOrientation,
    Waypoint,
    choose_orientation,
)
from .serialization import serialize, waypoints_to_json

__all__ = [
    "CoveragePath",
    "CoveragePlanner",
    "CoverageRequest",
    "CrosshatchPattern",
    "LinearPattern",
    "Pattern",
    "PatternType",
    "PerimeterPattern",
    "SweepLine",
    "SweepOrientation",
    "Waypoint",
    "choose_orientation",
    "serialize",
    "waypoints_to_json",
]
