"""Mini README: Flight plan generation for mission planning requests.

Structure:
    * FlightPlan - planner output plus the distance/duration figures persisted
      alongside a mission.
    * FlightPlanService - parses the survey boundary, runs the coverage
      planner and attaches flight estimates.

Estimates follow ``PlannerSettings.flight_estimates``. In ``derived`` mode the
distance is the haversine length of the generated path and the duration is
that distance at ``cruise_speed_mps``, rounded up to whole minutes. In
``placeholder`` mode the legacy fixed figures (1000 m, 15 min) are reported
regardless of the path, for consumers that still expect them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from ..configuration import PlannerSettings, get_settings
from ..errors import FormatError, PlanningError
from ..geometry.geodesy import path_length
from ..logging_utils import get_logger
from ..route_planning import (
    CoveragePath,
    CoveragePlanner,
    CoverageRequest,
    PatternType,
    waypoints_to_json,
)
from ..route_planning.serialization import WireWaypoint
from ..utils.geojson import parse_polygon

LOGGER = get_logger(__name__)

PLACEHOLDER_DISTANCE_METERS = 1000.0
PLACEHOLDER_DURATION_MINUTES = 15


@dataclass(slots=True)
class FlightPlan:
    """Generated coverage path with the figures stored next to it."""

    path: CoveragePath
    overlap_percentage: int
    total_distance_meters: float
    estimated_duration_minutes: int

    @property
    def waypoints(self) -> List[WireWaypoint]:
        return self.path.as_wire()

    @property
    def waypoints_json(self) -> str:
        """Waypoint list as the JSON text stored by the flight path record."""

        return waypoints_to_json(self.path.coordinates, self.path.altitude_meters)

    def as_dict(self) -> Dict[str, Any]:
        """Export the plan with serialisable values."""

        return {
            "pattern_type": self.path.pattern_type.value,
            "altitude": self.path.altitude_meters,
            "overlap_percentage": self.overlap_percentage,
            "waypoint_count": len(self.path),
            "waypoints": self.waypoints,
            "total_distance": self.total_distance_meters,
            "estimated_duration": self.estimated_duration_minutes,
        }


class FlightPlanService:
    """Turn survey boundaries and flight parameters into flight plans."""

    def __init__(
        self,
        settings: Optional[PlannerSettings] = None,
        *,
        planner: Optional[CoveragePlanner] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.planner = planner or CoveragePlanner(
            base_spacing_meters=self.settings.base_spacing_meters,
            perimeter_offset_degrees=self.settings.perimeter_offset_degrees,
            max_perimeter_rings=self.settings.max_perimeter_rings,
        )
        LOGGER.debug(
            "FlightPlanService ready with estimates=%s cruise_speed=%s",
            self.settings.flight_estimates,
            self.settings.cruise_speed_mps,
        )

    def generate_pattern(
        self,
        boundary: Union[str, Mapping[str, Any]],
        pattern_type: Union[PatternType, str],
        altitude: int,
        overlap_percentage: int,
    ) -> FlightPlan:
        """Plan ``pattern_type`` over ``boundary`` and attach flight estimates."""

        if not isinstance(pattern_type, PatternType):
            pattern_type = PatternType.from_str(pattern_type)
        try:
            polygon = parse_polygon(boundary)
            request = CoverageRequest(
                polygon=polygon,
                altitude_meters=altitude,
                overlap_percent=overlap_percentage,
                pattern=pattern_type.to_pattern(),
            )
            path = self.planner.generate(request)
        except (FormatError, PlanningError) as error:
            LOGGER.warning("Rejected %s pattern request: %s", pattern_type.value, error)
            raise

        distance_m, duration_min = self.estimate(path)
        LOGGER.info(
            "Flight plan ready: %s waypoints, %.1fm, ~%s min",
            len(path),
            distance_m,
            duration_min,
        )
        return FlightPlan(
            path=path,
            overlap_percentage=overlap_percentage,
            total_distance_meters=distance_m,
            estimated_duration_minutes=duration_min,
        )

    def estimate(self, path: CoveragePath) -> tuple[float, int]:
        """Return (total distance in metres, duration in whole minutes)."""

        if self.settings.flight_estimates == "placeholder":
            return PLACEHOLDER_DISTANCE_METERS, PLACEHOLDER_DURATION_MINUTES
        distance_m = path_length(path.coordinates)
        duration_min = math.ceil(distance_m / self.settings.cruise_speed_mps / 60.0)
        return distance_m, int(duration_min)
