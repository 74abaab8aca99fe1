"""Mini README: Tests for flight plan generation and waypoint serialisation.

Structure:
    * Serialiser - wire format keys, types and the empty case.
    * FlightPlanService - boundary parsing, estimates in both modes and the
      rejection path for malformed or degenerate boundaries.
"""

from __future__ import annotations

import json
import math

import pytest

from dronesurvey.configuration import PlannerSettings
from dronesurvey.errors import FormatError, PlanningError
from dronesurvey.geometry import Coordinate, path_length
from dronesurvey.missions import FlightPlanService
from dronesurvey.route_planning import PatternType, serialize, waypoints_to_json

FIELD_GEOJSON = json.dumps(
    {
        "type": "Polygon",
        "coordinates": [[[0, 0], [0.01, 0], [0.01, 0.005], [0, 0.005], [0, 0]]],
    }
)


def test_serialize_formats_lat_lng_alt() -> None:
    wire = serialize([Coordinate(longitude=12, latitude=45)], 120)

    assert wire == [{"lat": 45.0, "lng": 12.0, "alt": 120}]
    assert isinstance(wire[0]["lat"], float)


def test_serialize_empty_sequence() -> None:
    assert serialize([], 100) == []
    assert waypoints_to_json([], 100) == "[]"


def test_generate_pattern_derives_estimates_from_path() -> None:
    settings = PlannerSettings(cruise_speed_mps=5.0, flight_estimates="derived")
    service = FlightPlanService(settings)

    plan = service.generate_pattern(FIELD_GEOJSON, PatternType.LINEAR, 120, 0)

    expected_distance = path_length(plan.path.coordinates)
    assert plan.total_distance_meters == pytest.approx(expected_distance)
    assert plan.total_distance_meters > 0
    assert plan.estimated_duration_minutes == math.ceil(expected_distance / 5.0 / 60.0)


def test_generate_pattern_can_report_placeholder_estimates() -> None:
    settings = PlannerSettings(flight_estimates="placeholder")
    service = FlightPlanService(settings)

    plan = service.generate_pattern(FIELD_GEOJSON, "perimeter", 80, 0)

    assert plan.total_distance_meters == 1000.0
    assert plan.estimated_duration_minutes == 15
    assert len(plan.path) == 5


def test_plan_export_matches_stored_waypoints() -> None:
    service = FlightPlanService(PlannerSettings())

    plan = service.generate_pattern(FIELD_GEOJSON, "CROSSHATCH", 60, 25)
    exported = plan.as_dict()

    assert exported["pattern_type"] == "CROSSHATCH"
    assert exported["altitude"] == 60
    assert exported["overlap_percentage"] == 25
    assert exported["waypoint_count"] == len(exported["waypoints"])
    assert json.loads(plan.waypoints_json) == exported["waypoints"]
    assert {waypoint["alt"] for waypoint in exported["waypoints"]} == {60}


def test_generate_pattern_uses_configured_spacing() -> None:
    coarse = FlightPlanService(PlannerSettings(base_spacing_meters=200.0))
    fine = FlightPlanService(PlannerSettings(base_spacing_meters=50.0))

    coarse_plan = coarse.generate_pattern(FIELD_GEOJSON, PatternType.LINEAR, 100, 0)
    fine_plan = fine.generate_pattern(FIELD_GEOJSON, PatternType.LINEAR, 100, 0)

    assert len(coarse_plan.path) < len(fine_plan.path)


def test_generate_pattern_rejects_malformed_boundary() -> None:
    service = FlightPlanService(PlannerSettings())

    with pytest.raises(FormatError):
        service.generate_pattern(
            json.dumps({"type": "Point", "coordinates": [0, 0]}), PatternType.LINEAR, 100, 0
        )


def test_generate_pattern_rejects_degenerate_boundary() -> None:
    service = FlightPlanService(PlannerSettings())
    flat = json.dumps({"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [2, 0], [0, 0]]]})

    with pytest.raises(PlanningError):
        service.generate_pattern(flat, PatternType.LINEAR, 100, 0)
