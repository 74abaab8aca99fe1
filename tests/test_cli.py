"""Mini README: Tests for the ``plan`` command of the Typer CLI.

Runs the command through ``typer.testing.CliRunner`` against boundary files in
a temporary directory: full plan output, the waypoint-only output and the
exit code for a boundary the parser rejects.
"""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from main_planner import cli

RUNNER = CliRunner()

FIELD = {
    "type": "Polygon",
    "coordinates": [[[0, 0], [0.01, 0], [0.01, 0.005], [0, 0.005], [0, 0]]],
}


def _write_boundary(directory: Path, boundary) -> Path:
    path = directory / "boundary.geojson"
    path.write_text(json.dumps(boundary), encoding="utf-8")
    return path


def test_plan_prints_flight_plan(tmp_path: Path) -> None:
    boundary = _write_boundary(tmp_path, FIELD)

    result = RUNNER.invoke(
        cli, ["plan", str(boundary), "--pattern", "PERIMETER", "--altitude", "80", "--overlap", "0"]
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["pattern_type"] == "PERIMETER"
    assert payload["altitude"] == 80
    assert payload["waypoint_count"] == 5
    assert payload["waypoints"][0] == {"lat": 0.0, "lng": 0.0, "alt": 80}


def test_plan_can_print_waypoints_only(tmp_path: Path) -> None:
    boundary = _write_boundary(tmp_path, FIELD)

    result = RUNNER.invoke(cli, ["plan", str(boundary), "--waypoints-only"])

    assert result.exit_code == 0
    waypoints = json.loads(result.stdout)
    assert isinstance(waypoints, list) and waypoints
    assert {waypoint["alt"] for waypoint in waypoints} == {100}


def test_plan_exits_with_error_for_malformed_boundary(tmp_path: Path) -> None:
    boundary = _write_boundary(tmp_path, {"type": "Point", "coordinates": [0, 0]})

    result = RUNNER.invoke(cli, ["plan", str(boundary)])

    assert result.exit_code == 1
    assert "Error: GeoJSON must be of type Polygon" in result.output
