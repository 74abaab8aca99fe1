"""Mini README: GeoJSON boundary parsing for Dronesurvey.

This module turns the survey-area boundary text supplied by callers into a
validated ``Polygon``. It accepts a bare Polygon geometry or a Feature that
wraps one. Every structural problem raises ``FormatError`` with a message
naming the offending ring or position, so the HTTP layer can hand it straight
back to the operator.
"""

from __future__ import annotations

import json
import math
from typing import Any, List, Mapping, Union

from ..errors import FormatError
from ..geometry.shapes import Coordinate, Polygon, Ring

MIN_RING_POSITIONS = 4


def _parse_position(position: Any, ring_label: str, index: int) -> Coordinate:
    if not isinstance(position, list) or len(position) != 2:
        raise FormatError(f"Invalid point at index {index} in {ring_label}")
    values = []
    for value in position:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise FormatError(f"Invalid point at index {index} in {ring_label}")
        if not math.isfinite(value):
            raise FormatError(f"Non-finite coordinate at index {index} in {ring_label}")
        values.append(float(value))
    return Coordinate(longitude=values[0], latitude=values[1])


def _parse_ring(ring: Any, ring_label: str) -> Ring:
    if not isinstance(ring, list) or len(ring) < MIN_RING_POSITIONS:
        raise FormatError(f"{ring_label.capitalize()} must have at least 4 points")
    coordinates: List[Coordinate] = [
        _parse_position(position, ring_label, index) for index, position in enumerate(ring)
    ]
    if coordinates[0] != coordinates[-1]:
        raise FormatError(f"{ring_label.capitalize()} must be closed")
    return Ring(tuple(coordinates))


def parse_polygon(boundary: Union[str, Mapping[str, Any]]) -> Polygon:
    """Validate a GeoJSON Polygon and return it as a ``Polygon``.

    ``boundary`` may be raw GeoJSON text or an already decoded mapping. The
    first ring is the exterior; any further rings are holes.
    """

    if isinstance(boundary, str):
        try:
            geojson = json.loads(boundary)
        except json.JSONDecodeError as error:
            raise FormatError("Boundary is not valid JSON") from error
    else:
        geojson = boundary

    if not isinstance(geojson, Mapping):
        raise FormatError("Boundary must be a GeoJSON object")

    if geojson.get("type") == "Feature":
        geometry = geojson.get("geometry") or {}
    else:
        geometry = geojson

    if not isinstance(geometry, Mapping) or geometry.get("type") != "Polygon":
        raise FormatError("GeoJSON must be of type Polygon")

    coordinates = geometry.get("coordinates")
    if not isinstance(coordinates, list) or not coordinates:
        raise FormatError("Invalid coordinates in GeoJSON")

    exterior = _parse_ring(coordinates[0], "exterior ring")
    holes = tuple(
        _parse_ring(ring, f"interior ring {index}")
        for index, ring in enumerate(coordinates[1:], start=1)
    )
    return Polygon(exterior=exterior, holes=holes)

