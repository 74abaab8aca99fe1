"""Mini README: Waypoint wire-format helpers.

The mission persistence layer and the telemetry replay simulator both consume
waypoints as ``[{"lat": ..., "lng": ..., "alt": ...}]``. ``serialize`` builds
that list and ``waypoints_to_json`` renders it as text for storage.
"""

from __future__ import annotations

import json
from typing import Dict, Iterable, List, Union

from ..geometry.shapes import Coordinate

WireWaypoint = Dict[str, Union[float, int]]


def serialize(coordinates: Iterable[Coordinate], altitude_meters: int) -> List[WireWaypoint]:
    """Attach ``altitude_meters`` to each coordinate in wire order."""

    return [
        {
            "lat": float(coordinate.latitude),
            "lng": float(coordinate.longitude),
            "alt": int(altitude_meters),
        }
        for coordinate in coordinates
    ]


def waypoints_to_json(coordinates: Iterable[Coordinate], altitude_meters: int) -> str:
    return json.dumps(serialize(coordinates, altitude_meters))
