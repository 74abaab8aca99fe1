"""Mini README: Utility helpers for Dronesurvey.

Currently exports the GeoJSON boundary parser used before any planning
takes place.
"""

from .geojson import parse_polygon

__all__ = ["parse_polygon"]
