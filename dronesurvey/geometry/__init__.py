"""Mini README: Geometry primitives used by the coverage planner.

``shapes`` holds the immutable boundary types, ``geodesy`` the spherical
distance helpers and ``clipping`` the shapely-backed clip/inset routines that
operate directly on longitude/latitude degrees.
"""

from .clipping import boundary_coordinates, clip_segment, contains, inset, to_shape
from .geodesy import destination, distance, path_length
from .shapes import Coordinate, Envelope, Polygon, Ring

__all__ = [
    "Coordinate",
    "Envelope",
    "Polygon",
    "Ring",
    "boundary_coordinates",
    "clip_segment",
    "contains",
    "destination",
    "distance",
    "inset",
    "path_length",
    "to_shape",
]
