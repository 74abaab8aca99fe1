"""Mini README: Polygon clipping and insetting in degree space.

Structure:
    * to_shape - convert a parsed boundary into a validated shapely polygon.
    * contains - closed point-in-region test (boundary counts as inside).
    * clip_segment - intersect a segment with a region, holes excluded.
    * inset - shrink a region inwards by a fixed distance; holes grow.
    * boundary_coordinates - every ring of a region as coordinates.

All operations run on raw longitude/latitude values through shapely, so
distances passed to ``inset`` are plain degrees.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from shapely.geometry import LineString, MultiLineString, MultiPolygon, Point
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import linemerge
from shapely.validation import explain_validity

from ..errors import PlanningError
from .shapes import Coordinate, Polygon


def to_shape(polygon: Polygon) -> ShapelyPolygon:
    """Build the shapely region for ``polygon``.

    Raises ``PlanningError`` for self-intersecting or otherwise invalid
    boundaries, which cannot be clipped reliably.
    """

    shape = ShapelyPolygon(
        [coordinate.as_pair() for coordinate in polygon.exterior.coordinates],
        [[coordinate.as_pair() for coordinate in hole.coordinates] for hole in polygon.holes],
    )
    if not shape.is_valid:
        raise PlanningError(f"Survey boundary is not a valid polygon: {explain_validity(shape)}")
    return shape


def contains(area: BaseGeometry, point: Tuple[float, float]) -> bool:
    """Return True when ``point`` lies in the closed region ``area``."""

    return area.covers(Point(point))


def _line_parts(geometry: BaseGeometry) -> List[LineString]:
    if geometry.is_empty:
        return []
    if isinstance(geometry, LineString):
        return [geometry]
    if isinstance(geometry, MultiLineString):
        merged = linemerge(geometry)
        if isinstance(merged, LineString):
            return [merged]
        return list(merged.geoms)
    if hasattr(geometry, "geoms"):
        # mixed collections carry isolated touch points next to real spans
        return [part for member in geometry.geoms for part in _line_parts(member)]
    return []


def clip_segment(
    area: BaseGeometry, start: Coordinate, end: Coordinate
) -> List[Tuple[Coordinate, Coordinate]]:
    """Clip the segment start->end to ``area``.

    Returns zero or more disjoint sub-segments ordered along the segment's
    direction. Holes are excluded; touching a vertex without entering the
    region yields nothing.
    """

    if start == end:
        return []
    line = LineString([start.as_pair(), end.as_pair()])

    spans = []
    for part in _line_parts(area.intersection(line)):
        first = Coordinate(*part.coords[0])
        last = Coordinate(*part.coords[-1])
        low = line.project(Point(first.as_pair()))
        high = line.project(Point(last.as_pair()))
        if low > high:
            low, high = high, low
            first, last = last, first
        if high > low:
            spans.append((low, first, last))

    spans.sort(key=lambda span: span[0])
    return [(first, last) for _, first, last in spans]


def inset(area: BaseGeometry, distance: float) -> Optional[BaseGeometry]:
    """Shrink ``area`` inwards by ``distance`` (same units as the coordinates).

    Holes grow by the same amount. Returns ``None`` once the region is empty.
    """

    inner = area.buffer(-distance)
    if inner.is_empty:
        return None
    return inner


def boundary_coordinates(area: BaseGeometry) -> List[Coordinate]:
    """Exterior then interior rings of every polygon in ``area``."""

    polygons = list(area.geoms) if isinstance(area, MultiPolygon) else [area]
    coordinates: List[Coordinate] = []
    for polygon in polygons:
        for ring in (polygon.exterior, *polygon.interiors):
            coordinates.extend(Coordinate(longitude=x, latitude=y) for x, y in ring.coords)
    return coordinates
