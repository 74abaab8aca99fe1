"""Mini README: Spherical-earth distance helpers.

Structure:
    * distance - haversine great-circle distance between two coordinates.
    * path_length - accumulated distance along an ordered coordinate list.
    * destination - forward projection from a start point, distance and bearing.
    * meters_to_latitude_degrees / meters_to_longitude_degrees - linear
      conversions used to express sweep spacing in degrees.

All functions are pure. The earth is modelled as a sphere with mean radius
6,371,000 m; the metre/degree conversions use the conventional 111,320 m per
degree of latitude.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..errors import PlanningError
from .shapes import Coordinate

EARTH_RADIUS_METERS = 6_371_000.0
METERS_PER_DEGREE = 111_320.0


def distance(first: Coordinate, second: Coordinate) -> float:
    """Return the haversine distance between two coordinates in metres."""

    lat1 = math.radians(first.latitude)
    lat2 = math.radians(second.latitude)
    delta_lat = lat2 - lat1
    delta_lon = math.radians(second.longitude - first.longitude)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(delta_lon / 2) ** 2
    )
    # rounding can push near-antipodal pairs just past 1
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c


def path_length(coordinates: Sequence[Coordinate]) -> float:
    """Sum the haversine distance over consecutive coordinates.

    Returns ``0.0`` for fewer than two coordinates. The computation is
    vectorised so long survey paths with thousands of waypoints stay cheap.
    """

    if len(coordinates) < 2:
        return 0.0
    longitudes = np.radians(np.array([point.longitude for point in coordinates], dtype=float))
    latitudes = np.radians(np.array([point.latitude for point in coordinates], dtype=float))

    delta_lat = np.diff(latitudes)
    delta_lon = np.diff(longitudes)
    a = (
        np.sin(delta_lat / 2) ** 2
        + np.cos(latitudes[:-1]) * np.cos(latitudes[1:]) * np.sin(delta_lon / 2) ** 2
    )
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return float(np.sum(EARTH_RADIUS_METERS * c))


def destination(start: Coordinate, distance_meters: float, bearing_degrees: float) -> Coordinate:
    """Project ``distance_meters`` from ``start`` along a true-north bearing."""

    start_lat = math.radians(start.latitude)
    start_lon = math.radians(start.longitude)
    bearing = math.radians(bearing_degrees)
    angular = distance_meters / EARTH_RADIUS_METERS

    end_lat = math.asin(
        math.sin(start_lat) * math.cos(angular)
        + math.cos(start_lat) * math.sin(angular) * math.cos(bearing)
    )
    end_lon = start_lon + math.atan2(
        math.sin(bearing) * math.sin(angular) * math.cos(start_lat),
        math.cos(angular) - math.sin(start_lat) * math.sin(end_lat),
    )
    return Coordinate(longitude=math.degrees(end_lon), latitude=math.degrees(end_lat))


def meters_to_latitude_degrees(meters: float) -> float:
    """Convert a north-south distance to degrees of latitude."""

    return meters / METERS_PER_DEGREE


def meters_to_longitude_degrees(meters: float, latitude: float) -> float:
    """Convert an east-west distance to degrees of longitude at ``latitude``."""

    scale = METERS_PER_DEGREE * math.cos(math.radians(latitude))
    if scale <= 1e-9:
        raise PlanningError(
            f"Longitude spacing is undefined at latitude {latitude:.6f}"
        )
    return meters / scale
