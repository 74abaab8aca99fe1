"""Mini README: Planar value types for survey boundaries.

Structure:
    * Coordinate - immutable (longitude, latitude) pair in decimal degrees.
    * Envelope - axis-aligned bounding box with width/height helpers.
    * Ring - closed coordinate loop.
    * Polygon - exterior ring plus optional holes.

The types hold longitude/latitude exactly as parsed. They do not normalise
antimeridian-crossing boundaries; validity is checked when the boundary is
turned into a shapely region for clipping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Tuple


@dataclass(frozen=True, slots=True)
class Coordinate:
    """WGS84 position in decimal degrees."""

    longitude: float
    latitude: float

    def as_pair(self) -> Tuple[float, float]:
        """Return the GeoJSON ``[lng, lat]`` ordering as a tuple."""

        return (self.longitude, self.latitude)


@dataclass(frozen=True, slots=True)
class Envelope:
    """Axis-aligned bounding box over a set of coordinates."""

    min_longitude: float
    min_latitude: float
    max_longitude: float
    max_latitude: float

    @classmethod
    def of(cls, coordinates: Iterable[Coordinate]) -> "Envelope":
        points = list(coordinates)
        if not points:
            raise ValueError("Cannot build an envelope from zero coordinates")
        longitudes = [point.longitude for point in points]
        latitudes = [point.latitude for point in points]
        return cls(min(longitudes), min(latitudes), max(longitudes), max(latitudes))

    @property
    def width(self) -> float:
        """Longitude extent in degrees."""

        return self.max_longitude - self.min_longitude

    @property
    def height(self) -> float:
        """Latitude extent in degrees."""

        return self.max_latitude - self.min_latitude

    @property
    def mid_latitude(self) -> float:
        return (self.min_latitude + self.max_latitude) / 2.0


@dataclass(frozen=True, slots=True)
class Ring:
    """Closed loop of coordinates; the first and last entries are equal."""

    coordinates: Tuple[Coordinate, ...]

    def __post_init__(self) -> None:
        if len(self.coordinates) < 4:
            raise ValueError("A ring requires at least 4 coordinates")
        if self.coordinates[0] != self.coordinates[-1]:
            raise ValueError("A ring must start and end on the same coordinate")

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.coordinates)

    def __len__(self) -> int:
        return len(self.coordinates)

    @property
    def envelope(self) -> Envelope:
        return Envelope.of(self.coordinates)


@dataclass(frozen=True, slots=True)
class Polygon:
    """Survey area: an exterior ring with zero or more holes."""

    exterior: Ring
    holes: Tuple[Ring, ...] = field(default_factory=tuple)

    @property
    def envelope(self) -> Envelope:
        """Bounding box of the exterior ring; holes lie inside it."""

        return self.exterior.envelope
