"""Mini README: Coverage path planning for survey missions.

Structure:
    * PatternType - wire selector for the three sweep strategies.
    * LinearPattern / CrosshatchPattern / PerimeterPattern - strategy variants.
    * CoverageRequest - polygon plus altitude, overlap and strategy.
    * Waypoint / CoveragePath - immutable planner output.
    * SweepLine - candidate sweep segment before clipping.
    * CoveragePlanner - turns a request into an ordered waypoint sequence.

LINEAR sweeps parallel lines across the polygon envelope in lawn-mower order
and clips each line to the polygon. CROSSHATCH flies a horizontal LINEAR pass
followed by a vertical one. PERIMETER follows the boundary, holes included,
and with higher overlap up to two inset rings. Insetting buffers the whole
polygon, so holes grow with each ring and the pass stops early once the region
is empty. Spacing is expressed in metres and converted to degrees along the
sweep's perpendicular axis; the perimeter inset step is a plain degree value
and does not scale with latitude.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Optional, Tuple, Union

from shapely.geometry.base import BaseGeometry

from ..errors import PlanningError
from ..geometry.clipping import boundary_coordinates, clip_segment, inset, to_shape
from ..geometry.geodesy import meters_to_latitude_degrees, meters_to_longitude_degrees
from ..geometry.shapes import Coordinate, Envelope, Polygon
from ..logging_utils import get_logger
from .serialization import WireWaypoint, serialize

LOGGER = get_logger(__name__)

DEFAULT_BASE_SPACING_METERS = 50.0
DEFAULT_PERIMETER_OFFSET_DEGREES = 0.0001
DEFAULT_MAX_PERIMETER_RINGS = 3


class PatternType(str, Enum):
    """Sweep strategies accepted on the wire."""

    LINEAR = "LINEAR"
    CROSSHATCH = "CROSSHATCH"
    PERIMETER = "PERIMETER"

    @classmethod
    def from_str(cls, value: str) -> "PatternType":
        """Coerce arbitrary casing into a valid pattern type."""

        try:
            return cls(value.strip().upper())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported pattern type: {value}") from error

    def to_pattern(self) -> "Pattern":
        """Return the default strategy variant for this selector."""

        if self is PatternType.LINEAR:
            return LinearPattern()
        if self is PatternType.CROSSHATCH:
            return CrosshatchPattern()
        return PerimeterPattern()


class SweepOrientation(str, Enum):
    """Direction in which sweep lines run."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True, slots=True)
class LinearPattern:
    """Raster sweep; ``orientation`` forces a direction instead of auto-selecting."""

    pattern_type: ClassVar[PatternType] = PatternType.LINEAR
    orientation: Optional[SweepOrientation] = None


@dataclass(frozen=True, slots=True)
class CrosshatchPattern:
    pattern_type: ClassVar[PatternType] = PatternType.CROSSHATCH


@dataclass(frozen=True, slots=True)
class PerimeterPattern:
    pattern_type: ClassVar[PatternType] = PatternType.PERIMETER


Pattern = Union[LinearPattern, CrosshatchPattern, PerimeterPattern]


@dataclass(frozen=True, slots=True)
class CoverageRequest:
    """Everything the planner needs for a single survey area."""

    polygon: Polygon
    altitude_meters: int
    overlap_percent: int
    pattern: Pattern

    def __post_init__(self) -> None:
        if not 0 <= self.overlap_percent <= 100:
            raise PlanningError(
                f"Overlap percentage must be between 0 and 100, got {self.overlap_percent}"
            )


@dataclass(frozen=True, slots=True)
class Waypoint:
    """Single waypoint coordinate at a fixed altitude."""

    latitude: float
    longitude: float
    altitude_meters: int

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(longitude=self.longitude, latitude=self.latitude)


@dataclass(frozen=True, slots=True)
class CoveragePath:
    """Ordered waypoints produced for one request."""

    pattern_type: PatternType
    altitude_meters: int
    waypoints: Tuple[Waypoint, ...]

    def __len__(self) -> int:
        return len(self.waypoints)

    @property
    def coordinates(self) -> List[Coordinate]:
        return [waypoint.coordinate for waypoint in self.waypoints]

    def as_wire(self) -> List[WireWaypoint]:
        """Convert waypoints to the ``{lat, lng, alt}`` wire format."""

        return serialize(self.coordinates, self.altitude_meters)


@dataclass(frozen=True, slots=True)
class SweepLine:
    """Envelope-spanning sweep segment, already oriented for flight."""

    index: int
    start: Coordinate
    end: Coordinate


def choose_orientation(envelope: Envelope) -> SweepOrientation:
    """Fly east-west lines when the envelope is wider than it is tall."""

    if envelope.width > envelope.height:
        return SweepOrientation.HORIZONTAL
    return SweepOrientation.VERTICAL


class CoveragePlanner:
    """Generate survey coverage paths over polygon boundaries."""

    def __init__(
        self,
        *,
        base_spacing_meters: float = DEFAULT_BASE_SPACING_METERS,
        perimeter_offset_degrees: float = DEFAULT_PERIMETER_OFFSET_DEGREES,
        max_perimeter_rings: int = DEFAULT_MAX_PERIMETER_RINGS,
    ) -> None:
        if base_spacing_meters <= 0:
            raise ValueError("Base spacing must be positive")
        if max_perimeter_rings < 1:
            raise ValueError("At least one perimeter ring is required")
        self.base_spacing_meters = base_spacing_meters
        self.perimeter_offset_degrees = perimeter_offset_degrees
        self.max_perimeter_rings = max_perimeter_rings
        LOGGER.debug(
            "Initialised CoveragePlanner with base_spacing=%s perimeter_offset=%s max_rings=%s",
            base_spacing_meters,
            perimeter_offset_degrees,
            max_perimeter_rings,
        )

    def spacing_meters(self, overlap_percent: int) -> float:
        """Distance between adjacent sweep lines for the given overlap."""

        return self.base_spacing_meters * (1.0 - overlap_percent / 100.0)

    def perimeter_ring_count(self, overlap_percent: int) -> int:
        """0-49% flies one ring, 50-99% two, 100% three (capped by configuration)."""

        return min(max(1 + overlap_percent // 50, 1), self.max_perimeter_rings)

    def generate(self, request: CoverageRequest) -> CoveragePath:
        """Produce the ordered waypoint sequence for ``request``."""

        envelope = request.polygon.envelope
        if envelope.width <= 0 or envelope.height <= 0:
            raise PlanningError(
                "Survey area envelope has zero width or height; cannot plan coverage"
            )

        match request.pattern:
            case LinearPattern(orientation=orientation):
                coordinates = self._linear(
                    request.polygon,
                    self._sweep_spacing(request.overlap_percent),
                    orientation or choose_orientation(envelope),
                )
            case CrosshatchPattern():
                spacing = self._sweep_spacing(request.overlap_percent)
                coordinates = self._linear(
                    request.polygon, spacing, SweepOrientation.HORIZONTAL
                ) + self._linear(request.polygon, spacing, SweepOrientation.VERTICAL)
            case PerimeterPattern():
                coordinates = self._perimeter(request.polygon, request.overlap_percent)
            case _:
                raise PlanningError(f"Unsupported pattern: {request.pattern!r}")

        waypoints = tuple(
            Waypoint(
                latitude=coordinate.latitude,
                longitude=coordinate.longitude,
                altitude_meters=request.altitude_meters,
            )
            for coordinate in coordinates
        )
        LOGGER.info(
            "Generated %s pattern with %s waypoints at %sm (overlap %s%%)",
            request.pattern.pattern_type.value,
            len(waypoints),
            request.altitude_meters,
            request.overlap_percent,
        )
        return CoveragePath(
            pattern_type=request.pattern.pattern_type,
            altitude_meters=request.altitude_meters,
            waypoints=waypoints,
        )

    def sweep_lines(
        self, envelope: Envelope, spacing_meters: float, orientation: SweepOrientation
    ) -> List[SweepLine]:
        """Lay out every candidate sweep line across ``envelope``.

        Lines sit ``spacing_meters`` apart starting at the envelope minimum;
        odd-indexed lines run in reverse so consecutive passes alternate.
        """

        if orientation is SweepOrientation.HORIZONTAL:
            step = meters_to_latitude_degrees(spacing_meters)
            origin, extent = envelope.min_latitude, envelope.height
        else:
            step = meters_to_longitude_degrees(spacing_meters, envelope.mid_latitude)
            origin, extent = envelope.min_longitude, envelope.width

        num_lines = math.ceil(extent / step) + 1
        lines: List[SweepLine] = []
        for index in range(num_lines):
            position = origin + index * step
            if orientation is SweepOrientation.HORIZONTAL:
                start = Coordinate(longitude=envelope.min_longitude, latitude=position)
                end = Coordinate(longitude=envelope.max_longitude, latitude=position)
            else:
                start = Coordinate(longitude=position, latitude=envelope.min_latitude)
                end = Coordinate(longitude=position, latitude=envelope.max_latitude)
            if index % 2:
                start, end = end, start
            lines.append(SweepLine(index=index, start=start, end=end))
        return lines

    def _sweep_spacing(self, overlap_percent: int) -> float:
        spacing = self.spacing_meters(overlap_percent)
        if spacing <= 0:
            raise PlanningError(
                f"Sweep spacing collapses to zero at {overlap_percent}% overlap"
            )
        return spacing

    def _linear(
        self, polygon: Polygon, spacing_meters: float, orientation: SweepOrientation
    ) -> List[Coordinate]:
        lines = self.sweep_lines(polygon.envelope, spacing_meters, orientation)
        LOGGER.debug(
            "Sweeping %s %s lines at %.2fm spacing", len(lines), orientation.value, spacing_meters
        )
        area = to_shape(polygon)
        clipped = [clip_segment(area, line.start, line.end) for line in lines]

        coordinates: List[Coordinate] = []
        for line, segments in zip(lines, clipped):
            if not segments:
                LOGGER.debug("Sweep line %s misses the survey area; skipping", line.index)
                continue
            for start, end in segments:
                coordinates.extend((start, end))
        return coordinates

    def perimeter_rings(self, polygon: Polygon, overlap_percent: int) -> List[BaseGeometry]:
        """Return the boundary region followed by each successive inset.

        Ring ``k`` buffers ring ``k - 1`` inwards by ``offset * (k - 1)``
        degrees; holes grow by the same amount.
        """

        num_rings = self.perimeter_ring_count(overlap_percent)
        current = to_shape(polygon)
        rings: List[BaseGeometry] = [current]
        for ring_number in range(2, num_rings + 1):
            inner = inset(current, self.perimeter_offset_degrees * (ring_number - 1))
            if inner is None:
                LOGGER.info(
                    "Perimeter ring %s collapsed; stopping after %s rings",
                    ring_number,
                    ring_number - 1,
                )
                break
            rings.append(inner)
            current = inner
        return rings

    def _perimeter(self, polygon: Polygon, overlap_percent: int) -> List[Coordinate]:
        coordinates: List[Coordinate] = []
        for ring in self.perimeter_rings(polygon, overlap_percent):
            coordinates.extend(boundary_coordinates(ring))
        return coordinates
