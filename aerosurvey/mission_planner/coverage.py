# aerosurvey/mission_planner/coverage.py
"""
Sweeps a survey region with parallel flight lines.

The region is rotated so the requested flight direction becomes horizontal,
swept bottom to top with horizontal rows spaced one side-track distance
apart, and each row is clipped against the region boundary. Rotating back is
left to the waypoint stage so every waypoint is placed in the sweep frame
first and converted to geographic coordinates once.
"""
import math
from dataclasses import dataclass
from typing import List, Tuple

from shapely.errors import GEOSException
from shapely.geometry import LineString
from shapely.geometry.base import BaseGeometry

from .constants import PlannerConstants
from .exceptions import GeometryError
from .utils.coordinates import meters_to_degrees
from .utils.geometry import to_local_frame, from_local_frame, rotate_compass


@dataclass(frozen=True)
class SweepFrame:
    """The rotated, region-centred frame in which flight lines are horizontal."""
    origin: Tuple[float, float]   # (lon, lat) of the region centroid
    bearing: float

    def to_sweep(self, geom: BaseGeometry) -> BaseGeometry:
        return rotate_compass(to_local_frame(geom, self.origin), -self.bearing)

    def to_geographic(self, geom: BaseGeometry) -> BaseGeometry:
        return from_local_frame(rotate_compass(geom, self.bearing), self.origin)


def _row_intersections(row: LineString, boundary: BaseGeometry) -> List[Tuple[float, float]]:
    """Points where a sweep row crosses the region boundary, sorted west to east."""
    try:
        hit = row.intersection(boundary)
    except GEOSException as e:
        raise GeometryError("intersection", f"Could not clip sweep row ({e})") from e

    points = []
    for part in getattr(hit, "geoms", [hit]):
        if part.is_empty:
            continue
        if part.geom_type == "Point":
            points.append((part.x, part.y))
        else:
            # Boundary edge lying on the row: keep where it starts and ends.
            coords = list(part.coords)
            points.extend([coords[0], coords[-1]])

    points.sort(key=lambda p: p[0])
    unique = []
    for point in points:
        if unique and abs(point[0] - unique[-1][0]) <= PlannerConstants.INTERSECTION_DEDUP_TOLERANCE_DEG:
            continue
        unique.append(point)
    return unique


def generate_backbones(region: BaseGeometry, flight_direction: float,
                       distance_side_track_m: float) -> Tuple[SweepFrame, List[LineString]]:
    """
    Builds the flight line backbones covering a region.

    Crossings on each row are paired in order (1st-2nd, 3rd-4th, ...), which
    skips the gaps of concave and multi-part regions. A row with an odd
    number of crossings, such as one grazing a vertex, drops the last one.

    Returns:
        The sweep frame and the backbone segments in sweep-frame coordinates,
        ordered bottom row first and west to east within a row.
    """
    centroid = region.centroid
    frame = SweepFrame(origin=(centroid.x, centroid.y), bearing=flight_direction)
    try:
        swept = frame.to_sweep(region)
    except (GEOSException, ValueError) as e:
        raise GeometryError("rotation", f"Could not rotate survey area ({e})") from e

    min_x, min_y, max_x, max_y = swept.bounds
    step = meters_to_degrees(distance_side_track_m)
    boundary = swept.boundary

    segments: List[LineString] = []
    row_count = int(math.floor((max_y - min_y) / step)) + 1
    for row_index in range(row_count):
        y = min_y + row_index * step
        crossings = _row_intersections(LineString([(min_x, y), (max_x, y)]), boundary)
        for start, end in zip(crossings[0::2], crossings[1::2]):
            segments.append(LineString([start, end]))

    return frame, segments
