# aerosurvey/mission_planner/waypoints.py
"""
Turns flight line backbones into capture waypoints and photo footprints.
"""
import math
from typing import List, Tuple

from shapely.errors import GEOSException
from shapely.geometry import LineString, MultiPoint

from .constants import PlannerConstants
from .coverage import SweepFrame
from .data_models import FlightParams, FootprintGeometry, Waypoint, Footprint, FlightPlan
from .exceptions import GeometryError, NoCoverageError
from .utils.coordinates import calculate_bearing, destination_point, meters_to_degrees


def place_along_segment(segment: LineString, spacing: float, merge_tolerance: float) -> List[Tuple[float, float]]:
    """
    Points every `spacing` from the segment start, plus the segment end
    unless the last placed point is within `merge_tolerance` of it. All
    distances are in the segment's own units.
    """
    length = segment.length
    count = int(math.floor(length / spacing)) + 1
    points = [segment.interpolate(i * spacing) for i in range(count)]
    coords = [(p.x, p.y) for p in points]

    end_x, end_y = segment.coords[-1]
    last_x, last_y = coords[-1]
    if length > 0 and math.hypot(end_x - last_x, end_y - last_y) > merge_tolerance:
        coords.append((end_x, end_y))
    return coords


def compute_headings(positions: List[Tuple[float, float]]) -> List[float]:
    """
    Heading of each (lat, lng) position toward the next one. The last
    position has no successor and faces back toward the previous one.
    """
    if len(positions) == 1:
        return [0.0]
    headings = []
    for i, (lat, lng) in enumerate(positions):
        target = positions[i + 1] if i < len(positions) - 1 else positions[i - 1]
        headings.append(calculate_bearing(lat, lng, *target))
    return headings


def build_footprint(lat: float, lng: float, heading: float, geometry: FootprintGeometry) -> Footprint:
    """Ground rectangle of a photo centred on (lat, lng) with its long side across track."""
    half_along = geometry.footprint_height_m / 2
    half_across = geometry.footprint_width_m / 2

    forward = destination_point(lat, lng, heading, half_along)
    backward = destination_point(lat, lng, heading - 180, half_along)

    tl = destination_point(*forward, heading - 90, half_across)
    tr = destination_point(*forward, heading + 90, half_across)
    br = destination_point(*backward, heading + 90, half_across)
    bl = destination_point(*backward, heading - 90, half_across)

    ring = [tl, tr, br, bl, tl]
    return Footprint(corners=tuple((c_lng, c_lat) for c_lat, c_lng in ring))


def synthesize_waypoints(frame: SweepFrame, segments: List[LineString],
                         geometry: FootprintGeometry, flight: FlightParams) -> FlightPlan:
    """
    Places waypoints on every backbone and converts them to geographic
    waypoints with headings and footprints.

    Every other line is reversed so the mission is one back-and-forth path.
    Points are rotated back out of the sweep frame before headings and
    footprints are computed, so both are true geographic values.

    Raises:
        NoCoverageError: no waypoint could be placed.
    """
    spacing = meters_to_degrees(geometry.distance_along_track_m)
    tolerance = meters_to_degrees(PlannerConstants.ENDPOINT_MERGE_TOLERANCE_M)

    lines_in_frame = []
    for index, segment in enumerate(segments):
        points = place_along_segment(segment, spacing, tolerance)
        if index % 2 != 0:
            points.reverse()
        lines_in_frame.append(points)

    flat = [p for line in lines_in_frame for p in line]
    if not flat:
        raise NoCoverageError()

    try:
        geographic = frame.to_geographic(MultiPoint(flat))
    except (GEOSException, ValueError) as e:
        raise GeometryError("rotation", f"Could not rotate waypoints back ({e})") from e
    positions = [(p.y, p.x) for p in geographic.geoms]
    headings = compute_headings(positions)

    waypoints = []
    footprints = []
    for (lat, lng), heading in zip(positions, headings):
        waypoints.append(Waypoint(
            lat=lat,
            lng=lng,
            altitude=flight.altitude,
            heading=heading,
            gimbal_pitch=flight.gimbal_pitch,
            speed=flight.speed,
        ))
        footprints.append(build_footprint(lat, lng, heading, geometry))

    flight_lines = []
    cursor = 0
    for line in lines_in_frame:
        flight_lines.append(waypoints[cursor:cursor + len(line)])
        cursor += len(line)

    return FlightPlan(flight_lines=flight_lines, footprints=footprints, geometry=geometry)
