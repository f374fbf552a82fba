# aerosurvey/mission_planner/tests/fixtures.py
"""Shared test geometry: metric squares near a mid-latitude origin and synthetic plans."""
import math
from typing import List, Tuple

from shapely.geometry import Polygon

from aerosurvey.mission_planner.constants import PlannerConstants
from aerosurvey.mission_planner.data_models import (
    FlightPlan, Footprint, FootprintGeometry, Waypoint
)

ORIGIN_LAT, ORIGIN_LNG = 47.0, 8.0


def offset(lat: float, lng: float, north_m: float, east_m: float) -> Tuple[float, float]:
    """Small planar offset in meters, returned as (lat, lng)."""
    dlat = north_m / PlannerConstants.METERS_PER_DEGREE
    dlng = east_m / (PlannerConstants.METERS_PER_DEGREE * math.cos(math.radians(lat)))
    return lat + dlat, lng + dlng


def rectangle(center_lat: float = ORIGIN_LAT, center_lng: float = ORIGIN_LNG,
              width_m: float = 200.0, height_m: float = 200.0) -> Polygon:
    """Axis-aligned rectangle centred on a point, in (lng, lat) order."""
    corners = [(-width_m / 2, -height_m / 2), (width_m / 2, -height_m / 2),
               (width_m / 2, height_m / 2), (-width_m / 2, height_m / 2)]
    coords = []
    for east, north in corners:
        lat, lng = offset(center_lat, center_lng, north, east)
        coords.append((lng, lat))
    return Polygon(coords)


def polygon_from_meters(points_m: List[Tuple[float, float]]) -> Polygon:
    """Polygon from (east, north) meter offsets around the origin."""
    coords = []
    for east, north in points_m:
        lat, lng = offset(ORIGIN_LAT, ORIGIN_LNG, north, east)
        coords.append((lng, lat))
    return Polygon(coords)


SAMPLE_GEOMETRY = FootprintGeometry(
    gsd_m=0.0366, footprint_width_m=146.3, footprint_height_m=109.7,
    distance_along_track_m=21.9, distance_side_track_m=43.9,
)


def make_plan(line_lengths: List[int], altitude: float = 100.0) -> FlightPlan:
    """A plan with distinct waypoints and footprints, one line per length."""
    lines = []
    footprints = []
    for line_index, length in enumerate(line_lengths):
        line = []
        for i in range(length):
            lat, lng = offset(ORIGIN_LAT, ORIGIN_LNG, line_index * 40.0, i * 20.0)
            line.append(Waypoint(lat=lat, lng=lng, altitude=altitude, heading=90.0, gimbal_pitch=-90.0, speed=10.0))
            footprints.append(Footprint(corners=((lng, lat), (lng + 1e-4, lat), (lng + 1e-4, lat + 1e-4),
                                                 (lng, lat + 1e-4), (lng, lat))))
        lines.append(line)
    return FlightPlan(flight_lines=lines, footprints=footprints, geometry=SAMPLE_GEOMETRY)
