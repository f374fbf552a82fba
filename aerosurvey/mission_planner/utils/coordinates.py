# aerosurvey/mission_planner/utils/coordinates.py
"""
Geodesic helpers on the mean-radius sphere, backed by pyproj. The sphere
matches METERS_PER_DEGREE, so distances agree with the planar sweep spacing.
Logging is omitted here as these are high-frequency, low-level functions.
"""
from typing import Sequence, Tuple

import numpy as np
from pyproj import Geod

from ..constants import PlannerConstants

GEOD = Geod(a=PlannerConstants.EARTH_RADIUS_M, f=0.0)


def geodesic_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    _, _, distance = GEOD.inv(lon1, lat1, lon2, lat2)
    return distance


def calculate_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Initial bearing from point 1 to point 2, in [0, 360)."""
    azimuth, _, _ = GEOD.inv(lon1, lat1, lon2, lat2)
    return azimuth % 360


def destination_point(lat: float, lon: float, bearing_deg: float, distance_m: float) -> Tuple[float, float]:
    """Point reached by travelling distance_m along bearing_deg. Returns (lat, lon)."""
    dest_lon, dest_lat, _ = GEOD.fwd(lon, lat, bearing_deg, distance_m)
    return dest_lat, dest_lon


def meters_to_degrees(distance_m: float) -> float:
    """Converts a ground distance to degrees of great-circle arc."""
    return distance_m / PlannerConstants.METERS_PER_DEGREE


def degrees_to_meters(distance_deg: float) -> float:
    return distance_deg * PlannerConstants.METERS_PER_DEGREE


def path_distance_m(latlngs: Sequence[Tuple[float, float]]) -> float:
    """Length of the path through consecutive (lat, lng) pairs."""
    if len(latlngs) < 2:
        return 0.0
    coords = np.asarray(latlngs, dtype=float)
    lats, lons = coords[:, 0], coords[:, 1]
    _, _, legs = GEOD.inv(lons[:-1], lats[:-1], lons[1:], lats[1:])
    return float(np.sum(legs))
