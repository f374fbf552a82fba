# aerosurvey/mission_planner/statistics.py
from typing import List, Optional

from .constants import PlannerConstants
from .data_models import CameraParams, FlightLine, MissionStats, Waypoint
from .exceptions import InvalidParametersError
from .utils.coordinates import path_distance_m


def compute_mission_stats(active_waypoints: List[Waypoint], flight_lines: List[FlightLine],
                          speed: float, camera: CameraParams) -> Optional[MissionStats]:
    """
    Summarizes the active waypoint set. The line count comes from the
    canonical flight lines. Returns None when there is nothing to summarize.

    Raises:
        InvalidParametersError: speed is not positive.
    """
    if not active_waypoints or not flight_lines:
        return None
    if speed <= 0:
        raise InvalidParametersError("speed", speed, "Speed must be positive")

    total_distance_m = path_distance_m([(wp.lat, wp.lng) for wp in active_waypoints])
    photo_count = len(active_waypoints)
    total_pixels = photo_count * camera.image_width * camera.image_height

    return MissionStats(
        total_waypoints=len(active_waypoints),
        flight_lines=len(flight_lines),
        total_distance_km=round(total_distance_m / 1000, 2),
        flight_time_s=total_distance_m / speed,
        photo_count=photo_count,
        data_volume_gp=round(total_pixels / PlannerConstants.PIXELS_PER_GIGAPIXEL, 2),
    )
