# aerosurvey/mission_planner/constants.py
import math


class PlannerConstants:
    # Mean Earth radius, matching the spherical model used for bearings and distances.
    EARTH_RADIUS_M: float = 6371008.8
    METERS_PER_DEGREE: float = EARTH_RADIUS_M * math.pi / 180.0

    # A line's endpoint is merged into the last placed waypoint when closer than this.
    ENDPOINT_MERGE_TOLERANCE_M: float = 1.0

    # Sweep-row intersection points closer than this (rotated degrees) are one point.
    INTERSECTION_DEDUP_TOLERANCE_DEG: float = 1e-12

    MAX_OVERLAP_PERCENT: float = 100.0
    SECONDS_PER_MINUTE: int = 60
    PIXELS_PER_GIGAPIXEL: float = 1e9
