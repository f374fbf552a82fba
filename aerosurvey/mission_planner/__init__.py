"""
aerosurvey - Survey Mission Planner Module
Reduces a survey area and flight/camera settings to a lawnmower flight plan
with photo footprints, and derives filtered views and mission statistics.
"""

from .core import SurveyPlanner
from .data_models import (
    AltitudeMode, FlightParams, CameraParams, FilterParams, FootprintGeometry,
    Waypoint, Footprint, FlightPlan, FilteredView, MissionStats, MissionSnapshot
)
from .exceptions import (
    PlanningError, EmptyRegionError, GeometryError, InvalidParametersError, NoCoverageError
)
from .filtering import apply_waypoint_filter
from .region import normalize_region
from .statistics import compute_mission_stats
from .utils.calculations import calculate_footprint_geometry

__all__ = [
    "SurveyPlanner",
    "AltitudeMode",
    "FlightParams",
    "CameraParams",
    "FilterParams",
    "FootprintGeometry",
    "Waypoint",
    "Footprint",
    "FlightPlan",
    "FilteredView",
    "MissionStats",
    "MissionSnapshot",
    "PlanningError",
    "EmptyRegionError",
    "GeometryError",
    "InvalidParametersError",
    "NoCoverageError",
    "apply_waypoint_filter",
    "normalize_region",
    "compute_mission_stats",
    "calculate_footprint_geometry",
]
