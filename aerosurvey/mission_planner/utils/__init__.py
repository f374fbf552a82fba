# Exposes the low-level helpers for easier access.

from .calculations import calculate_gsd, calculate_footprint_geometry
from .coordinates import (
    geodesic_distance_m, calculate_bearing, destination_point,
    meters_to_degrees, degrees_to_meters, path_distance_m
)
from .geometry import to_local_frame, from_local_frame, rotate_compass

__all__ = [
    "calculate_gsd",
    "calculate_footprint_geometry",
    "geodesic_distance_m",
    "calculate_bearing",
    "destination_point",
    "meters_to_degrees",
    "degrees_to_meters",
    "path_distance_m",
    "to_local_frame",
    "from_local_frame",
    "rotate_compass",
]
