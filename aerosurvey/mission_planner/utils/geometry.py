# aerosurvey/mission_planner/utils/geometry.py
"""
Planar transforms used to turn an arbitrary sweep bearing into an
axis-aligned sweep.

Geometries are moved into a local frame centred on the survey region where
x = (lon - lon0) * cos(lat0) and y = lat - lat0. Both axes then measure
degrees of great-circle arc, so rotations keep angles and lengths true near
the region and one unit converts to meters with a single factor.
"""
import math
from typing import Tuple

from shapely import affinity
from shapely.geometry.base import BaseGeometry

LOCAL_ORIGIN = (0.0, 0.0)


def to_local_frame(geom: BaseGeometry, origin: Tuple[float, float]) -> BaseGeometry:
    """Maps (lon, lat) geometry into the local frame around origin=(lon0, lat0)."""
    lon0, lat0 = origin
    k = math.cos(math.radians(lat0))
    return affinity.affine_transform(geom, [k, 0.0, 0.0, 1.0, -lon0 * k, -lat0])


def from_local_frame(geom: BaseGeometry, origin: Tuple[float, float]) -> BaseGeometry:
    """Inverse of to_local_frame."""
    lon0, lat0 = origin
    k = math.cos(math.radians(lat0))
    return affinity.affine_transform(geom, [1.0 / k, 0.0, 0.0, 1.0, lon0, lat0])


def rotate_compass(geom: BaseGeometry, angle_deg: float, pivot=LOCAL_ORIGIN) -> BaseGeometry:
    """Rotates clockwise by angle_deg, the sense in which compass bearings grow."""
    return affinity.rotate(geom, -angle_deg, origin=pivot, use_radians=False)
