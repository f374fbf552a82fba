# aerosurvey/constants/__init__.py

from .cameras import CameraPresets
from .elevation import ElevationServiceConstants

__all__ = ["CameraPresets", "ElevationServiceConstants"]
