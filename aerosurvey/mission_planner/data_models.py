# aerosurvey/mission_planner/data_models.py
"""
Defines the core data structures shared by every stage of survey planning.

Parameter records (FlightParams, CameraParams, FilterParams) validate on
construction. Plan records (Waypoint, Footprint, FlightPlan, FilteredView,
MissionStats) are frozen values: every stage returns a new one instead of
editing what it was given.
"""
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import List, Optional, Tuple, Dict, Any

from shapely.geometry import Polygon

from ..constants.cameras import CameraPresets
from .constants import PlannerConstants
from .exceptions import InvalidParametersError


class AltitudeMode(str, Enum):
    RELATIVE = "relative"
    AGL = "agl"


# --- Input Parameters ---

@dataclass
class FlightParams:
    """Flight settings for a survey. Overlaps in percent, angles in degrees."""
    altitude: float = 100.0
    front_overlap: float = 80.0
    side_overlap: float = 70.0
    speed: float = 10.0
    gimbal_pitch: float = -90.0
    flight_direction: float = 0.0
    altitude_mode: AltitudeMode = AltitudeMode.RELATIVE

    def __post_init__(self):
        if self.altitude <= 0:
            raise InvalidParametersError("altitude", self.altitude, "Altitude must be positive")
        if self.speed <= 0:
            raise InvalidParametersError("speed", self.speed, "Speed must be positive")
        for name in ("front_overlap", "side_overlap"):
            value = getattr(self, name)
            if not 0 <= value <= PlannerConstants.MAX_OVERLAP_PERCENT:
                raise InvalidParametersError(name, value, "Overlap must be a percentage")
        self.flight_direction = self.flight_direction % 360
        try:
            self.altitude_mode = AltitudeMode(self.altitude_mode)
        except ValueError:
            raise InvalidParametersError("altitude_mode", self.altitude_mode, "Unknown altitude mode") from None


@dataclass
class CameraParams:
    """Camera sensor geometry. Defaults are the DJI Mini 4 Pro."""
    sensor_width: float = 9.83    # mm
    sensor_height: float = 7.37   # mm
    focal_length: float = 6.72    # mm
    image_width: int = 4000       # px
    image_height: int = 3000      # px

    def __post_init__(self):
        for name in ("sensor_width", "sensor_height", "focal_length"):
            if getattr(self, name) <= 0:
                raise InvalidParametersError(name, getattr(self, name), "Camera dimension must be positive")
        for name in ("image_width", "image_height"):
            value = getattr(self, name)
            if int(value) != value or value <= 0:
                raise InvalidParametersError(name, value, "Image size must be a positive whole number of pixels")
            setattr(self, name, int(value))

    @classmethod
    def from_preset(cls, name: str) -> "CameraParams":
        return cls(**CameraPresets.get(name))


@dataclass
class FilterParams:
    """Edge-preserving decimation: how many waypoints to keep at each end of a line."""
    enabled: bool = False
    keep_start: int = 2
    keep_end: int = 2

    def __post_init__(self):
        for name in ("keep_start", "keep_end"):
            value = getattr(self, name)
            if int(value) != value or value < 0:
                raise InvalidParametersError(name, value, "Filter counts must be non-negative integers")
            setattr(self, name, int(value))


# --- Derived Photogrammetry ---

@dataclass(frozen=True)
class FootprintGeometry:
    """Ground sample distance, photo footprint and capture spacing, all in meters."""
    gsd_m: float
    footprint_width_m: float       # across track
    footprint_height_m: float      # along track
    distance_along_track_m: float
    distance_side_track_m: float

    @property
    def gsd_cm(self) -> float:
        return self.gsd_m * 100


# --- Plan Output ---

@dataclass(frozen=True)
class Waypoint:
    """A single photo capture position."""
    lat: float
    lng: float
    altitude: float
    heading: float
    gimbal_pitch: float
    speed: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class Footprint:
    """Ground rectangle of one photo as a closed (lng, lat) ring of five points."""
    corners: Tuple[Tuple[float, float], ...]

    def to_polygon(self) -> Polygon:
        return Polygon(self.corners)

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "properties": {},
            "geometry": {"type": "Polygon", "coordinates": [[list(c) for c in self.corners]]},
        }


FlightLine = List[Waypoint]


@dataclass(frozen=True)
class FlightPlan:
    """
    The canonical output of one planning invocation. Footprints are aligned
    1:1 with the flattened waypoint sequence.
    """
    flight_lines: List[FlightLine]
    footprints: List[Footprint]
    geometry: FootprintGeometry

    @property
    def waypoints(self) -> List[Waypoint]:
        return [wp for line in self.flight_lines for wp in line]

    @property
    def waypoint_count(self) -> int:
        return sum(len(line) for line in self.flight_lines)

    @property
    def line_count(self) -> int:
        return len(self.flight_lines)


@dataclass(frozen=True)
class FilteredView:
    """The active (possibly decimated) waypoints and their footprints."""
    waypoints: List[Waypoint] = field(default_factory=list)
    footprints: List[Footprint] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.waypoints


@dataclass(frozen=True)
class MissionStats:
    """Summary figures for the active waypoint set."""
    total_waypoints: int
    flight_lines: int
    total_distance_km: float
    flight_time_s: float
    photo_count: int
    data_volume_gp: float

    @property
    def flight_time(self) -> str:
        """Flight time as MM:SS, floored to the second."""
        total_seconds = int(self.flight_time_s)
        minutes, seconds = divmod(total_seconds, PlannerConstants.SECONDS_PER_MINUTE)
        return f"{minutes:02d}:{seconds:02d}"

    @property
    def total_distance(self) -> str:
        return f"{self.total_distance_km:.2f}"

    @property
    def data_volume(self) -> str:
        return f"{self.data_volume_gp:.2f}"


@dataclass(frozen=True)
class MissionSnapshot:
    """Canonical plan, the view derived from it, and the stats of that view."""
    plan: FlightPlan
    view: FilteredView
    stats: Optional[MissionStats] = None
