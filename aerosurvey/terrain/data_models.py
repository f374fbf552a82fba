# aerosurvey/terrain/data_models.py
from dataclasses import dataclass, field
from typing import List, Optional

from ..constants.elevation import ElevationServiceConstants
from ..mission_planner.data_models import FlightPlan
from .exceptions import TerrainError


@dataclass
class ElevationServiceConfig:
    """Connection settings for the elevation service."""
    api_url: str = ElevationServiceConstants.API_URL
    batch_size: int = ElevationServiceConstants.BATCH_SIZE
    coordinate_precision: int = ElevationServiceConstants.COORDINATE_PRECISION
    timeout_s: float = ElevationServiceConstants.REQUEST_TIMEOUT_S
    cache_name: str = ElevationServiceConstants.CACHE_NAME
    cache_expire_s: int = ElevationServiceConstants.CACHE_EXPIRE_S
    retries: int = ElevationServiceConstants.RETRIES
    backoff_factor: float = ElevationServiceConstants.BACKOFF_FACTOR

    def __post_init__(self):
        if self.batch_size <= 0:
            raise TerrainError(f"Elevation batch size must be positive, got {self.batch_size}")


@dataclass(frozen=True)
class ElevationResult:
    """One elevation in meters, or None when unknown, per requested position."""
    elevations: List[Optional[float]] = field(default_factory=list)
    failed_count: int = 0


@dataclass(frozen=True)
class TerrainIntegrationResult:
    """An elevation-corrected canonical plan and how many waypoints were corrected."""
    plan: FlightPlan
    corrected_count: int
    failed_count: int
