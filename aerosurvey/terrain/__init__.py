"""
terrain - Ground elevation lookup and AGL altitude correction for survey plans

Exposes the TerrainCorrector, the elevation client and the pure merge step.
"""

from .core import TerrainCorrector
from .data_models import ElevationServiceConfig, ElevationResult, TerrainIntegrationResult
from .elevation_client import ElevationClient
from .exceptions import TerrainError, ElevationCountMismatchError
from .integrator import apply_terrain_elevations

__all__ = [
    'TerrainCorrector',
    'ElevationClient',
    'ElevationServiceConfig',
    'ElevationResult',
    'TerrainIntegrationResult',
    'TerrainError',
    'ElevationCountMismatchError',
    'apply_terrain_elevations'
]
