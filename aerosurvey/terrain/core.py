# aerosurvey/terrain/core.py
import logging
from typing import Optional, Sequence

from ..mission_planner.data_models import FlightPlan
from .data_models import TerrainIntegrationResult
from .elevation_client import ElevationClient
from .integrator import apply_terrain_elevations


class TerrainCorrector:
    """Fetches elevation for a canonical plan and folds it into waypoint altitudes."""

    def __init__(self, client: Optional[ElevationClient] = None):
        self.client = client or ElevationClient()

    def apply(self, plan: FlightPlan, elevations: Sequence[Optional[float]],
              base_altitude: float) -> TerrainIntegrationResult:
        return apply_terrain_elevations(plan, elevations, base_altitude)

    def fetch_and_apply(self, plan: FlightPlan, base_altitude: float) -> TerrainIntegrationResult:
        """Looks up every waypoint of the plan and returns the corrected plan."""
        waypoints = plan.waypoints
        logging.info(f"Fetching terrain data for {len(waypoints)} waypoints...")
        result = self.client.get_elevations(waypoints)
        return self.apply(plan, result.elevations, base_altitude)
