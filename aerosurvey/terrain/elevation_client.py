# aerosurvey/terrain/elevation_client.py
"""
Fetches ground elevation for waypoint positions from the Open-Meteo
elevation API.

Positions are requested in sequential batches. A batch that fails (network
error, HTTP error or a malformed response) is logged and skipped, leaving its
positions unknown, and the remaining batches still run.
"""
import logging
from typing import List, Optional, Sequence, Tuple, Union

import requests
import requests_cache
from retry_requests import retry

from ..mission_planner.data_models import Waypoint
from .data_models import ElevationServiceConfig, ElevationResult

Position = Union[Waypoint, Tuple[float, float]]


class ElevationClient:
    """Batched, cached elevation lookups."""

    def __init__(self, config: Optional[ElevationServiceConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or ElevationServiceConfig()

        if session is None:
            cache_session = requests_cache.CachedSession(self.config.cache_name, expire_after=self.config.cache_expire_s)
            session = retry(cache_session, retries=self.config.retries, backoff_factor=self.config.backoff_factor)
        self.session = session

        logging.info(f"ElevationClient initialized. Endpoint: {self.config.api_url}, Batch size: {self.config.batch_size}")

    def get_elevations(self, positions: Sequence[Position]) -> ElevationResult:
        """
        Returns one elevation (meters) or None per position, in input order.

        Args:
            positions: Waypoints or (lat, lng) tuples.
        """
        latlngs = [self._as_latlng(p) for p in positions]
        if not latlngs:
            return ElevationResult()

        elevations: List[Optional[float]] = [None] * len(latlngs)
        batch_size = self.config.batch_size
        for start in range(0, len(latlngs), batch_size):
            batch = latlngs[start:start + batch_size]
            values = self._fetch_batch(batch, start)
            if values is None:
                continue
            elevations[start:start + len(batch)] = values

        failed_count = sum(1 for e in elevations if e is None)
        if failed_count:
            # Points over water come back as null, so some failures are expected.
            logging.warning(f"{failed_count} out of {len(latlngs)} waypoint elevations could not be fetched.")
        return ElevationResult(elevations=elevations, failed_count=failed_count)

    def _fetch_batch(self, batch: List[Tuple[float, float]], start: int) -> Optional[List[Optional[float]]]:
        precision = self.config.coordinate_precision
        params = {
            'latitude': ",".join(f"{lat:.{precision}f}" for lat, _ in batch),
            'longitude': ",".join(f"{lng:.{precision}f}" for _, lng in batch),
        }
        try:
            response = self.session.get(self.config.api_url, params=params,
                                        headers={'Accept': 'application/json'}, timeout=self.config.timeout_s)
            response.raise_for_status()

            values = response.json().get('elevation')
            if not isinstance(values, list) or len(values) != len(batch):
                logging.error(f"Elevation API returned malformed data or incorrect result count "
                              f"for batch at index {start}.")
                return None
            return [None if v is None else float(v) for v in values]

        except (requests.exceptions.RequestException, AttributeError, KeyError, TypeError, ValueError) as e:
            logging.error(f"Failed to fetch elevations for batch at index {start}: {e}")
            return None

    @staticmethod
    def _as_latlng(position: Position) -> Tuple[float, float]:
        if isinstance(position, Waypoint):
            return position.lat, position.lng
        lat, lng = position
        return lat, lng
