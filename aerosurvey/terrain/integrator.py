# aerosurvey/terrain/integrator.py
"""
Merges externally sampled ground elevation into waypoint altitudes.

Correction always targets the canonical flight plan. A filtered view is
derived from the plan, so it must be re-derived after correction rather than
corrected itself.
"""
import dataclasses
import logging
import math
from typing import Optional, Sequence

from ..mission_planner.data_models import FlightPlan
from .data_models import TerrainIntegrationResult
from .exceptions import ElevationCountMismatchError


def _is_unknown(elevation: Optional[float]) -> bool:
    return elevation is None or (isinstance(elevation, float) and math.isnan(elevation))


def apply_terrain_elevations(plan: FlightPlan, elevations: Sequence[Optional[float]],
                             base_altitude: float) -> TerrainIntegrationResult:
    """
    Returns a copy of the plan whose waypoint altitudes are ground elevation
    plus `base_altitude`, rounded to centimeters.

    Elevations are matched by position to the flattened waypoint sequence.
    Waypoints with an unknown elevation keep their current altitude.

    Raises:
        TypeError: if given anything other than a canonical FlightPlan.
        ElevationCountMismatchError: if the sample count differs from the
            waypoint count.
    """
    if not isinstance(plan, FlightPlan):
        raise TypeError("Terrain correction applies to canonical flight plans only; "
                        "re-derive the filtered view after correcting the plan")
    if len(elevations) != plan.waypoint_count:
        raise ElevationCountMismatchError(plan.waypoint_count, len(elevations))

    corrected_lines = []
    corrected = failed = 0
    index = 0
    for line in plan.flight_lines:
        new_line = []
        for wp in line:
            elevation = elevations[index]
            index += 1
            if _is_unknown(elevation):
                failed += 1
                new_line.append(wp)
                continue
            corrected += 1
            new_line.append(dataclasses.replace(wp, altitude=round(elevation + base_altitude, 2)))
        corrected_lines.append(new_line)

    if failed:
        logging.warning(f"Could not correct {failed} of {plan.waypoint_count} waypoints; "
                        f"they keep their original relative altitude.")
    logging.info(f"Terrain data applied to {corrected} waypoints.")

    corrected_plan = dataclasses.replace(plan, flight_lines=corrected_lines)
    return TerrainIntegrationResult(plan=corrected_plan, corrected_count=corrected, failed_count=failed)
