# aerosurvey/mission_planner/filtering.py
import logging
from typing import List, Optional

from .data_models import FilterParams, FilteredView, FlightPlan, Footprint, Waypoint


def _kept_indices(line_length: int, keep_start: int, keep_end: int) -> List[int]:
    """Indices of a line that survive decimation, in traversal order."""
    if line_length <= keep_start + keep_end:
        return list(range(line_length))
    return list(range(keep_start)) + list(range(line_length - keep_end, line_length))


def apply_waypoint_filter(plan: Optional[FlightPlan], params: FilterParams) -> FilteredView:
    """
    Derives the active view of a plan.

    When enabled, each flight line keeps its first `keep_start` and last
    `keep_end` waypoints (with their footprints) and drops the interior;
    lines too short to have an interior are kept whole. The plan itself is
    never modified.
    """
    if plan is None or plan.waypoint_count == 0:
        return FilteredView()
    if not params.enabled:
        return FilteredView(waypoints=plan.waypoints, footprints=list(plan.footprints))

    waypoints: List[Waypoint] = []
    footprints: List[Footprint] = []
    offset = 0
    for line in plan.flight_lines:
        for index in _kept_indices(len(line), params.keep_start, params.keep_end):
            waypoints.append(line[index])
            footprints.append(plan.footprints[offset + index])
        offset += len(line)

    logging.info(f"Waypoint filter kept {len(waypoints)} of {plan.waypoint_count} waypoints "
                 f"(start={params.keep_start}, end={params.keep_end}).")
    return FilteredView(waypoints=waypoints, footprints=footprints)
