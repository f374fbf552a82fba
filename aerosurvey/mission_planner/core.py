# aerosurvey/mission_planner/core.py
"""
The orchestrator for survey mission planning. It chains region
normalization, the coverage sweep and waypoint synthesis into a canonical
flight plan, and derives the filtered view and statistics from it.

Planning is CPU-bound and can take a while on complex regions. Callers
should run it off any interactive thread and not start a second plan for the
same mission before the first one returns.
"""
import logging
from typing import Optional

from .coverage import generate_backbones
from .data_models import (
    FlightParams, CameraParams, FilterParams, FlightPlan, FilteredView,
    MissionStats, MissionSnapshot
)
from .filtering import apply_waypoint_filter
from .region import normalize_region, RegionInput
from .statistics import compute_mission_stats
from .utils.calculations import calculate_footprint_geometry
from .waypoints import synthesize_waypoints


class SurveyPlanner:
    """Plans lawnmower photo surveys over polygon areas."""

    def __init__(self, flight_params: Optional[FlightParams] = None,
                 camera_params: Optional[CameraParams] = None,
                 filter_params: Optional[FilterParams] = None):
        self.flight_params = flight_params or FlightParams()
        self.camera_params = camera_params or CameraParams()
        self.filter_params = filter_params or FilterParams()

        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logging.info(f"SurveyPlanner initialized. Altitude: {self.flight_params.altitude}m, "
                     f"Overlap: {self.flight_params.front_overlap}/{self.flight_params.side_overlap}%, "
                     f"Direction: {self.flight_params.flight_direction}°")

    def generate_plan(self, survey_area: RegionInput) -> FlightPlan:
        """
        Builds the canonical flight plan for a survey area.

        Raises:
            EmptyRegionError, GeometryError, InvalidParametersError, NoCoverageError
        """
        geometry = calculate_footprint_geometry(self.flight_params, self.camera_params)
        region = normalize_region(survey_area)

        frame, segments = generate_backbones(region, self.flight_params.flight_direction,
                                             geometry.distance_side_track_m)
        plan = synthesize_waypoints(frame, segments, geometry, self.flight_params)

        logging.info(f"Flight plan generated with {plan.waypoint_count} waypoints on {plan.line_count} lines "
                     f"(GSD {geometry.gsd_cm:.2f} cm/px).")
        return plan

    def build_view(self, plan: Optional[FlightPlan], filter_params: Optional[FilterParams] = None) -> FilteredView:
        return apply_waypoint_filter(plan, filter_params or self.filter_params)

    def summarize(self, plan: Optional[FlightPlan], view: FilteredView) -> Optional[MissionStats]:
        if plan is None:
            return None
        return compute_mission_stats(view.waypoints, plan.flight_lines,
                                     self.flight_params.speed, self.camera_params)

    def plan_mission(self, survey_area: RegionInput) -> MissionSnapshot:
        """Plans a survey area and derives its active view and statistics."""
        return self.refresh(self.generate_plan(survey_area))

    def refresh(self, plan: FlightPlan, filter_params: Optional[FilterParams] = None) -> MissionSnapshot:
        """
        Re-derives the view and statistics from a canonical plan, e.g. after
        terrain correction or a filter change.
        """
        if filter_params is not None:
            self.filter_params = filter_params
        view = self.build_view(plan)
        return MissionSnapshot(plan=plan, view=view, stats=self.summarize(plan, view))
