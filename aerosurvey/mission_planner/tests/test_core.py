# aerosurvey/mission_planner/tests/test_core.py

import unittest

import folium
from shapely.geometry import mapping

from aerosurvey.mission_planner import (
    SurveyPlanner, FlightParams, FilterParams, EmptyRegionError, InvalidParametersError
)
from aerosurvey.mission_planner.visualization import MissionMapVisualizer
from aerosurvey.mission_planner.tests.fixtures import rectangle, make_plan


class TestSurveyPlanner(unittest.TestCase):
    """End-to-end planning through the orchestrator"""

    def setUp(self):
        self.region = rectangle(width_m=200, height_m=200)
        self.survey_area = {
            "type": "FeatureCollection",
            "features": [{"type": "Feature", "properties": {}, "geometry": mapping(self.region)}],
        }
        self.planner = SurveyPlanner(FlightParams(speed=8.0))

    def test_plan_mission_builds_snapshot(self):
        snapshot = self.planner.plan_mission(self.survey_area)
        self.assertEqual(snapshot.view.waypoints, snapshot.plan.waypoints)
        self.assertEqual(snapshot.stats.total_waypoints, snapshot.plan.waypoint_count)
        self.assertEqual(snapshot.stats.flight_lines, snapshot.plan.line_count)
        self.assertGreater(snapshot.stats.total_distance_km, 0)

    def test_refresh_with_filter_keeps_canonical_plan(self):
        snapshot = self.planner.plan_mission(self.survey_area)
        filtered = self.planner.refresh(snapshot.plan, FilterParams(enabled=True, keep_start=2, keep_end=2))

        self.assertIs(filtered.plan, snapshot.plan)
        self.assertEqual(len(filtered.view.waypoints), 4 * snapshot.plan.line_count)
        self.assertEqual(len(filtered.view.footprints), len(filtered.view.waypoints))
        self.assertEqual(filtered.stats.photo_count, len(filtered.view.waypoints))
        self.assertEqual(filtered.stats.flight_lines, snapshot.plan.line_count)
        self.assertLess(filtered.stats.data_volume_gp, snapshot.stats.data_volume_gp)

    def test_errors_propagate(self):
        with self.assertRaises(EmptyRegionError):
            self.planner.generate_plan({"type": "FeatureCollection", "features": []})
        with self.assertRaises(InvalidParametersError):
            SurveyPlanner(FlightParams(side_overlap=100)).generate_plan(self.region)

    def test_waypoints_serialize_as_plain_data(self):
        plan = self.planner.generate_plan(self.region)
        record = plan.waypoints[0].to_dict()
        self.assertEqual(set(record), {"lat", "lng", "altitude", "heading", "gimbal_pitch", "speed"})
        feature = plan.footprints[0].to_geojson()
        self.assertEqual(feature["geometry"]["type"], "Polygon")
        self.assertEqual(len(feature["geometry"]["coordinates"][0]), 5)

    def test_summarize_without_plan(self):
        self.assertIsNone(self.planner.summarize(None, self.planner.build_view(None)))


class TestMissionMapVisualizer(unittest.TestCase):

    def test_map_contains_layers(self):
        region = rectangle()
        plan = SurveyPlanner().generate_plan(region)
        mission_map = MissionMapVisualizer().create_mission_map(plan, region=region)
        self.assertIsInstance(mission_map, folium.Map)
        html = mission_map.get_root().render()
        self.assertIn("Flight Path", html)
        self.assertIn("Photo Footprints", html)
        self.assertIn("Survey Area", html)

    def test_empty_plan_rejected(self):
        with self.assertRaises(ValueError):
            MissionMapVisualizer().create_mission_map(make_plan([]))


if __name__ == '__main__':
    unittest.main()
