# run_survey.py
import argparse
import os

from aerosurvey.mission_planner import SurveyPlanner, FlightParams, FilterParams, normalize_region
from aerosurvey.mission_planner.visualization import MissionMapVisualizer
from aerosurvey.terrain import TerrainCorrector

# A small field near Zurich, as a GeoJSON FeatureCollection
SURVEY_AREA = {
    "type": "FeatureCollection",
    "features": [{
        "type": "Feature",
        "properties": {"name": "north field"},
        "geometry": {
            "type": "Polygon",
            "coordinates": [[
                [8.5400, 47.3700], [8.5440, 47.3700], [8.5445, 47.3725],
                [8.5420, 47.3735], [8.5400, 47.3725], [8.5400, 47.3700]
            ]]
        }
    }]
}


def main():
    """
    Plans a survey over the sample field and prints the mission summary.
    """
    parser = argparse.ArgumentParser(description="Plan a lawnmower photo survey over a sample field.")
    parser.add_argument("--altitude", type=float, default=100.0)
    parser.add_argument("--direction", type=float, default=0.0)
    parser.add_argument("--filter", action="store_true", help="Keep only the first and last two waypoints per line")
    parser.add_argument("--terrain", action="store_true", help="Correct altitudes with online elevation data")
    parser.add_argument("--map", default=None, help="Write an HTML preview map to this path")
    args = parser.parse_args()

    planner = SurveyPlanner(FlightParams(altitude=args.altitude, flight_direction=args.direction),
                            filter_params=FilterParams(enabled=args.filter))

    print("--- Planning Survey Mission ---")
    snapshot = planner.plan_mission(SURVEY_AREA)
    plan = snapshot.plan
    print(f"GSD: {plan.geometry.gsd_cm:.2f} cm/px | Line spacing: {plan.geometry.distance_side_track_m:.1f} m")

    if args.terrain:
        print("\nApplying terrain elevation...")
        result = TerrainCorrector().fetch_and_apply(plan, base_altitude=args.altitude)
        print(f"  > Corrected {result.corrected_count} waypoints, {result.failed_count} unchanged")
        snapshot = planner.refresh(result.plan)

    stats = snapshot.stats
    print("-" * 40)
    print(f"Waypoints:     {stats.total_waypoints}")
    print(f"Flight lines:  {stats.flight_lines}")
    print(f"Distance:      {stats.total_distance} km")
    print(f"Flight time:   {stats.flight_time}")
    print(f"Photos:        {stats.photo_count}")
    print(f"Data volume:   {stats.data_volume} GP")

    if args.map:
        mission_map = MissionMapVisualizer().create_mission_map(snapshot.plan, snapshot.view,
                                                                region=normalize_region(SURVEY_AREA))
        mission_map.save(args.map)
        print(f"\nMap saved to {os.path.abspath(args.map)}")


if __name__ == "__main__":
    main()
