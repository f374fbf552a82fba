# aerosurvey/mission_planner/utils/calculations.py
from ..data_models import CameraParams, FlightParams, FootprintGeometry
from ..exceptions import InvalidParametersError


def calculate_gsd(altitude_m: float, camera: CameraParams) -> float:
    """Ground sample distance in meters per pixel."""
    return (altitude_m * camera.sensor_width) / (camera.focal_length * camera.image_width)


def calculate_footprint_geometry(flight: FlightParams, camera: CameraParams) -> FootprintGeometry:
    """
    Photo footprint and capture spacing for a flight at constant altitude.

    The footprint's long image side (image_width) lies across track, so the
    distance between flight lines derives from the width and the distance
    between photos on a line derives from the height.

    Raises:
        InvalidParametersError: if an overlap leaves no positive spacing.
    """
    gsd = calculate_gsd(flight.altitude, camera)
    footprint_width = gsd * camera.image_width
    footprint_height = gsd * camera.image_height

    distance_along_track = footprint_height * (1 - flight.front_overlap / 100)
    distance_side_track = footprint_width * (1 - flight.side_overlap / 100)

    if distance_along_track <= 0:
        raise InvalidParametersError("front_overlap", flight.front_overlap, "Overlap values must be less than 100%")
    if distance_side_track <= 0:
        raise InvalidParametersError("side_overlap", flight.side_overlap, "Overlap values must be less than 100%")

    return FootprintGeometry(
        gsd_m=gsd,
        footprint_width_m=footprint_width,
        footprint_height_m=footprint_height,
        distance_along_track_m=distance_along_track,
        distance_side_track_m=distance_side_track,
    )
