"""
aerosurvey - Photogrammetric survey mission planning for multirotor drones.

Sub-packages:
    mission_planner  coverage path, waypoints, footprints, filtering, statistics
    terrain          elevation retrieval and AGL altitude correction
    constants        camera presets and service defaults
"""

__version__ = "0.1.0"
