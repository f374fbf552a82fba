# aerosurvey/mission_planner/visualization.py
"""
Static Folium preview of a survey mission: the survey area, the photo
footprints and the flight path, each on its own toggleable layer.
"""
import logging
from typing import Optional

import folium
from shapely.geometry.base import BaseGeometry

from .data_models import FilteredView, FlightPlan, Waypoint


class MissionMapVisualizer:
    """Creates Folium maps of flight plans."""

    def create_mission_map(self, plan: FlightPlan, view: Optional[FilteredView] = None,
                           region: Optional[BaseGeometry] = None) -> folium.Map:
        """
        Draws the active view of a plan (the whole plan when no view is given).
        """
        waypoints = view.waypoints if view is not None else plan.waypoints
        footprints = view.footprints if view is not None else plan.footprints
        if not waypoints:
            raise ValueError("Nothing to draw: the flight plan has no waypoints")

        center = [sum(wp.lat for wp in waypoints) / len(waypoints), sum(wp.lng for wp in waypoints) / len(waypoints)]
        mission_map = folium.Map(location=center, zoom_start=16, tiles="CartoDB positron")

        if region is not None:
            area_group = folium.FeatureGroup(name="Survey Area", show=True).add_to(mission_map)
            folium.GeoJson(region.__geo_interface__, style_function=lambda _: {
                'color': '#377EB8', 'weight': 2, 'fillOpacity': 0.1
            }).add_to(area_group)

        footprint_group = folium.FeatureGroup(name="Photo Footprints", show=False).add_to(mission_map)
        for footprint in footprints:
            folium.Polygon(locations=[(lat, lng) for lng, lat in footprint.corners],
                           color='#4DAF4A', weight=1, fill=True, fill_opacity=0.15).add_to(footprint_group)

        path_group = folium.FeatureGroup(name="Flight Path", show=True).add_to(mission_map)
        folium.PolyLine(locations=[(wp.lat, wp.lng) for wp in waypoints], color='#E41A1C', weight=2,
                        opacity=0.9, tooltip=f"{len(waypoints)} waypoints").add_to(path_group)
        self._create_endpoint_marker(waypoints[0], "Start", 'green').add_to(path_group)
        self._create_endpoint_marker(waypoints[-1], "End", 'red').add_to(path_group)

        folium.LayerControl(collapsed=False).add_to(mission_map)
        mission_map.fit_bounds([[min(wp.lat for wp in waypoints), min(wp.lng for wp in waypoints)],
                                [max(wp.lat for wp in waypoints), max(wp.lng for wp in waypoints)]])
        logging.info(f"Mission map created with {len(waypoints)} waypoints and {len(footprints)} footprints.")
        return mission_map

    def _create_endpoint_marker(self, waypoint: Waypoint, label: str, color: str) -> folium.Marker:
        popup_html = f"""
        <b>{label}</b><br>
        Altitude: {waypoint.altitude:.1f} m<br>
        Heading: {waypoint.heading:.0f}°
        """
        return folium.Marker(location=[waypoint.lat, waypoint.lng], popup=popup_html, tooltip=label,
                             icon=folium.Icon(color=color, icon='camera', prefix='fa'))
