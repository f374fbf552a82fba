# aerosurvey/mission_planner/region.py
"""
Reduces survey area input into the single (multi)polygon that gets swept.

Input may be shapely geometries or GeoJSON mappings: bare Polygon and
MultiPolygon geometries, Features and FeatureCollections. Anything that is
not polygonal (points, lines, empty features) is ignored.
"""
import logging
from collections.abc import Mapping
from typing import Iterable, Iterator, List, Union

from shapely.errors import GEOSException
from shapely.geometry import shape
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from shapely.validation import explain_validity

from .exceptions import EmptyRegionError, GeometryError

POLYGON_TYPES = ("Polygon", "MultiPolygon")

RegionInput = Union[BaseGeometry, Mapping, Iterable[Union[BaseGeometry, Mapping]]]


def _iter_polygons(features: Iterable) -> Iterator[BaseGeometry]:
    for feature in features:
        if isinstance(feature, BaseGeometry):
            geom = feature
        elif isinstance(feature, Mapping):
            kind = feature.get("type")
            if kind == "FeatureCollection":
                yield from _iter_polygons(feature.get("features") or [])
                continue
            mapping = feature.get("geometry") if kind == "Feature" else feature
            if not mapping or mapping.get("type") not in POLYGON_TYPES:
                continue
            try:
                geom = shape(mapping)
            except (GEOSException, ValueError, TypeError, KeyError, IndexError) as e:
                raise GeometryError("parsing", f"Malformed polygon coordinates ({e})") from e
        else:
            raise GeometryError("parsing", f"Unsupported survey area input of type {type(feature).__name__}")

        if geom.geom_type in POLYGON_TYPES and not geom.is_empty:
            yield geom


def normalize_region(features: RegionInput) -> BaseGeometry:
    """
    Merges the polygon features of a survey area into one region.

    A single polygon is returned unchanged; several are unioned, so disjoint
    inputs become one MultiPolygon.

    Raises:
        EmptyRegionError: no polygon feature is present.
        GeometryError: a part is self-intersecting or the union fails.
    """
    if isinstance(features, (BaseGeometry, Mapping)):
        features = [features]

    polygons: List[BaseGeometry] = list(_iter_polygons(features))
    if not polygons:
        raise EmptyRegionError()

    for geom in polygons:
        if not geom.is_valid:
            raise GeometryError("validation", f"Invalid survey polygon: {explain_validity(geom)}")

    if len(polygons) == 1:
        return polygons[0]

    try:
        region = unary_union(polygons)
    except (GEOSException, ValueError) as e:
        raise GeometryError("union", f"Could not merge survey polygons ({e})") from e

    if region.is_empty or region.geom_type not in POLYGON_TYPES:
        raise GeometryError("union", f"Merged survey area is a {region.geom_type}, not a polygon")

    logging.info(f"Merged {len(polygons)} survey polygons into one {region.geom_type}.")
    return region
