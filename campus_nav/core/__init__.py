"""
Core modules for the Concordia Campus Navigation service

This package contains the geometry logic and its data:
- geometry: Bounding boxes, point-in-polygon, vertex centroids and haversine distance
- buildings: Static building polygon store and campus map markers
- navigation: Building snapping, shuttle route applicability and endpoint labels
- shuttle: Parsing of shuttle tracker payloads into buses and stations
"""

from .geometry import (
    Coordinate,
    BoundingBox,
    bounding_box_of,
    point_in_polygon,
    polygon_center,
    find_enclosing_polygon,
    find_enclosing_building,
    distance_km,
    haversine_distance_km
)

from .buildings import (
    BuildingPolygon,
    BuildingMarker,
    PolygonStore,
    load_polygon_store,
    get_polygon_store
)

from .navigation import (
    CampusPair,
    SGW_COORDS,
    LOYOLA_COORDS,
    check_user_in_building,
    snap_to_nearest_building,
    is_shuttle_route_applicable,
    format_location_name,
    strip_html
)

from .shuttle import (
    ShuttlePoint,
    ShuttleData,
    parse_shuttle_data
)

from .exceptions import PolygonStoreError

__all__ = [
    # Geometry
    "Coordinate",
    "BoundingBox",
    "bounding_box_of",
    "point_in_polygon",
    "polygon_center",
    "find_enclosing_polygon",
    "find_enclosing_building",
    "distance_km",
    "haversine_distance_km",

    # Buildings
    "BuildingPolygon",
    "BuildingMarker",
    "PolygonStore",
    "load_polygon_store",
    "get_polygon_store",

    # Navigation
    "CampusPair",
    "SGW_COORDS",
    "LOYOLA_COORDS",
    "check_user_in_building",
    "snap_to_nearest_building",
    "is_shuttle_route_applicable",
    "format_location_name",
    "strip_html",

    # Shuttle
    "ShuttlePoint",
    "ShuttleData",
    "parse_shuttle_data",

    "PolygonStoreError"
]
