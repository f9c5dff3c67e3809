"""
Directions helpers built on the geometry core.

Every function takes the building polygons and, where needed, the caller's
current location explicitly; nothing here keeps state between calls.
"""
import re
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from campus_nav.config import settings
from campus_nav.core.buildings import BuildingPolygon
from campus_nav.core.geometry import (
    Coordinate,
    find_enclosing_building,
    haversine_distance_km,
)

HTML_TAG = re.compile(r"<[^>]*>?")

CAMPUS_MATCH_DEGREES = 0.001
CURRENT_LOCATION_MATCH_DEGREES = 0.0001

@dataclass(frozen=True)
class CampusPair:
    """The two campuses the shuttle runs between"""
    first: Coordinate
    second: Coordinate

SGW_COORDS = Coordinate(latitude=settings.SGW_LAT, longitude=settings.SGW_LNG, name="SGW Campus")
LOYOLA_COORDS = Coordinate(latitude=settings.LOYOLA_LAT, longitude=settings.LOYOLA_LNG, name="Loyola Campus")
CONCORDIA_CAMPUSES = CampusPair(first=SGW_COORDS, second=LOYOLA_COORDS)

def check_user_in_building(
    location: Optional[Coordinate], polygons: Iterable[BuildingPolygon]
) -> Optional[Coordinate]:
    """Center of the building the location falls in, None if unknown or outdoors"""
    if location is None:
        return None
    return find_enclosing_building(location, polygons)

def snap_to_nearest_building(point: Coordinate, polygons: Iterable[BuildingPolygon]) -> Coordinate:
    """
    Replace a point inside a known building with that building's center.
    Points outside every building pass through unchanged.
    """
    center = find_enclosing_building(point, polygons)
    if center is None:
        return point
    return replace(center, name=point.name)

def _is_near(point: Coordinate, campus: Coordinate, radius_km: float) -> bool:
    return haversine_distance_km(point, campus) < radius_km

def is_shuttle_route_applicable(
    origin: Optional[Coordinate],
    destination: Optional[Coordinate],
    polygons: Iterable[BuildingPolygon],
    campuses: Optional[CampusPair] = None,
    radius_km: Optional[float] = None
) -> bool:
    """
    True when the route runs between the two campuses: one snapped endpoint
    within radius_km (default 0.5 km) of each campus, in either direction
    """
    if origin is None or destination is None:
        return False

    campuses = campuses or CONCORDIA_CAMPUSES
    radius_km = settings.SHUTTLE_RADIUS_KM if radius_km is None else radius_km
    polygons = tuple(polygons)

    origin = snap_to_nearest_building(origin, polygons)
    destination = snap_to_nearest_building(destination, polygons)

    origin_near_first = _is_near(origin, campuses.first, radius_km)
    origin_near_second = _is_near(origin, campuses.second, radius_km)
    dest_near_first = _is_near(destination, campuses.first, radius_km)
    dest_near_second = _is_near(destination, campuses.second, radius_km)

    return (origin_near_first and dest_near_second) or (origin_near_second and dest_near_first)

def _matches(a: Coordinate, b: Coordinate, tolerance: float) -> bool:
    return abs(a.latitude - b.latitude) < tolerance and abs(a.longitude - b.longitude) < tolerance

def format_location_name(location: Coordinate, user_location: Optional[Coordinate] = None) -> str:
    """Human readable label for a route endpoint"""
    if location.name:
        return location.name

    if _matches(location, SGW_COORDS, CAMPUS_MATCH_DEGREES):
        return "SGW Campus"

    if _matches(location, LOYOLA_COORDS, CAMPUS_MATCH_DEGREES):
        return "Loyola Campus"

    if user_location is not None and _matches(location, user_location, CURRENT_LOCATION_MATCH_DEGREES):
        return "My Current Location"

    return f"{location.latitude:.6f}, {location.longitude:.6f}"

def strip_html(text: str) -> str:
    """Drop markup from routing step instructions"""
    return HTML_TAG.sub("", text)
