import math
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, TYPE_CHECKING

from campus_nav.config import settings

if TYPE_CHECKING:
    from campus_nav.core.buildings import BuildingPolygon

@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude point, with an optional display label"""
    latitude: float
    longitude: float
    name: Optional[str] = field(default=None, compare=False)

    def to_dict(self) -> dict:
        data = {"latitude": self.latitude, "longitude": self.longitude}
        if self.name is not None:
            data["name"] = self.name
        return data

@dataclass(frozen=True)
class BoundingBox:
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    def contains(self, point: Coordinate) -> bool:
        return (
            self.min_lat <= point.latitude <= self.max_lat
            and self.min_lng <= point.longitude <= self.max_lng
        )

def bounding_box_of(boundaries: Iterable[Coordinate]) -> BoundingBox:
    """
    Axis-aligned box around the polygon vertices.
    An empty sequence gives an inverted box that contains nothing.
    """
    min_lat = min_lng = math.inf
    max_lat = max_lng = -math.inf

    for point in boundaries:
        if point.latitude < min_lat:
            min_lat = point.latitude
        if point.latitude > max_lat:
            max_lat = point.latitude
        if point.longitude < min_lng:
            min_lng = point.longitude
        if point.longitude > max_lng:
            max_lng = point.longitude

    return BoundingBox(min_lat=min_lat, max_lat=max_lat, min_lng=min_lng, max_lng=max_lng)

def point_in_polygon(point: Coordinate, boundaries: Sequence[Coordinate]) -> bool:
    """
    Ray casting algorithm to determine if point is inside polygon.
    The bounding box check runs first as a quick exclusion.
    """
    if not bounding_box_of(boundaries).contains(point):
        return False

    inside = False
    n = len(boundaries)
    j = n - 1
    for i in range(n):
        xi, yi = boundaries[i].latitude, boundaries[i].longitude
        xj, yj = boundaries[j].latitude, boundaries[j].longitude
        if (yi > point.longitude) != (yj > point.longitude):
            # yi != yj here, so the division is safe
            x_cross = (xj - xi) * (point.longitude - yi) / (yj - yi) + xi
            if point.latitude < x_cross:
                inside = not inside
        j = i

    return inside

def polygon_center(boundaries: Sequence[Coordinate]) -> Coordinate:
    """
    Vertex centroid: the mean of all vertex latitudes and longitudes.
    Not area weighted. Empty input gives a NaN coordinate.
    """
    if not boundaries:
        return Coordinate(latitude=math.nan, longitude=math.nan)

    lat_sum = sum(p.latitude for p in boundaries)
    lng_sum = sum(p.longitude for p in boundaries)
    return Coordinate(
        latitude=lat_sum / len(boundaries),
        longitude=lng_sum / len(boundaries),
    )

def find_enclosing_polygon(
    point: Coordinate, polygons: Iterable["BuildingPolygon"]
) -> Optional["BuildingPolygon"]:
    """First building (in store order) whose footprint contains the point"""
    for building in polygons:
        if point_in_polygon(point, building.boundaries):
            return building
    return None

def find_enclosing_building(
    point: Coordinate, polygons: Iterable["BuildingPolygon"]
) -> Optional[Coordinate]:
    """
    Center of the first building containing the point, or None.
    Overlapping footprints resolve by store order.
    """
    building = find_enclosing_polygon(point, polygons)
    if building is None:
        return None
    return polygon_center(building.boundaries)

def distance_km(a: Optional[Coordinate], b: Optional[Coordinate]) -> Optional[float]:
    """
    Calculate distance between two points using Haversine formula
    Returns distance in kilometers, or None when either point is unknown
    """
    if a is None or b is None:
        return None

    R = settings.EARTH_RADIUS_KM

    lat1, lon1, lat2, lon2 = map(math.radians, [a.latitude, a.longitude, b.latitude, b.longitude])
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = math.sin(dlat/2)**2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon/2)**2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return R * c

def haversine_distance_km(a: Optional[Coordinate], b: Optional[Coordinate]) -> float:
    """Same as distance_km but reports an unknown distance as UNKNOWN_DISTANCE_KM (9999)"""
    distance = distance_km(a, b)
    if distance is None:
        return settings.UNKNOWN_DISTANCE_KM
    return distance
