import logging
from fastapi import APIRouter
from typing import Optional

from campus_nav.api.buildings import StoreDep
from campus_nav.core.geometry import Coordinate, distance_km
from campus_nav.core.navigation import (
    snap_to_nearest_building, is_shuttle_route_applicable, format_location_name
)
from campus_nav.models.building import CoordinateRead
from campus_nav.models.navigation import (
    RouteRequest, SnapResponse, DistanceResponse, ShuttleRouteResponse
)

logger = logging.getLogger(__name__)

router = APIRouter()

def _to_coordinate(point: Optional[CoordinateRead]) -> Optional[Coordinate]:
    return point.to_coordinate() if point is not None else None

@router.post("/snap", response_model=SnapResponse)
async def snap_point(point: CoordinateRead, store: StoreDep) -> SnapResponse:
    """Move a point inside a building to the building's center"""
    original = point.to_coordinate()
    snapped = snap_to_nearest_building(original, store.list_polygons())
    return SnapResponse(
        original=point,
        snapped=CoordinateRead.from_coordinate(snapped),
        moved=snapped != original
    )

@router.post("/distance", response_model=DistanceResponse)
async def route_distance(route: RouteRequest) -> DistanceResponse:
    return DistanceResponse(
        distance_km=distance_km(_to_coordinate(route.origin), _to_coordinate(route.destination))
    )

@router.post("/shuttle", response_model=ShuttleRouteResponse)
async def shuttle_route(route: RouteRequest, store: StoreDep) -> ShuttleRouteResponse:
    """
    Decide whether the campus shuttle should be offered for this route.
    Endpoints are snapped to buildings before the campus proximity check.
    """
    polygons = store.list_polygons()
    origin = _to_coordinate(route.origin)
    destination = _to_coordinate(route.destination)
    current_location = _to_coordinate(route.current_location)

    applicable = is_shuttle_route_applicable(origin, destination, polygons)

    response = ShuttleRouteResponse(shuttle_applicable=applicable)
    if origin is not None:
        origin = snap_to_nearest_building(origin, polygons)
        response.origin = CoordinateRead.from_coordinate(origin)
        response.origin_label = format_location_name(origin, current_location)
    if destination is not None:
        destination = snap_to_nearest_building(destination, polygons)
        response.destination = CoordinateRead.from_coordinate(destination)
        response.destination_label = format_location_name(destination, current_location)

    logger.info(
        f"Shuttle check {response.origin_label} -> {response.destination_label}: {applicable}"
    )
    return response
