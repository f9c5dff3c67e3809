import logging
from fastapi import APIRouter, Depends, HTTPException
from typing import Annotated, List

from campus_nav.core.buildings import PolygonStore, get_polygon_store
from campus_nav.core.geometry import find_enclosing_polygon
from campus_nav.models.building import (
    BuildingRead, BuildingMarkerRead, BuildingLocateResponse, CoordinateRead
)

logger = logging.getLogger(__name__)

router = APIRouter()

StoreDep = Annotated[PolygonStore, Depends(get_polygon_store)]

@router.get("", response_model=List[BuildingRead])
async def list_buildings(store: StoreDep) -> List[BuildingRead]:
    return [BuildingRead.from_polygon(b) for b in store.list_polygons()]

@router.get("/markers", response_model=List[BuildingMarkerRead])
async def get_building_markers(store: StoreDep) -> List[BuildingMarkerRead]:
    """Campus map markers, one per building at its center"""
    return [BuildingMarkerRead.from_marker(m) for m in store.markers()]

@router.post("/locate", response_model=BuildingLocateResponse)
async def locate_building(point: CoordinateRead, store: StoreDep) -> BuildingLocateResponse:
    building = find_enclosing_polygon(point.to_coordinate(), store.list_polygons())
    if building is None:
        return BuildingLocateResponse(inside=False)

    logger.debug(f"({point.latitude}, {point.longitude}) resolved to {building.name}")
    return BuildingLocateResponse(
        inside=True,
        building=building.name,
        center=CoordinateRead.from_coordinate(building.center)
    )

@router.get("/{name}", response_model=BuildingRead)
async def get_building(name: str, store: StoreDep) -> BuildingRead:
    building = store.get(name)
    if building is None:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown building: {name}"
        )
    return BuildingRead.from_polygon(building)
