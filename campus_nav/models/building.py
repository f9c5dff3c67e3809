from sqlmodel import SQLModel, Field
from typing import Optional, List

from campus_nav.core.buildings import BuildingPolygon, BuildingMarker
from campus_nav.core.geometry import Coordinate

class CoordinateBase(SQLModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

class CoordinateRead(CoordinateBase):
    name: Optional[str] = None

    def to_coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude, name=self.name)

    @classmethod
    def from_coordinate(cls, coordinate: Coordinate) -> "CoordinateRead":
        return cls(latitude=coordinate.latitude, longitude=coordinate.longitude, name=coordinate.name)

class BuildingRead(SQLModel):
    name: str
    address: str
    description: Optional[str] = None
    center: CoordinateRead
    boundaries: List[CoordinateRead]

    @classmethod
    def from_polygon(cls, building: BuildingPolygon) -> "BuildingRead":
        return cls(
            name=building.name,
            address=building.address,
            description=building.description,
            center=CoordinateRead.from_coordinate(building.center),
            boundaries=[CoordinateRead.from_coordinate(p) for p in building.boundaries]
        )

class BuildingMarkerRead(SQLModel):
    id: int
    name: str
    latitude: float
    longitude: float
    address: str
    description: Optional[str] = None

    @classmethod
    def from_marker(cls, marker: BuildingMarker) -> "BuildingMarkerRead":
        return cls(
            id=marker.id,
            name=marker.name,
            latitude=marker.latitude,
            longitude=marker.longitude,
            address=marker.address,
            description=marker.description
        )

class BuildingLocateResponse(SQLModel):
    inside: bool
    building: Optional[str] = None
    center: Optional[CoordinateRead] = None
