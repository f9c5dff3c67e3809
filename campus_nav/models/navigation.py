from sqlmodel import SQLModel
from typing import Optional, List, Dict, Any

from campus_nav.models.building import CoordinateRead

class RouteRequest(SQLModel):
    origin: Optional[CoordinateRead] = None
    destination: Optional[CoordinateRead] = None
    current_location: Optional[CoordinateRead] = None  # caller-owned, used for labels only

class SnapResponse(SQLModel):
    original: CoordinateRead
    snapped: CoordinateRead
    moved: bool

class DistanceResponse(SQLModel):
    distance_km: Optional[float] = None

class ShuttleRouteResponse(SQLModel):
    shuttle_applicable: bool
    origin: Optional[CoordinateRead] = None
    destination: Optional[CoordinateRead] = None
    origin_label: Optional[str] = None
    destination_label: Optional[str] = None

class ShuttlePointRead(SQLModel):
    id: str
    latitude: float
    longitude: float
    icon_image: str = ""

class ShuttleDataRead(SQLModel):
    buses: List[ShuttlePointRead]
    stations: List[ShuttlePointRead]
    center_point: CoordinateRead

class ShuttlePayload(SQLModel):
    d: Optional[Dict[str, Any]] = None
