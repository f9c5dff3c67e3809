import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from campus_nav.config import settings
from campus_nav.core.geometry import Coordinate

logger = logging.getLogger(__name__)

BUS_PREFIX = "BUS"
STATION_PREFIX = "GP"

@dataclass(frozen=True)
class ShuttlePoint:
    """A bus or station reported by the shuttle tracker"""
    id: str
    latitude: float
    longitude: float
    icon_image: str = ""

    @property
    def is_bus(self) -> bool:
        return self.id.startswith(BUS_PREFIX)

    @property
    def is_station(self) -> bool:
        return self.id.startswith(STATION_PREFIX)

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude, name=self.id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "icon_image": self.icon_image
        }

def default_center() -> Coordinate:
    return Coordinate(latitude=settings.SHUTTLE_CENTER_LAT, longitude=settings.SHUTTLE_CENTER_LNG)

@dataclass
class ShuttleData:
    buses: List[ShuttlePoint] = field(default_factory=list)
    stations: List[ShuttlePoint] = field(default_factory=list)
    center_point: Coordinate = field(default_factory=default_center)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "buses": [bus.to_dict() for bus in self.buses],
            "stations": [station.to_dict() for station in self.stations],
            "center_point": self.center_point.to_dict()
        }

def _parse_point(raw: Dict[str, Any]) -> Optional[ShuttlePoint]:
    try:
        return ShuttlePoint(
            id=str(raw["ID"]),
            latitude=float(raw["Latitude"]),
            longitude=float(raw["Longitude"]),
            icon_image=raw.get("IconImage") or ""
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning(f"Skipping malformed shuttle point {raw!r}: {e}")
        return None

def parse_shuttle_data(payload: Optional[Dict[str, Any]]) -> ShuttleData:
    """
    Split a raw tracker response into buses and stations
    Points whose ID starts with BUS are buses, GP are stations, anything else is dropped
    """
    body = (payload or {}).get("d") or {}
    data = ShuttleData()

    for raw in body.get("Points") or []:
        point = _parse_point(raw)
        if point is None:
            continue
        if point.is_bus:
            data.buses.append(point)
        elif point.is_station:
            data.stations.append(point)

    center = body.get("CenterPoint")
    if center:
        try:
            data.center_point = Coordinate(
                latitude=float(center["Latitude"]),
                longitude=float(center["Longitude"])
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Invalid shuttle center point {center!r}, using default: {e}")

    logger.debug(f"Parsed {len(data.buses)} buses and {len(data.stations)} stations")
    return data
