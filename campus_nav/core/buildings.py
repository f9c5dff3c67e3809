import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from campus_nav.config import settings
from campus_nav.core.exceptions import PolygonStoreError
from campus_nav.core.geometry import Coordinate, polygon_center

logger = logging.getLogger(__name__)

UNIVERSITY_SUFFIX = " - Concordia University"

@dataclass(frozen=True)
class BuildingPolygon:
    """A named campus building and its footprint"""
    name: str
    address: str
    boundaries: Tuple[Coordinate, ...]
    description: Optional[str] = None

    @property
    def center(self) -> Coordinate:
        return polygon_center(self.boundaries)

@dataclass(frozen=True)
class BuildingMarker:
    """Map marker placed at a building's vertex centroid"""
    id: int
    name: str
    latitude: float
    longitude: float
    address: str
    description: Optional[str] = None

class PolygonStore:
    """Ordered, read-only collection of campus building polygons"""

    def __init__(self, polygons: Sequence[BuildingPolygon]):
        self._polygons: Tuple[BuildingPolygon, ...] = tuple(polygons)

    def __iter__(self) -> Iterator[BuildingPolygon]:
        return iter(self._polygons)

    def __len__(self) -> int:
        return len(self._polygons)

    def list_polygons(self) -> Tuple[BuildingPolygon, ...]:
        """All buildings in insertion order"""
        return self._polygons

    def get(self, name: str) -> Optional[BuildingPolygon]:
        wanted = name.strip().lower()
        for building in self._polygons:
            if building.name.lower() == wanted:
                return building
        return None

    def markers(self) -> List[BuildingMarker]:
        """One marker per building, numbered from 1 in store order"""
        markers = []
        for index, building in enumerate(self._polygons, start=1):
            center = building.center
            markers.append(BuildingMarker(
                id=index,
                name=building.name,
                latitude=center.latitude,
                longitude=center.longitude,
                address=f"{building.address}{UNIVERSITY_SUFFIX}",
                description=building.description
            ))
        return markers

def _parse_coordinate(raw: Any, building_name: str) -> Coordinate:
    try:
        return Coordinate(latitude=float(raw["latitude"]), longitude=float(raw["longitude"]))
    except (KeyError, TypeError, ValueError) as e:
        raise PolygonStoreError(
            f"Invalid boundary point {raw!r} for building {building_name!r}"
        ) from e

def building_from_dict(record: Dict[str, Any]) -> BuildingPolygon:
    """Build a BuildingPolygon from one record of the static asset"""
    if not isinstance(record, dict):
        raise PolygonStoreError(f"Building record must be an object, got {type(record).__name__}")

    name = record.get("name")
    if not name:
        raise PolygonStoreError(f"Building record without a name: {record!r}")

    raw_boundaries = record.get("boundaries")
    if not isinstance(raw_boundaries, list) or not raw_boundaries:
        raise PolygonStoreError(f"Building {name!r} needs at least one boundary point")

    boundaries = tuple(_parse_coordinate(raw, name) for raw in raw_boundaries)
    if len(boundaries) < 3:
        logger.warning(f"Building {name!r} has {len(boundaries)} boundary points and can never contain a location")

    return BuildingPolygon(
        name=name,
        address=record.get("address", ""),
        boundaries=boundaries,
        description=record.get("description")
    )

def load_polygon_store(path: Union[str, Path]) -> PolygonStore:
    """
    Load the static building asset
    Raises FileNotFoundError if the file is missing and
    PolygonStoreError if its contents are malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Building polygon file not found at {path}")

    try:
        with path.open(encoding="utf-8") as f:
            records = json.load(f)
    except json.JSONDecodeError as e:
        raise PolygonStoreError(f"Building polygon file {path} is not valid JSON: {e}") from e

    if not isinstance(records, list):
        raise PolygonStoreError(f"Building polygon file {path} must contain a list of buildings")

    store = PolygonStore([building_from_dict(record) for record in records])
    logger.info(f"Loaded {len(store)} building polygons from {path}")
    return store

@lru_cache(maxsize=1)
def get_polygon_store() -> PolygonStore:
    """Default store, loaded once per process from settings.BUILDINGS_FILE"""
    return load_polygon_store(settings.BUILDINGS_FILE)
