from fastapi import APIRouter

from campus_nav.core.shuttle import parse_shuttle_data
from campus_nav.models.building import CoordinateRead
from campus_nav.models.navigation import ShuttlePayload, ShuttleDataRead, ShuttlePointRead

router = APIRouter()

@router.post("/parse", response_model=ShuttleDataRead)
async def parse_shuttle_payload(payload: ShuttlePayload) -> ShuttleDataRead:
    """Split a raw shuttle tracker response into buses and stations"""
    data = parse_shuttle_data(payload.model_dump())
    return ShuttleDataRead(
        buses=[ShuttlePointRead(**bus.to_dict()) for bus in data.buses],
        stations=[ShuttlePointRead(**station.to_dict()) for station in data.stations],
        center_point=CoordinateRead.from_coordinate(data.center_point)
    )
