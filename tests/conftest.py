"""Pytest configuration and fixtures for campus navigation tests."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from campus_nav.core.buildings import BuildingPolygon, PolygonStore, get_polygon_store
from campus_nav.core.geometry import Coordinate
from campus_nav.main import app


def make_building(name, points, address="1 Test St.", description=None):
    return BuildingPolygon(
        name=name,
        address=address,
        boundaries=tuple(Coordinate(lat, lng) for lat, lng in points),
        description=description,
    )


@pytest.fixture
def triangle():
    """Right triangle with vertices (0,0), (0,4), (3,0)."""
    return (Coordinate(0, 0), Coordinate(0, 4), Coordinate(3, 0))


@pytest.fixture
def triangle_store():
    return PolygonStore([make_building("Triangle Hall", [(0, 0), (0, 4), (3, 0)])])


@pytest.fixture
def campus_store():
    """The bundled Concordia building polygons."""
    return get_polygon_store()


@pytest_asyncio.fixture
async def client(triangle_store):
    """Async test client backed by the synthetic triangle store."""
    app.dependency_overrides[get_polygon_store] = lambda: triangle_store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def campus_client():
    """Async test client backed by the bundled building data."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
