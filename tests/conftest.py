# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import os

# Settings are read at import time; point them at throwaway values first.
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AUTH_JWT_SECRET", "test-secret")
os.environ.setdefault("AUTO_CREATE_SCHEMA", "false")

from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient

from app.core.security import Principal, get_current_principal
from app.db.base import Base, build_engine, build_session_factory
from app.main import create_app
from app.routers.v1.buildings import get_buildings_service
from app.schemas.building import (
    BasicBuildingsResponse,
    BuildingBasicInfo,
    BuildingDetail,
    BuildingSearchInfo,
)
from app.schemas.catalog import DirectoryCatalog
from app.schemas.place import ExchangePlace, ExchangePlacesResponse
from app.schemas.schedule import WorkspacesSchedule
from app.services.catalog import import_catalog


# ---------------------------------------------------------------------------
# Router fixtures — the directory service is replaced by a recorder
# ---------------------------------------------------------------------------

class RecordingBuildingsService:
    """Stands in for BuildingsService and remembers every call it receives."""

    def __init__(self):
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.error: Exception | None = None
        self.schedule = WorkspacesSchedule(
            building_upn="building-upn",
            start="2024-01-01T00:00:00Z",
            end="2024-01-02T00:00:00Z",
            reserved=37.5,
            available=62.5,
        )

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if self.error is not None:
            raise self.error

    @property
    def last_call(self) -> tuple[str, tuple[Any, ...]]:
        assert self.calls, "service was not called"
        return self.calls[-1]

    async def list_buildings_by_name(self, principal, pagination):
        self._record("list_buildings_by_name", principal, pagination)
        return BasicBuildingsResponse(
            building_info_list=[BuildingBasicInfo(identity="building-a@contoso.com", display_name="Building A")],
            total_record_count=1,
        )

    async def list_buildings_by_distance(self, principal, source_geo_coordinates, distance_from_source):
        self._record("list_buildings_by_distance", principal, source_geo_coordinates, distance_from_source)
        return BasicBuildingsResponse(building_info_list=[], total_record_count=0)

    async def get_building_by_display_name(self, display_name):
        self._record("get_building_by_display_name", display_name)
        return BuildingDetail(identity="building-a@contoso.com", display_name=display_name)

    async def search_buildings(self, search_string, pagination):
        self._record("search_buildings", search_string, pagination)
        return BuildingSearchInfo(
            building_info_list=[],
            total_record_count=0,
            search_string=search_string,
            top_count=pagination.top_count,
            skip=pagination.skip,
        )

    async def list_places(self, building_upn, place_type, page, place_filter):
        self._record("list_places", building_upn, place_type, page, place_filter)
        return ExchangePlacesResponse(exchange_places_list=[], skip_token=None)

    async def get_place_by_upn(self, upn, place_type):
        self._record("get_place_by_upn", upn, place_type)
        return ExchangePlace(
            identity=upn,
            display_name="Place",
            place_type=place_type,
            building_upn="building-a@contoso.com",
        )

    async def get_workspaces_schedule(self, building_upn, start, end):
        self._record("get_workspaces_schedule", building_upn, start, end)
        return self.schedule


@pytest.fixture
def principal() -> Principal:
    return Principal(object_id="user-1", upn="alex@contoso.com", name="Alex Wilber")


@pytest.fixture
def fake_service() -> RecordingBuildingsService:
    return RecordingBuildingsService()


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance."""
    return create_app()


@pytest.fixture(scope="function")
def client(app, fake_service, principal) -> Generator[TestClient, None, None]:
    """Authenticated client whose directory service is the recorder."""
    app.dependency_overrides[get_buildings_service] = lambda: fake_service
    app.dependency_overrides[get_current_principal] = lambda: principal
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def anonymous_client(app, fake_service) -> Generator[TestClient, None, None]:
    """Client with real bearer-token authentication."""
    app.dependency_overrides[get_buildings_service] = lambda: fake_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Database fixtures — in-memory directory mirror
# ---------------------------------------------------------------------------

CATALOG = {
    "buildings": [
        {
            "upn": "building-a@contoso.com",
            "displayName": "Building A",
            "city": "Redmond",
            "latitude": 47.64,
            "longitude": -122.13,
        },
        {
            "upn": "building-b@contoso.com",
            "displayName": "building B",
            "city": "Redmond",
            "latitude": 47.674,
            "longitude": -122.1215,
        },
        {
            "upn": "seattle-hq@contoso.com",
            "displayName": "Seattle HQ",
            "city": "Seattle",
            "latitude": 47.6062,
            "longitude": -122.3321,
        },
        {
            "upn": "annex@contoso.com",
            "displayName": "Annex",
            "city": "Portland",
        },
    ],
    "places": [
        {
            "upn": "room-101@contoso.com",
            "displayName": "Conference 101",
            "placeType": "room",
            "buildingUpn": "building-a@contoso.com",
            "capacity": 8,
            "hasVideo": True,
            "hasAudio": True,
            "tags": ["teams", "window"],
        },
        {
            "upn": "room-102@contoso.com",
            "displayName": "Conference 102",
            "placeType": "room",
            "buildingUpn": "building-a@contoso.com",
            "capacity": 4,
        },
        {
            "upn": "room-103@contoso.com",
            "displayName": "Huddle 103",
            "placeType": "room",
            "buildingUpn": "building-a@contoso.com",
            "capacity": 4,
            "hasVideo": True,
            "surfaceHub": True,
        },
        {
            "upn": "desk-1@contoso.com",
            "displayName": "Desk Pod 1",
            "placeType": "space",
            "buildingUpn": "building-a@contoso.com",
            "capacity": 2,
        },
        {
            "upn": "desk-2@contoso.com",
            "displayName": "Desk Pod 2",
            "placeType": "space",
            "buildingUpn": "building-a@contoso.com",
            "capacity": 2,
        },
        {
            "upn": "focus-1@contoso.com",
            "displayName": "Focus Booth",
            "placeType": "space",
            "buildingUpn": "building-a@contoso.com",
        },
        {
            "upn": "room-b1@contoso.com",
            "displayName": "Boardroom",
            "placeType": "room",
            "buildingUpn": "building-b@contoso.com",
            "hasVideo": True,
        },
    ],
    "reservations": [
        {"placeUpn": "desk-1@contoso.com", "start": "2024-01-01T09:00:00Z", "end": "2024-01-01T10:00:00Z"},
        {"placeUpn": "desk-1@contoso.com", "start": "2024-01-01T13:00:00Z", "end": "2024-01-01T14:00:00Z"},
        {"placeUpn": "desk-1@contoso.com", "start": "2024-01-03T09:00:00Z", "end": "2024-01-03T10:00:00Z"},
        {"placeUpn": "desk-2@contoso.com", "start": "2024-01-01T23:30:00Z", "end": "2024-01-02T01:00:00Z"},
        {"placeUpn": "focus-1@contoso.com", "start": "2023-12-31T23:00:00Z", "end": "2024-01-01T00:00:00Z"},
        {"placeUpn": "focus-1@contoso.com", "start": "2024-01-01T10:00:00+02:00", "end": "2024-01-01T11:00:00+02:00"},
        {"placeUpn": "focus-1@contoso.com", "start": "2024-01-01T12:00:00Z", "end": "2024-01-01T13:00:00Z"},
    ],
}


@pytest.fixture
async def db_engine():
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Empty directory mirror."""
    async with build_session_factory(db_engine)() as session:
        yield session


@pytest.fixture
async def seeded_session(db_session):
    """Directory mirror loaded with CATALOG."""
    await import_catalog(db_session, DirectoryCatalog.model_validate(CATALOG))
    await db_session.commit()
    return db_session
