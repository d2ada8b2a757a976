"""Buildings router — /api/v1.0/buildings/*.

Routers only decode the request and delegate: every query value is resolved
to its default here, once, and the service's result is returned as the body.
Service errors are not caught; the global handlers render them.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.core.geo import parse_geo_coordinates
from app.core.pagination import PaginationRequest, PlacePageRequest
from app.core.security import Principal, get_current_principal
from app.db.base import get_db
from app.domain.place import PlaceType
from app.schemas.building import (
    BasicBuildingsResponse,
    BuildingDetail,
    BuildingSearchInfo,
    GeoDistanceQuery,
)
from app.schemas.place import ExchangePlace, ExchangePlacesResponse, PlaceFilter
from app.schemas.schedule import WorkspacesSchedule
from app.services.directory import BuildingsService

router = APIRouter(
    prefix="/buildings",
    tags=["Buildings"],
    dependencies=[Depends(get_current_principal)],
)


# ------------------------------------------------------------------
# Dependencies — service instance and query-string records
# ------------------------------------------------------------------

def get_buildings_service(session: AsyncSession = Depends(get_db)) -> BuildingsService:
    return BuildingsService(session, settings.default_place_top_count)


def geo_distance_query(
    source_geo_coordinates: str = Query(
        ..., alias="sourceGeoCoordinates", description="Comma-separated latitude and longitude",
    ),
    distance_from_source: Optional[float] = Query(
        default=None, gt=0, alias="distanceFromSource", description="Radius in miles",
    ),
) -> GeoDistanceQuery:
    try:
        parse_geo_coordinates(source_geo_coordinates)
    except ValueError as exc:
        raise ValidationError(f"Invalid sourceGeoCoordinates: {exc}") from exc
    return GeoDistanceQuery(
        source_geo_coordinates=source_geo_coordinates,
        distance_from_source=distance_from_source,
    )


def room_filter(
    has_video: bool = Query(default=False, alias="hasVideo"),
    has_audio: bool = Query(default=False, alias="hasAudio"),
    has_display: bool = Query(default=False, alias="hasDisplay"),
    is_wheelchair_accessible: bool = Query(default=False, alias="isWheelchairAccessible"),
    fully_enclosed: bool = Query(default=False, alias="fullyEnclosed"),
    surface_hub: bool = Query(default=False, alias="surfaceHub"),
    whiteboard_camera: bool = Query(default=False, alias="whiteboardCamera"),
) -> PlaceFilter:
    return PlaceFilter(
        has_video=has_video,
        has_audio=has_audio,
        has_display=has_display,
        is_wheelchair_accessible=is_wheelchair_accessible,
        fully_enclosed=fully_enclosed,
        surface_hub=surface_hub,
        whiteboard_camera=whiteboard_camera,
    )


def space_filter(
    base: PlaceFilter = Depends(room_filter),
    display_name_search_string: Optional[str] = Query(
        default=None, alias="displayNameSearchString", description="Match workspaces by display name",
    ),
) -> PlaceFilter:
    return base.model_copy(update={"display_name_search_string": display_name_search_string})


# ------------------------------------------------------------------
# Buildings
# ------------------------------------------------------------------

@router.get("/sortByName", response_model=BasicBuildingsResponse)
async def list_buildings_by_name(
    pagination: PaginationRequest = Depends(),
    principal: Principal = Depends(get_current_principal),
    service: BuildingsService = Depends(get_buildings_service),
):
    """Buildings ordered by display name. Defaults: topCount=10, skip=0."""
    return await service.list_buildings_by_name(principal, pagination)


@router.get("/sortByDistance", response_model=BasicBuildingsResponse)
async def list_buildings_by_distance(
    query: GeoDistanceQuery = Depends(geo_distance_query),
    principal: Principal = Depends(get_current_principal),
    service: BuildingsService = Depends(get_buildings_service),
):
    """Buildings ordered by distance (miles) from sourceGeoCoordinates."""
    return await service.list_buildings_by_distance(
        principal, query.source_geo_coordinates, query.distance_from_source
    )


@router.get("/buildingByName/{building_display_name}", response_model=BuildingDetail)
async def get_building_by_display_name(
    building_display_name: str,
    service: BuildingsService = Depends(get_buildings_service),
):
    return await service.get_building_by_display_name(building_display_name)


@router.get("/searchForBuildings/{search_string}", response_model=BuildingSearchInfo)
async def search_for_buildings(
    search_string: str,
    pagination: PaginationRequest = Depends(),
    service: BuildingsService = Depends(get_buildings_service),
):
    return await service.search_buildings(search_string, pagination)


# ------------------------------------------------------------------
# Rooms and workspaces
# ------------------------------------------------------------------

@router.get("/rooms/{room_upn}", response_model=ExchangePlace)
async def get_room(
    room_upn: str,
    service: BuildingsService = Depends(get_buildings_service),
):
    return await service.get_place_by_upn(room_upn, PlaceType.room)


@router.get("/spaces/{space_upn}", response_model=ExchangePlace)
async def get_workspace(
    space_upn: str,
    service: BuildingsService = Depends(get_buildings_service),
):
    return await service.get_place_by_upn(space_upn, PlaceType.space)


@router.get("/{building_upn}/rooms", response_model=ExchangePlacesResponse)
async def list_building_rooms(
    building_upn: str,
    page: PlacePageRequest = Depends(),
    place_filter: PlaceFilter = Depends(room_filter),
    service: BuildingsService = Depends(get_buildings_service),
):
    """Conference rooms of a building. Unset amenity flags do not filter."""
    return await service.list_places(building_upn, PlaceType.room, page, place_filter)


@router.get("/{building_upn}/spaces", response_model=ExchangePlacesResponse)
async def list_building_workspaces(
    building_upn: str,
    page: PlacePageRequest = Depends(),
    place_filter: PlaceFilter = Depends(space_filter),
    service: BuildingsService = Depends(get_buildings_service),
):
    """Workspaces of a building, optionally narrowed by displayNameSearchString."""
    return await service.list_places(building_upn, PlaceType.space, page, place_filter)


@router.get("/{building_upn}/schedule", response_model=WorkspacesSchedule)
async def get_workspaces_schedule(
    building_upn: str,
    start: str = Query(..., description="From date/time (ISO-8601)"),
    end: str = Query(..., description="To date/time (ISO-8601)"),
    service: BuildingsService = Depends(get_buildings_service),
):
    """Reserved / available percentages across the building's workspaces."""
    return await service.get_workspaces_schedule(building_upn, start, end)
