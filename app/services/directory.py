"""Buildings directory service — answers every /buildings query from the directory mirror.

The caller's principal is an explicit argument on the calls that need it; the
service itself holds nothing but its session and repositories, so one instance
never carries identity from one request into another.

Rule: No FastAPI here. Errors are raised as AppException subclasses and are
left for the global handlers to render.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.core.geo import haversine_miles, parse_geo_coordinates
from app.core.pagination import PaginationRequest, PlacePageRequest, decode_skip_token, encode_skip_token
from app.core.security import Principal
from app.domain.place import PlaceType
from app.repositories.building import BuildingRepository
from app.repositories.place import PlaceRepository
from app.repositories.reservation import ReservationRepository
from app.schemas.building import (
    BasicBuildingsResponse,
    BuildingBasicInfo,
    BuildingDetail,
    BuildingSearchInfo,
)
from app.schemas.place import ExchangePlace, ExchangePlacesResponse, PlaceFilter
from app.schemas.schedule import WorkspacesSchedule

logger = logging.getLogger(__name__)

DEFAULT_PLACE_TOP_COUNT = 100


def parse_schedule_bound(name: str, value: str) -> datetime:
    """Parse an ISO-8601 date/time; naive values are taken as UTC."""
    text = (value or "").strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError(f"'{name}' must be an ISO-8601 date/time, got '{value}'") from None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class BuildingsService:
    def __init__(self, session: AsyncSession, default_place_top_count: int = DEFAULT_PLACE_TOP_COUNT):
        self._buildings = BuildingRepository(session)
        self._places = PlaceRepository(session)
        self._reservations = ReservationRepository(session)
        self._default_place_top_count = default_place_top_count

    # ------------------------------------------------------------------
    # Buildings
    # ------------------------------------------------------------------

    async def list_buildings_by_name(
        self, principal: Principal, pagination: PaginationRequest
    ) -> BasicBuildingsResponse:
        logger.info(
            "Listing buildings by name for %s (topCount=%d, skip=%d)",
            principal.display, pagination.top_count, pagination.skip,
        )
        items, total = await self._buildings.list_by_name(
            offset=pagination.skip, limit=pagination.top_count
        )
        return BasicBuildingsResponse(
            building_info_list=[BuildingBasicInfo.from_building(b) for b in items],
            total_record_count=total,
        )

    async def list_buildings_by_distance(
        self,
        principal: Principal,
        source_geo_coordinates: str,
        distance_from_source: float | None = None,
    ) -> BasicBuildingsResponse:
        logger.info(
            "Listing buildings near %s within %s miles for %s",
            source_geo_coordinates, distance_from_source, principal.display,
        )
        try:
            lat, lon = parse_geo_coordinates(source_geo_coordinates)
        except ValueError as exc:
            raise ValidationError(f"Invalid sourceGeoCoordinates: {exc}") from exc

        ranked: list[tuple[float, BuildingBasicInfo]] = []
        for building in await self._buildings.list_with_coordinates():
            distance = haversine_miles(lat, lon, building.latitude, building.longitude)
            if distance_from_source is not None and distance > distance_from_source:
                continue
            ranked.append((distance, BuildingBasicInfo.from_building(building, round(distance, 2))))

        ranked.sort(key=lambda pair: (pair[0], pair[1].display_name.lower()))
        return BasicBuildingsResponse(
            building_info_list=[info for _, info in ranked],
            total_record_count=len(ranked),
        )

    async def get_building_by_display_name(self, display_name: str) -> BuildingDetail:
        building = await self._buildings.get_by_display_name(display_name)
        if not building:
            raise NotFoundError("Building", display_name)
        return BuildingDetail.from_building(building)

    async def search_buildings(
        self, search_string: str, pagination: PaginationRequest
    ) -> BuildingSearchInfo:
        items, total = await self._buildings.search(
            search_string, offset=pagination.skip, limit=pagination.top_count
        )
        logger.debug("Building search '%s' matched %d", search_string, total)
        return BuildingSearchInfo(
            building_info_list=[BuildingBasicInfo.from_building(b) for b in items],
            total_record_count=total,
            search_string=search_string,
            top_count=pagination.top_count,
            skip=pagination.skip,
        )

    # ------------------------------------------------------------------
    # Places
    # ------------------------------------------------------------------

    async def _require_building(self, building_upn: str) -> None:
        if not await self._buildings.get(building_upn):
            raise NotFoundError("Building", building_upn)

    async def list_places(
        self,
        building_upn: str,
        place_type: PlaceType,
        page: PlacePageRequest,
        place_filter: PlaceFilter,
    ) -> ExchangePlacesResponse:
        await self._require_building(building_upn)

        offset = decode_skip_token(page.skip_token)
        limit = page.top_count or self._default_place_top_count
        items, total = await self._places.list_for_building(
            building_upn, place_type, place_filter, offset=offset, limit=limit
        )

        next_offset = offset + len(items)
        skip_token = encode_skip_token(next_offset) if items and next_offset < total else None
        return ExchangePlacesResponse(
            exchange_places_list=[ExchangePlace.from_place(p) for p in items],
            skip_token=skip_token,
        )

    async def get_place_by_upn(self, upn: str, place_type: PlaceType) -> ExchangePlace:
        place = await self._places.get_of_type(upn, place_type)
        if not place:
            entity = "Room" if place_type is PlaceType.room else "Workspace"
            raise NotFoundError(entity, upn)
        return ExchangePlace.from_place(place)

    # ------------------------------------------------------------------
    # Schedule
    # ------------------------------------------------------------------

    async def get_workspaces_schedule(
        self, building_upn: str, start: str, end: str
    ) -> WorkspacesSchedule:
        window_start = parse_schedule_bound("start", start)
        window_end = parse_schedule_bound("end", end)
        if window_end <= window_start:
            raise ValidationError("'end' must be later than 'start'")

        await self._require_building(building_upn)
        workspaces, _ = await self._places.list_for_building(
            building_upn,
            PlaceType.space,
            PlaceFilter(),
            offset=0,
            limit=None,
        )

        reserved_pct = available_pct = 0.0
        if workspaces:
            booked = await self._reservations.count_overlapping(
                [w.upn for w in workspaces], window_start, window_end
            )
            total_seats = reserved_seats = 0
            for workspace in workspaces:
                seats = max(workspace.capacity or 0, 1)
                total_seats += seats
                reserved_seats += min(booked.get(workspace.upn, 0), seats)
            reserved_pct = round(reserved_seats / total_seats * 100, 2)
            available_pct = round(100 - reserved_pct, 2)

        return WorkspacesSchedule(
            building_upn=building_upn,
            start=start,
            end=end,
            reserved=reserved_pct,
            available=available_pct,
        )
