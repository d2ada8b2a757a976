# tests/test_directory_service.py

"""
Tests for BuildingsService against an in-memory directory mirror.
"""

import base64

import pytest

from app.core.exceptions import NotFoundError, ValidationError
from app.core.pagination import PaginationRequest, PlacePageRequest, encode_skip_token
from app.core.security import Principal
from app.domain.place import PlaceType
from app.repositories.building import BuildingRepository
from app.schemas.place import PlaceFilter
from app.services.directory import BuildingsService, parse_schedule_bound

PRINCIPAL = Principal(object_id="user-1", upn="alex@contoso.com")


def _page(top_count=10, skip=0) -> PaginationRequest:
    return PaginationRequest(top_count=top_count, skip=skip)


def _place_page(top_count=None, skip_token=None) -> PlacePageRequest:
    return PlacePageRequest(top_count=top_count, skip_token=skip_token)


@pytest.fixture
def service(seeded_session) -> BuildingsService:
    return BuildingsService(seeded_session)


def _names(response) -> list[str]:
    return [p.display_name for p in response.exchange_places_list]


# ---------------------------------------------------------------------------
# Buildings
# ---------------------------------------------------------------------------

async def test_list_buildings_by_name_orders_case_insensitively(service):
    result = await service.list_buildings_by_name(PRINCIPAL, _page())

    assert [b.display_name for b in result.building_info_list] == [
        "Annex", "Building A", "building B", "Seattle HQ",
    ]
    assert result.total_record_count == 4


async def test_list_buildings_by_name_pages(service):
    result = await service.list_buildings_by_name(PRINCIPAL, _page(top_count=2, skip=1))

    assert [b.identity for b in result.building_info_list] == [
        "building-a@contoso.com", "building-b@contoso.com",
    ]
    assert result.total_record_count == 4


async def test_list_buildings_by_distance_orders_nearest_first(service):
    result = await service.list_buildings_by_distance(PRINCIPAL, "47.64,-122.14")

    assert [b.identity for b in result.building_info_list] == [
        "building-a@contoso.com", "building-b@contoso.com", "seattle-hq@contoso.com",
    ]
    assert result.total_record_count == 3
    distances = [b.distance_from_source for b in result.building_info_list]
    assert distances == sorted(distances)
    assert distances[0] < 1


async def test_list_buildings_by_distance_applies_radius(service):
    result = await service.list_buildings_by_distance(PRINCIPAL, "47.64,-122.14", 5.0)

    assert {b.identity for b in result.building_info_list} == {
        "building-a@contoso.com", "building-b@contoso.com",
    }
    assert all(b.distance_from_source <= 5.0 for b in result.building_info_list)


async def test_list_buildings_by_distance_rejects_bad_coordinates(service):
    with pytest.raises(ValidationError):
        await service.list_buildings_by_distance(PRINCIPAL, "north,west")


async def test_get_building_by_display_name_ignores_case(service):
    building = await service.get_building_by_display_name("seattle hq")

    assert building.identity == "seattle-hq@contoso.com"
    assert building.city == "Seattle"


async def test_get_building_by_display_name_missing(service):
    with pytest.raises(NotFoundError):
        await service.get_building_by_display_name("Building Z")


async def test_search_buildings_matches_name_or_city(service):
    by_name = await service.search_buildings("building", _page())
    by_city = await service.search_buildings("redmond", _page(top_count=1))

    assert [b.display_name for b in by_name.building_info_list] == ["Building A", "building B"]
    assert by_city.total_record_count == 2
    assert len(by_city.building_info_list) == 1
    assert (by_city.search_string, by_city.top_count, by_city.skip) == ("redmond", 1, 0)


# ---------------------------------------------------------------------------
# Places
# ---------------------------------------------------------------------------

async def test_unfiltered_room_listing_keeps_rooms_with_features(service):
    result = await service.list_places(
        "building-a@contoso.com", PlaceType.room, _place_page(), PlaceFilter()
    )

    assert _names(result) == ["Conference 101", "Conference 102", "Huddle 103"]
    assert result.exchange_places_list[0].has_video is True
    assert result.exchange_places_list[0].tags == ["teams", "window"]
    assert result.skip_token is None


async def test_true_flags_require_the_feature(service):
    video = await service.list_places(
        "building-a@contoso.com", PlaceType.room, _place_page(), PlaceFilter(has_video=True)
    )
    video_and_hub = await service.list_places(
        "building-a@contoso.com",
        PlaceType.room,
        _place_page(),
        PlaceFilter(has_video=True, surface_hub=True),
    )

    assert _names(video) == ["Conference 101", "Huddle 103"]
    assert _names(video_and_hub) == ["Huddle 103"]


async def test_room_listing_pages_with_skip_tokens(service):
    first = await service.list_places(
        "building-a@contoso.com", PlaceType.room, _place_page(top_count=2), PlaceFilter()
    )
    assert _names(first) == ["Conference 101", "Conference 102"]
    assert first.skip_token == encode_skip_token(2)

    second = await service.list_places(
        "building-a@contoso.com",
        PlaceType.room,
        _place_page(top_count=2, skip_token=first.skip_token),
        PlaceFilter(),
    )
    assert _names(second) == ["Huddle 103"]
    assert second.skip_token is None


async def test_default_place_page_size(seeded_session):
    service = BuildingsService(seeded_session, default_place_top_count=1)

    result = await service.list_places(
        "building-a@contoso.com", PlaceType.space, _place_page(), PlaceFilter()
    )

    assert len(result.exchange_places_list) == 1
    assert result.skip_token is not None


async def test_space_listing_filters_by_display_name(service):
    result = await service.list_places(
        "building-a@contoso.com",
        PlaceType.space,
        _place_page(),
        PlaceFilter(display_name_search_string="DESK"),
    )

    assert _names(result) == ["Desk Pod 1", "Desk Pod 2"]
    assert all(p.place_type is PlaceType.space for p in result.exchange_places_list)


async def test_list_places_unknown_building(service):
    with pytest.raises(NotFoundError):
        await service.list_places(
            "nowhere@contoso.com", PlaceType.room, _place_page(), PlaceFilter()
        )


async def test_list_places_rejects_garbage_skip_token(service):
    with pytest.raises(ValidationError):
        await service.list_places(
            "building-a@contoso.com", PlaceType.room, _place_page(skip_token="%%%"), PlaceFilter()
        )


async def test_get_place_by_upn_respects_place_type(service):
    room = await service.get_place_by_upn("room-101@contoso.com", PlaceType.room)
    assert room.identity == "room-101@contoso.com"
    assert room.place_type is PlaceType.room

    with pytest.raises(NotFoundError):
        await service.get_place_by_upn("room-101@contoso.com", PlaceType.space)

    desk = await service.get_place_by_upn("desk-1@contoso.com", PlaceType.space)
    assert desk.building_upn == "building-a@contoso.com"


# ---------------------------------------------------------------------------
# Schedule
# ---------------------------------------------------------------------------

async def test_workspaces_schedule_percentages(service):
    schedule = await service.get_workspaces_schedule(
        "building-a@contoso.com", "2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z"
    )

    # seats: desk-1=2, desk-2=2, focus-1=1; reserved: 2 + 1 + min(2, 1)
    assert schedule.reserved == 80.0
    assert schedule.available == 20.0
    assert schedule.start == "2024-01-01T00:00:00Z"
    assert schedule.end == "2024-01-02T00:00:00Z"


async def test_workspaces_schedule_without_workspaces(service):
    schedule = await service.get_workspaces_schedule(
        "building-b@contoso.com", "2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z"
    )

    assert (schedule.reserved, schedule.available) == (0.0, 0.0)


async def test_workspaces_schedule_validates_window(service):
    with pytest.raises(ValidationError):
        await service.get_workspaces_schedule(
            "building-a@contoso.com", "2024-01-02T00:00:00Z", "2024-01-01T00:00:00Z"
        )
    with pytest.raises(ValidationError):
        await service.get_workspaces_schedule("building-a@contoso.com", "yesterday", "today")


async def test_workspaces_schedule_unknown_building(service):
    with pytest.raises(NotFoundError):
        await service.get_workspaces_schedule(
            "nowhere@contoso.com", "2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z"
        )


def test_parse_schedule_bound_normalizes_to_utc():
    assert parse_schedule_bound("start", "2024-01-01T02:00:00+02:00") == parse_schedule_bound(
        "start", "2024-01-01T00:00:00Z"
    )
    assert parse_schedule_bound("start", "2024-01-01").tzinfo is not None


# ---------------------------------------------------------------------------
# Untrusted input
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("offset", ["²", "9" * 30])
async def test_list_places_rejects_unusable_skip_token_offsets(service, offset):
    token = base64.urlsafe_b64encode(f"offset:{offset}".encode()).decode()

    with pytest.raises(ValidationError):
        await service.list_places(
            "building-a@contoso.com", PlaceType.room, _place_page(skip_token=token), PlaceFilter()
        )


@pytest.mark.parametrize("text", ["_", "%", "building_", "b%"])
async def test_search_buildings_treats_wildcards_literally(service, text):
    result = await service.search_buildings(text, _page())

    assert result.total_record_count == 0
    assert result.building_info_list == []


@pytest.mark.parametrize("text", ["_", "%"])
async def test_space_search_treats_wildcards_literally(service, text):
    result = await service.list_places(
        "building-a@contoso.com",
        PlaceType.space,
        _place_page(),
        PlaceFilter(display_name_search_string=text),
    )

    assert result.exchange_places_list == []


async def test_search_matches_literal_wildcard_characters(seeded_session):
    await BuildingRepository(seeded_session).upsert(
        upn="lab_100@contoso.com", display_name="Lab_100 100%", city="Redmond"
    )
    await seeded_session.commit()
    service = BuildingsService(seeded_session)

    underscore = await service.search_buildings("lab_1", _page())
    percent = await service.search_buildings("100%", _page())

    assert [b.identity for b in underscore.building_info_list] == ["lab_100@contoso.com"]
    assert [b.identity for b in percent.building_info_list] == ["lab_100@contoso.com"]
