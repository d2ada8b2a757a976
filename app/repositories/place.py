"""Place repository — rooms and workspaces, with amenity filtering."""


from sqlalchemy import String, func

from app.domain.place import Place, PlaceType
from app.repositories.base import BaseRepository
from app.schemas.place import PlaceFilter

# PlaceFilter flag -> column. Only flags set to True constrain the query.
_AMENITY_COLUMNS = {
    "has_video": Place.has_video,
    "has_audio": Place.has_audio,
    "has_display": Place.has_display,
    "is_wheelchair_accessible": Place.is_wheelchair_accessible,
    "fully_enclosed": Place.fully_enclosed,
    "surface_hub": Place.surface_hub,
    "whiteboard_camera": Place.whiteboard_camera,
}


class PlaceRepository(BaseRepository[Place]):
    model = Place

    async def list_for_building(
        self,
        building_upn: str,
        place_type: PlaceType,
        place_filter: PlaceFilter,
        *,
        offset: int,
        limit: int | None,
    ) -> tuple[list[Place], int]:
        q = self._base_query().where(
            Place.building_upn == building_upn,
            Place.place_type == place_type.value,
        )
        for flag, column in _AMENITY_COLUMNS.items():
            if getattr(place_filter, flag):
                q = q.where(column)
        if place_filter.display_name_search_string:
            needle = place_filter.display_name_search_string.lower()
            q = q.where(func.lower(Place.display_name, type_=String).contains(needle, autoescape=True))

        q = q.order_by(func.lower(Place.display_name), Place.upn)
        return await self._page(q, offset=offset, limit=limit)

    async def get_of_type(self, upn: str, place_type: PlaceType) -> Place | None:
        q = self._base_query().where(
            func.lower(Place.upn) == upn.lower(),
            Place.place_type == place_type.value,
        )
        return (await self._session.execute(q.limit(1))).scalars().first()
