"""Building repository."""


from sqlalchemy import String, func, or_

from app.domain.building import Building
from app.repositories.base import BaseRepository


class BuildingRepository(BaseRepository[Building]):
    model = Building

    def _ordered_by_name(self):
        return self._base_query().order_by(func.lower(Building.display_name), Building.upn)

    async def list_by_name(self, *, offset: int, limit: int) -> tuple[list[Building], int]:
        return await self._page(self._ordered_by_name(), offset=offset, limit=limit)

    async def search(self, text: str, *, offset: int, limit: int) -> tuple[list[Building], int]:
        needle = text.lower()
        q = self._ordered_by_name().where(
            or_(
                func.lower(Building.display_name, type_=String).contains(needle, autoescape=True),
                func.lower(Building.city, type_=String).contains(needle, autoescape=True),
            )
        )
        return await self._page(q, offset=offset, limit=limit)

    async def get_by_display_name(self, display_name: str) -> Building | None:
        q = self._ordered_by_name().where(
            func.lower(Building.display_name) == display_name.lower()
        )
        return (await self._session.execute(q.limit(1))).scalars().first()

    async def list_with_coordinates(self) -> list[Building]:
        q = self._base_query().where(
            Building.latitude.is_not(None), Building.longitude.is_not(None)
        )
        return list((await self._session.execute(q)).scalars().all())
