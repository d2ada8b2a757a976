"""Generic async repository over the directory mirror."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic read/upsert repository. Records are keyed by their directory identity."""

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self) -> Select:
        return select(self.model)

    async def _count(self, q: Select) -> int:
        count_q = select(func.count()).select_from(q.order_by(None).subquery())
        return (await self._session.execute(count_q)).scalar_one()

    async def _page(
        self, q: Select, *, offset: int, limit: int | None
    ) -> tuple[list[ModelT], int]:
        """Return (items, total_count) for an already ordered query; limit=None means all rows."""
        total = await self._count(q)
        q = q.offset(offset)
        if limit is not None:
            q = q.limit(limit)
        items = (await self._session.execute(q)).scalars().all()
        return list(items), total

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get(self, key: Any) -> ModelT | None:
        return await self._session.get(self.model, key)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def upsert(self, **kwargs: Any) -> ModelT:
        """Insert or replace the row with the same primary key."""
        instance = await self._session.merge(self.model(**kwargs))
        await self._session.flush()
        return instance
