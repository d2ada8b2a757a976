"""Reservation repository."""

from datetime import datetime

from sqlalchemy import func, select

from app.domain.reservation import Reservation
from app.repositories.base import BaseRepository


class ReservationRepository(BaseRepository[Reservation]):
    model = Reservation

    async def count_overlapping(
        self, place_upns: list[str], start: datetime, end: datetime
    ) -> dict[str, int]:
        """Reservations per place that overlap the half-open window [start, end)."""
        if not place_upns:
            return {}
        q = (
            select(Reservation.place_upn, func.count())
            .where(
                Reservation.place_upn.in_(place_upns),
                Reservation.start < end,
                Reservation.end > start,
            )
            .group_by(Reservation.place_upn)
        )
        rows = (await self._session.execute(q)).all()
        return {upn: count for upn, count in rows}
