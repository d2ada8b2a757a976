"""Directory catalog import — fills the local mirror from a JSON export.

The document carries three lists (camelCase keys)::

    {"buildings": [...], "places": [...], "reservations": [...]}

Buildings and places are upserted by UPN. Reservations are upserted by id;
entries without one get a fresh id on every import.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationError
from app.repositories.building import BuildingRepository
from app.repositories.place import PlaceRepository
from app.repositories.reservation import ReservationRepository
from app.schemas.catalog import DirectoryCatalog

logger = logging.getLogger(__name__)


@dataclass
class CatalogImportResult:
    buildings: int = 0
    places: int = 0
    reservations: int = 0


def _utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def read_catalog(path: str | Path) -> DirectoryCatalog:
    """Parse and validate a catalog file."""
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    return DirectoryCatalog.model_validate(data)


async def import_catalog(session: AsyncSession, catalog: DirectoryCatalog) -> CatalogImportResult:
    """Upsert every record of *catalog*. The caller owns the transaction."""
    buildings = BuildingRepository(session)
    places = PlaceRepository(session)
    reservations = ReservationRepository(session)
    result = CatalogImportResult()

    building_upns = {b.upn for b in catalog.buildings}
    for building in catalog.buildings:
        await buildings.upsert(**building.model_dump())
        result.buildings += 1

    place_upns = set()
    for place in catalog.places:
        if place.building_upn not in building_upns and not await buildings.get(place.building_upn):
            raise ValidationError(
                f"Place '{place.upn}' references unknown building '{place.building_upn}'"
            )
        await places.upsert(**place.model_dump(mode="json"))
        place_upns.add(place.upn)
        result.places += 1

    for reservation in catalog.reservations:
        if reservation.place_upn not in place_upns and not await places.get(reservation.place_upn):
            raise ValidationError(
                f"Reservation references unknown place '{reservation.place_upn}'"
            )
        if _utc(reservation.end) <= _utc(reservation.start):
            raise ValidationError(
                f"Reservation for '{reservation.place_upn}' ends before it starts"
            )
        fields = reservation.model_dump(exclude_none=True)
        fields["start"] = _utc(reservation.start)
        fields["end"] = _utc(reservation.end)
        await reservations.upsert(**fields)
        result.reservations += 1

    logger.info(
        "Imported catalog: %d buildings, %d places, %d reservations",
        result.buildings, result.places, result.reservations,
    )
    return result


async def load_catalog(session: AsyncSession, path: str | Path) -> CatalogImportResult:
    """Read *path* and import it in one transaction."""
    catalog = read_catalog(path)
    try:
        result = await import_catalog(session, catalog)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return result
