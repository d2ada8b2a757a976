"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  building.py     — Buildings (directory identity = UPN)
  place.py        — Conference rooms and workspaces, plus PlaceType
  reservation.py  — Workspace bookings used for schedule percentages
  mixins.py       — Shared SyncMixin, GeoMixin
"""

from app.domain.building import Building
from app.domain.place import Place, PlaceType
from app.domain.reservation import Reservation

__all__ = [
    "Building",
    "Place",
    "PlaceType",
    "Reservation",
]
