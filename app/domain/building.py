"""SQLAlchemy ORM model for Buildings mirrored from the directory backend."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.domain.mixins import GeoMixin, SyncMixin


class Building(Base, GeoMixin, SyncMixin):
    __tablename__ = "buildings"

    # UPN is the directory identity, e.g. "building-a@contoso.com"
    upn: Mapped[str] = mapped_column(String(255), primary_key=True)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    street: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)
    state: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    postal_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    country_or_region: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    places: Mapped[List["Place"]] = relationship(
        back_populates="building", lazy="noload", cascade="all, delete-orphan"
    )
