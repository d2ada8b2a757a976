"""SQLAlchemy ORM model for Places (conference rooms and workspaces)."""

from __future__ import annotations

import enum
from typing import Any, List, Optional

from sqlalchemy import Boolean, ForeignKey, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.domain.mixins import GeoMixin, SyncMixin


class PlaceType(str, enum.Enum):
    room = "room"
    space = "space"


class Place(Base, GeoMixin, SyncMixin):
    __tablename__ = "places"

    upn: Mapped[str] = mapped_column(String(255), primary_key=True)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # "room" | "space"
    place_type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    building_upn: Mapped[str] = mapped_column(
        String(255), ForeignKey("buildings.upn", ondelete="CASCADE"), nullable=False, index=True
    )

    floor: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    label: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    capacity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Amenities
    has_video: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    has_audio: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    has_display: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_wheelchair_accessible: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    fully_enclosed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    surface_hub: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    whiteboard_camera: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    tags: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)

    building: Mapped["Building"] = relationship(back_populates="places")
    reservations: Mapped[List["Reservation"]] = relationship(
        back_populates="place", lazy="noload", cascade="all, delete-orphan"
    )
