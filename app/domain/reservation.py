"""SQLAlchemy ORM model for workspace reservations mirrored from the calendar backend."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.domain.mixins import SyncMixin


class Reservation(Base, SyncMixin):
    """One calendar booking of a place. Rows are replaced wholesale on import."""

    __tablename__ = "reservations"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    place_upn: Mapped[str] = mapped_column(
        String(255), ForeignKey("places.upn", ondelete="CASCADE"), nullable=False, index=True
    )
    start: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    end: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    subject: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    place: Mapped["Place"] = relationship(back_populates="reservations")
