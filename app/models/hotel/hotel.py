# app/models/hotel/hotel.py
"""
Hotel model.

Hotels are owned by the property-management side of the platform; the
room service only reads them to attach hotel details to room payloads.
"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel, TimestampMixin

__all__ = ["Hotel"]


class Hotel(BaseModel, TimestampMixin):
    """Hotel owning a set of rooms."""

    __tablename__ = "hotels"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<Hotel(id={self.id}, name={self.name})>"
