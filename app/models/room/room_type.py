# app/models/room/room_type.py
"""
Room type model.

A room type groups rooms sharing capacity and pricing; rooms may only
be created against an existing room type.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel, TimestampMixin

__all__ = ["RoomType"]


class RoomType(BaseModel, TimestampMixin):
    """Room type definition."""

    __tablename__ = "room_types"

    hotel_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("hotels.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    price_per_night: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)

    def __repr__(self) -> str:
        return f"<RoomType(id={self.id}, name={self.name})>"
