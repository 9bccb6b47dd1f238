# app/models/room/room.py
"""
Room models.

Implements the physical room entity and its feature tags.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel, RoomStatus, TimestampMixin

__all__ = ["Room", "RoomFeature"]


class Room(BaseModel, TimestampMixin):
    """
    Physical room within a hotel.

    Room numbers are unique per hotel. ``current_booking_id`` is a
    denormalized pointer maintained by the booking side; availability is
    always resolved from ``Booking.room_id``.
    """

    __tablename__ = "rooms"

    room_number: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    room_type_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("room_types.id"),
        nullable=False,
        index=True,
    )
    # Stored as given; hotels are not checked
    hotel_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=RoomStatus.AVAILABLE.value,
        index=True,
    )
    floor: Mapped[int] = mapped_column(Integer, nullable=False)
    special_notes: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    last_maintenance: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    current_booking_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)

    # Relationships
    room_type = relationship("RoomType")
    hotel = relationship(
        "Hotel",
        primaryjoin="foreign(Room.hotel_id) == Hotel.id",
        viewonly=True,
    )
    feature_tags: Mapped[List["RoomFeature"]] = relationship(
        "RoomFeature",
        back_populates="room",
        cascade="all, delete-orphan",
        order_by="RoomFeature.position",
        collection_class=ordering_list("position"),
        lazy="selectin",
    )

    __table_args__ = (
        UniqueConstraint("hotel_id", "room_number", name="uq_hotel_room_number"),
        Index("ix_room_hotel_status", "hotel_id", "status"),
    )

    @property
    def features(self) -> List[str]:
        return [tag.name for tag in self.feature_tags]

    @features.setter
    def features(self, names: List[str]) -> None:
        self.feature_tags = [RoomFeature(name=name) for name in names]

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, hotel_id={self.hotel_id}, room_number={self.room_number})>"


class RoomFeature(BaseModel):
    """Feature tag attached to a room (e.g. "sea-view", "balcony")."""

    __tablename__ = "room_features"

    room_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("rooms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    room = relationship("Room", back_populates="feature_tags")
