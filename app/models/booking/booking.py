# app/models/booking/booking.py
"""
Booking model.

Bookings are created and transitioned by the reservation service. The
room service reads their dates and status to resolve availability and
to guard destructive room operations.
"""

from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import Date, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel, BookingStatus

__all__ = ["Booking"]


class Booking(BaseModel):
    """
    Date-ranged reservation of a room type, optionally pinned to a room.

    ``check_in <= check_out`` is not enforced here.
    """

    __tablename__ = "bookings"

    check_in: Mapped[date] = mapped_column(Date, nullable=False)
    check_out: Mapped[date] = mapped_column(Date, nullable=False)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    hotel_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("hotels.id"),
        nullable=False,
        index=True,
    )
    room_type_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("room_types.id"),
        nullable=False,
    )
    room_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("rooms.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=BookingStatus.PENDING.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("ix_booking_room_status", "room_id", "status"),
        Index("ix_booking_dates", "check_in", "check_out"),
    )

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, room_id={self.room_id}, "
            f"check_in={self.check_in}, check_out={self.check_out}, status={self.status})>"
        )
