# app/repositories/booking/booking_repository.py
"""
Booking repository.

Read-only access to bookings for the room service: the active-booking
guard, date-range conflicts and the latest booking shown on room detail.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import RepositoryError
from app.models.booking import Booking
from app.repositories.base.base_repository import BaseRepository
from app.repositories.base.specifications import (
    ActiveBookingsSpecification,
    FieldEqualsSpecification,
    OverlappingBookingsSpecification,
)


class BookingRepository(BaseRepository[Booking]):
    """Repository for Booking entity."""

    def __init__(self, db: Session):
        super().__init__(Booking, db)

    def find_active_for_room(self, room_id: str) -> Optional[Booking]:
        """
        Find a pending or confirmed booking that references the room.

        Args:
            room_id: Room ID

        Returns:
            First active booking, or None when the room is free to change
        """
        spec = FieldEqualsSpecification("room_id", room_id) & ActiveBookingsSpecification()
        try:
            return spec.apply(self.query(), Booking).first()
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Active booking lookup failed: {str(e)}",
                operation="find_active_for_room",
                table=Booking.__tablename__,
            ) from e

    def distinct_conflicting_room_ids(self, start_date: date, end_date: date) -> List[str]:
        """
        Room IDs of active bookings overlapping ``[start_date, end_date]``.

        Bookings not pinned to a room are skipped.
        """
        spec = (
            ActiveBookingsSpecification()
            & OverlappingBookingsSpecification(start_date, end_date)
            & ~FieldEqualsSpecification("room_id", None)
        )
        try:
            rows = (
                self.db.query(Booking.room_id)
                .filter(spec.to_expression(Booking))
                .distinct()
                .all()
            )
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Conflicting bookings lookup failed: {str(e)}",
                operation="distinct_conflicting_room_ids",
                table=Booking.__tablename__,
            ) from e
        return [row.room_id for row in rows if row.room_id is not None]

    def find_latest_for_room(self, room_id: str) -> Optional[Booking]:
        """Most recently created booking for the room, in any status."""
        try:
            return (
                self.query()
                .filter(Booking.room_id == room_id)
                .order_by(Booking.created_at.desc(), Booking.id.desc())
                .first()
            )
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Latest booking lookup failed: {str(e)}",
                operation="find_latest_for_room",
                table=Booking.__tablename__,
            ) from e
