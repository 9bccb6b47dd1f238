"""
Room availability service.

Resolves which rooms can be offered for a date range and guards room
mutations that would strand an active booking.
"""

from typing import List

from sqlalchemy.orm import Session

from app.config.logging import get_logger
from app.core.exceptions import ActiveBookingConflictError
from app.models.room import Room
from app.repositories.booking import BookingRepository
from app.repositories.room import RoomRepository
from app.schemas.room import AvailabilityQuery

logger = get_logger(__name__)


class RoomAvailabilityService:
    """
    Availability resolution against room status and bookings.

    A room is offered when its status is ``available`` and, if a full date
    range is given, no pending or confirmed booking pinned to it overlaps
    that range (boundaries inclusive).
    """

    def __init__(
        self,
        room_repository: RoomRepository,
        booking_repository: BookingRepository,
    ):
        self.room_repository = room_repository
        self.booking_repository = booking_repository

    @classmethod
    def for_session(cls, db: Session) -> "RoomAvailabilityService":
        return cls(RoomRepository(db), BookingRepository(db))

    def find_available_rooms(self, query: AvailabilityQuery) -> List[Room]:
        """
        Find rooms free for the requested stay.

        Supplying only one of the dates disables date filtering entirely;
        an inverted range is not rejected.

        Args:
            query: Parsed availability request

        Returns:
            Rooms ordered by room number
        """
        booked_ids: List[str] = []
        if query.has_date_range:
            booked_ids = self.booking_repository.distinct_conflicting_room_ids(
                query.start_date,
                query.end_date,
            )
            logger.debug(
                f"{len(booked_ids)} rooms booked between {query.start_date} and {query.end_date}"
            )

        return self.room_repository.find_available(
            hotel_id=query.hotel_id,
            room_type_id=query.room_type_id,
            exclude_ids=booked_ids,
        )

    def ensure_room_releasable(self, room_id: str, action: str) -> None:
        """
        Fail if a pending or confirmed booking references the room.

        The check and the caller's following write are not atomic.

        Raises:
            ActiveBookingConflictError: If an active booking exists
        """
        booking = self.booking_repository.find_active_for_room(room_id)
        if booking is not None:
            logger.info(f"Refused to {action} room {room_id}: active booking {booking.id}")
            raise ActiveBookingConflictError(
                f"Cannot {action} room with active bookings",
                room_id=room_id,
                booking_id=booking.id,
            )
