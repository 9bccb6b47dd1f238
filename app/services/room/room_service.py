"""
Room service.

Room management use-cases: parameter-driven listing, detail lookup,
create/update/delete, status and maintenance transitions and bulk
creation. Every failure is raised as an application exception and
rendered by the API layer.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.core.exceptions import (
    ErrorCode,
    RoomNotFoundError,
    RoomTypeNotFoundError,
    ValidationError,
)
from app.models.base.enums import RoomStatus
from app.models.room import Room
from app.repositories.base.pagination import PaginatedResult
from app.repositories.base.query_builder import ListQueryParams
from app.repositories.booking import BookingRepository
from app.repositories.room import RoomRepository, RoomTypeRepository
from app.schemas.room import (
    BookingSummary,
    RoomCreate,
    RoomDetail,
    RoomUpdate,
)
from app.services.base import BaseService
from app.services.room.room_availability_service import RoomAvailabilityService


class RoomService(BaseService[Room, RoomRepository]):
    """
    Room management operations.

    Delete and maintenance refuse to touch a room held by a pending or
    confirmed booking.
    """

    def __init__(
        self,
        room_repository: RoomRepository,
        room_type_repository: RoomTypeRepository,
        booking_repository: BookingRepository,
        db_session: Session,
    ):
        super().__init__(room_repository, db_session)
        self.room_type_repository = room_type_repository
        self.booking_repository = booking_repository
        self.availability = RoomAvailabilityService(room_repository, booking_repository)

    @classmethod
    def for_session(cls, db: Session) -> "RoomService":
        return cls(
            RoomRepository(db),
            RoomTypeRepository(db),
            BookingRepository(db),
            db,
        )

    def _not_found(self, entity_id: str) -> RoomNotFoundError:
        return RoomNotFoundError(entity_id)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_rooms(
        self,
        raw_params: Union[Mapping[str, str], Iterable[Tuple[str, str]]],
    ) -> PaginatedResult[Room]:
        """
        List rooms from raw query parameters.

        Args:
            raw_params: Query string as received, as a mapping or as
                ``(key, value)`` pairs when keys repeat; ``select``,
                ``sort``, ``page`` and ``limit`` are reserved, the rest
                are filters

        Returns:
            One page of rooms plus the total over the filters
        """
        if isinstance(raw_params, Mapping):
            raw_params = raw_params.items()
        params = ListQueryParams.from_items(
            raw_params,
            default_sort=settings.ROOMS_DEFAULT_SORT,
            default_limit=settings.ROOMS_DEFAULT_PAGE_LIMIT,
        )
        result = self.repository.list_rooms(params)
        self._logger.debug(
            f"Listed {result.count} of {result.total} rooms (page {params.window.page})"
        )
        return result

    def get_room(self, room_id: str) -> RoomDetail:
        """
        Get a room with room type, hotel and its latest booking.

        Raises:
            RoomNotFoundError: If the room does not exist
        """
        room = self.repository.find_detail(room_id)
        if room is None:
            raise self._not_found(room_id)

        detail = RoomDetail.model_validate(room)
        booking = self.booking_repository.find_latest_for_room(room_id)
        if booking is not None:
            detail.booking_details = BookingSummary.model_validate(booking)
        return detail

    def rooms_by_hotel(self, hotel_id: str) -> List[Room]:
        return self.repository.find_by_hotel(hotel_id)

    def rooms_by_room_type(self, room_type_id: str) -> List[Room]:
        return self.repository.find_by_room_type(room_type_id)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create_room(self, payload: RoomCreate) -> Room:
        """
        Create a room after checking its room type exists.

        Raises:
            RoomTypeNotFoundError: If ``room_type_id`` is unknown
            ConstraintViolationError: If the room number is taken in the hotel
        """
        if not self.room_type_repository.exists(payload.room_type_id):
            raise RoomTypeNotFoundError(payload.room_type_id)

        room = self.repository.create(Room(**payload.to_model_data()))
        self._logger.info(f"Room {room.room_number} created in hotel {room.hotel_id}")
        return room

    def update_room(self, room_id: str, payload: RoomUpdate) -> Room:
        room = self.get_or_404(room_id)
        return self.repository.update(room, payload.changes())

    def delete_room(self, room_id: str) -> None:
        """
        Delete a room that no active booking references.

        Raises:
            RoomNotFoundError: If the room does not exist
            ActiveBookingConflictError: If a pending or confirmed booking holds it
        """
        room = self.get_or_404(room_id)
        self.availability.ensure_room_releasable(room_id, "delete")
        self.repository.delete(room)

    def update_status(self, room_id: str, status: Optional[str]) -> Room:
        """
        Patch only the room status.

        The status is checked before the room is looked up.

        Raises:
            ValidationError: If status is missing or not a room status
            RoomNotFoundError: If the room does not exist
        """
        if not status:
            raise ValidationError(
                "Please provide a status",
                field="status",
                error_code=ErrorCode.MISSING_REQUIRED_FIELD,
            )
        try:
            new_status = RoomStatus(status)
        except ValueError as e:
            allowed = ", ".join(s.value for s in RoomStatus)
            raise ValidationError(
                f"Invalid status '{status}', expected one of: {allowed}",
                field="status",
            ) from e

        room = self.get_or_404(room_id)
        return self.repository.update(room, {"status": new_status.value})

    def set_maintenance(self, room_id: str) -> Room:
        """
        Put a room into maintenance and stamp the maintenance time.

        Raises:
            RoomNotFoundError: If the room does not exist
            ActiveBookingConflictError: If a pending or confirmed booking holds it
        """
        room = self.get_or_404(room_id)
        self.availability.ensure_room_releasable(room_id, "set maintenance for")
        return self.repository.update(
            room,
            {
                "status": RoomStatus.MAINTENANCE.value,
                "last_maintenance": datetime.now(timezone.utc),
            },
        )

    def bulk_create(self, body: Mapping[str, Any]) -> List[Room]:
        """
        Create every room in ``body["rooms"]`` or none of them.

        All items are validated before anything is written.

        Raises:
            ValidationError: If ``rooms`` is not a list or an item is invalid
            ConstraintViolationError: If any insert violates a constraint
        """
        items = body.get("rooms") if isinstance(body, Mapping) else None
        if not isinstance(items, list):
            raise ValidationError(
                "Please provide an array of rooms",
                field="rooms",
                error_code=ErrorCode.INVALID_FORMAT,
            )

        payloads: List[RoomCreate] = []
        field_errors: Dict[str, List[str]] = {}
        for index, item in enumerate(items):
            try:
                payloads.append(RoomCreate.model_validate(item))
            except PydanticValidationError as e:
                for error in e.errors():
                    location = ".".join(str(part) for part in error["loc"])
                    key = f"rooms.{index}.{location}" if location else f"rooms.{index}"
                    field_errors.setdefault(key, []).append(error["msg"])
        if field_errors:
            raise ValidationError("Invalid room in bulk payload", field_errors=field_errors)

        rooms = self.repository.create_many([Room(**p.to_model_data()) for p in payloads])
        self._logger.info(f"Bulk created {len(rooms)} rooms")
        return rooms
