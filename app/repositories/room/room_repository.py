# app/repositories/room/room_repository.py
"""
Room repository.

Handles:
- Parameter-driven room listings (filter, projection, sort, page)
- Room detail lookups with room type and hotel attached
- Rooms by hotel and by room type
- Available room lookups for the availability resolver
"""

from typing import Collection, List, Optional

from sqlalchemy.orm import Session, joinedload
from sqlalchemy.sql import ColumnElement

from app.models.room import Room, RoomFeature
from app.repositories.base.base_repository import BaseRepository
from app.repositories.base.pagination import PaginatedResult
from app.repositories.base.query_builder import ListQueryParams, QueryBuilder, SortKey
from app.repositories.base.specifications import AvailableRoomsSpecification


def _feature_filter(value: str) -> ColumnElement:
    """Match rooms tagged with the given feature."""
    return Room.feature_tags.any(RoomFeature.name == value)


class RoomRepository(BaseRepository[Room]):
    """Repository for Room entity."""

    custom_filters = {"features": _feature_filter}

    def __init__(self, db: Session):
        super().__init__(Room, db)

    def builder(self) -> QueryBuilder[Room]:
        return QueryBuilder(self.model, self.db, custom_filters=self.custom_filters)

    @staticmethod
    def _detail_options() -> tuple:
        return (joinedload(Room.room_type), joinedload(Room.hotel))

    # ==================== Listings ====================

    def list_rooms(self, params: ListQueryParams) -> PaginatedResult[Room]:
        """
        Run a listing request against the rooms table.

        Args:
            params: Normalized filters, projection, sort and page window

        Returns:
            Page of rooms with the total count over the filters alone
        """
        builder = self.builder().filter_by_params(params.filters)
        total = builder.count()

        items = (
            builder
            .order_by_keys(params.sort)
            .options(*self._detail_options())
            .paginate(params.window)
            .all()
        )
        return PaginatedResult(
            items=items,
            total=total,
            window=params.window,
            fields=params.fields,
        )

    def find_detail(self, room_id: str) -> Optional[Room]:
        """Find a room with its room type and hotel loaded."""
        rooms = self.find_by_criteria({"id": room_id}, *self._detail_options())
        return rooms[0] if rooms else None

    def find_by_hotel(self, hotel_id: str) -> List[Room]:
        return self.find_by_criteria({"hotel_id": hotel_id}, joinedload(Room.room_type))

    def find_by_room_type(self, room_type_id: str) -> List[Room]:
        return self.find_by_criteria({"room_type_id": room_type_id}, joinedload(Room.hotel))

    # ==================== Availability ====================

    def find_available(
        self,
        hotel_id: Optional[str] = None,
        room_type_id: Optional[str] = None,
        exclude_ids: Optional[Collection[str]] = None,
    ) -> List[Room]:
        """
        Find rooms in ``available`` status.

        Args:
            hotel_id: Restrict to one hotel
            room_type_id: Restrict to one room type
            exclude_ids: Rooms to leave out, e.g. those booked for a date range

        Returns:
            Matching rooms with room type and hotel loaded, ordered by room number
        """
        spec = AvailableRoomsSpecification(
            hotel_id=hotel_id,
            room_type_id=room_type_id,
            excluded_ids=exclude_ids,
        )
        return (
            self.builder()
            .where(spec.to_expression(Room))
            .order_by_keys([SortKey("room_number")])
            .options(*self._detail_options())
            .all()
        )
