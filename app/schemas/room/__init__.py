# --- File: app/schemas/room/__init__.py ---
"""
Room schemas package.

Example:
    from app.schemas.room import RoomCreate, RoomResponse, AvailabilityQuery
"""

from __future__ import annotations

from app.schemas.room.room_availability import AvailabilityQuery, parse_query_date
from app.schemas.room.room_base import (
    RoomCreate,
    RoomStatusUpdate,
    RoomUpdate,
)
from app.schemas.room.room_response import (
    BookingSummary,
    HotelSummary,
    RoomDetail,
    RoomResponse,
    RoomTypeSummary,
    project_fields,
    serialize_room,
    serialize_rooms,
)

__all__ = [
    "AvailabilityQuery",
    "parse_query_date",
    "RoomCreate",
    "RoomStatusUpdate",
    "RoomUpdate",
    "BookingSummary",
    "HotelSummary",
    "RoomDetail",
    "RoomResponse",
    "RoomTypeSummary",
    "project_fields",
    "serialize_room",
    "serialize_rooms",
]
