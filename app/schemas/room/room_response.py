# --- File: app/schemas/room/room_response.py ---
"""
Room response schemas and serialization helpers.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from pydantic import Field

from app.schemas.common.base import BaseResponseSchema, BaseSchema

__all__ = [
    "HotelSummary",
    "RoomTypeSummary",
    "BookingSummary",
    "RoomResponse",
    "RoomDetail",
    "serialize_room",
    "serialize_rooms",
    "project_fields",
]


class HotelSummary(BaseSchema):
    """Hotel attached to a room payload."""

    id: str
    name: str
    address: Optional[str] = None
    city: Optional[str] = None


class RoomTypeSummary(BaseSchema):
    """Room type attached to a room payload."""

    id: str
    name: str
    description: Optional[str] = None
    capacity: int
    price_per_night: Optional[Decimal] = None


class BookingSummary(BaseSchema):
    """Most recent booking linked to a room."""

    id: str
    check_in: date
    check_out: date
    user_id: str
    hotel_id: str
    room_type_id: str
    room_id: Optional[str] = None
    status: str
    created_at: datetime


class RoomResponse(BaseResponseSchema):
    """Room as returned by listings and mutations."""

    room_number: str
    room_type_id: str
    hotel_id: str
    status: str
    floor: int
    special_notes: Optional[str] = None
    last_maintenance: Optional[datetime] = None
    current_booking_id: Optional[str] = Field(default=None, alias="currentBooking")
    features: List[str] = Field(default_factory=list)
    room_type: Optional[RoomTypeSummary] = None
    hotel: Optional[HotelSummary] = None


class RoomDetail(RoomResponse):
    """Single room with its latest booking."""

    booking_details: Optional[BookingSummary] = None


def _field_aliases(schema: type) -> Dict[str, str]:
    """Map attribute names and wire aliases to the wire alias."""
    index: Dict[str, str] = {}
    for name, info in schema.model_fields.items():
        alias = info.alias or name
        index[name] = alias
        index[alias] = alias
    return index


def project_fields(
    payload: Dict[str, Any],
    fields: Optional[Sequence[str]],
    schema: type = RoomResponse,
) -> Dict[str, Any]:
    """
    Keep only the selected fields of a serialized payload.

    ``id`` is always kept; names that are not fields are ignored.
    """
    if not fields:
        return payload
    aliases = _field_aliases(schema)
    keep = {"id"}
    keep.update(aliases[name] for name in fields if name in aliases)
    return {key: value for key, value in payload.items() if key in keep}


def serialize_room(room: Any, fields: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    payload = RoomResponse.model_validate(room).model_dump(by_alias=True, mode="json")
    return project_fields(payload, fields)


def serialize_rooms(rooms: Sequence[Any], fields: Optional[Sequence[str]] = None) -> List[Dict[str, Any]]:
    return [serialize_room(room, fields) for room in rooms]
