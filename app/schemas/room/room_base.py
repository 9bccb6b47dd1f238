# --- File: app/schemas/room/room_base.py ---
"""
Room request schemas.

Provides the create (also used per item by bulk create), partial update
and status patch payloads for room management.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator

from app.core.constants import DB_INT_MAX, DB_INT_MIN
from app.models.base.enums import RoomStatus
from app.schemas.common.base import BaseCreateSchema, BaseSchema, BaseUpdateSchema

__all__ = [
    "RoomCreate",
    "RoomUpdate",
    "RoomStatusUpdate",
]


def _clean_features(values: Optional[List[str]]) -> Optional[List[str]]:
    if values is None:
        return None
    return [value.strip() for value in values if value and value.strip()]


class RoomCreate(BaseCreateSchema):
    """
    Payload for creating a room.

    The room type must exist; the hotel reference is stored as given.
    """

    room_number: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Room number, unique within the hotel",
        examples=["101", "A-201"],
    )
    room_type_id: str = Field(..., min_length=1, description="Room type ID")
    hotel_id: str = Field(..., min_length=1, description="Hotel ID")
    status: RoomStatus = Field(default=RoomStatus.AVAILABLE, description="Operational status")
    floor: int = Field(..., ge=DB_INT_MIN, le=DB_INT_MAX, description="Floor number")
    special_notes: Optional[str] = Field(
        default=None,
        max_length=500,
        description="Free-text notes, at most 500 characters",
    )
    features: List[str] = Field(
        default_factory=list,
        description="Feature tags",
        examples=[["sea-view", "balcony"]],
    )

    @field_validator("features")
    @classmethod
    def validate_features(cls, v: List[str]) -> List[str]:
        return _clean_features(v)

    def to_model_data(self) -> dict:
        data = self.model_dump()
        data["status"] = self.status.value
        return data


class RoomUpdate(BaseUpdateSchema):
    """Partial room update; omitted fields are left untouched."""

    room_number: Optional[str] = Field(default=None, min_length=1, max_length=50)
    room_type_id: Optional[str] = Field(default=None, min_length=1)
    hotel_id: Optional[str] = Field(default=None, min_length=1)
    status: Optional[RoomStatus] = None
    floor: Optional[int] = Field(default=None, ge=DB_INT_MIN, le=DB_INT_MAX)
    special_notes: Optional[str] = Field(default=None, max_length=500)
    features: Optional[List[str]] = None

    @field_validator("features")
    @classmethod
    def validate_features(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return _clean_features(v)

    @field_validator("room_number", "room_type_id", "hotel_id", "floor", "status")
    @classmethod
    def reject_null(cls, v):
        """Required room fields may be omitted but not cleared."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    def changes(self) -> dict:
        data = super().changes()
        if "status" in data:
            data["status"] = RoomStatus(data["status"]).value
        return data


class RoomStatusUpdate(BaseSchema):
    """Status patch body; validated by the service so an empty value is reported first."""

    status: Optional[str] = Field(default=None, description="New room status")
