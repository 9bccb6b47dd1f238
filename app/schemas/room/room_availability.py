# --- File: app/schemas/room/room_availability.py ---
"""
Availability query schema.

Dates arrive as raw query strings; a malformed date is rejected while a
missing one simply disables the date check.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from app.core.exceptions import ErrorCode, ValidationError

__all__ = [
    "AvailabilityQuery",
    "parse_query_date",
]


def parse_query_date(value: Optional[str], field: str) -> Optional[date]:
    """
    Parse an ISO date (or datetime) query value.

    Raises:
        ValidationError: If the value is present but not a valid date
    """
    if value is None or not value.strip():
        return None
    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError as e:
        raise ValidationError(
            f"Invalid date for {field}: {value}",
            field=field,
            error_code=ErrorCode.INVALID_FORMAT,
        ) from e


class AvailabilityQuery:
    """Parsed availability request."""

    def __init__(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        hotel_id: Optional[str] = None,
        room_type_id: Optional[str] = None,
    ):
        self.start_date = start_date
        self.end_date = end_date
        self.hotel_id = hotel_id or None
        self.room_type_id = room_type_id or None

    @classmethod
    def from_raw(
        cls,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        hotel_id: Optional[str] = None,
        room_type_id: Optional[str] = None,
    ) -> "AvailabilityQuery":
        return cls(
            start_date=parse_query_date(start_date, "startDate"),
            end_date=parse_query_date(end_date, "endDate"),
            hotel_id=hotel_id,
            room_type_id=room_type_id,
        )

    @property
    def has_date_range(self) -> bool:
        """Both ends supplied; a partial range is ignored."""
        return self.start_date is not None and self.end_date is not None

    def __repr__(self) -> str:
        return (
            f"AvailabilityQuery(start_date={self.start_date}, end_date={self.end_date}, "
            f"hotel_id={self.hotel_id}, room_type_id={self.room_type_id})"
        )
