"""
Database enums mirroring schema enums.

Values are stored as plain strings; these enums define the allowed set.
"""

import enum


class RoomStatus(str, enum.Enum):
    """Room operational status."""
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"
    RESERVED = "reserved"


class BookingStatus(str, enum.Enum):
    """Booking lifecycle status."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


# Bookings in these states hold a room: they block deletion and
# maintenance and make the room unavailable for overlapping dates.
ACTIVE_BOOKING_STATUSES = (BookingStatus.PENDING.value, BookingStatus.CONFIRMED.value)
