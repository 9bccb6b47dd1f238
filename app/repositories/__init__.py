"""
Repositories package.

Data access for rooms, room types and bookings.
"""

from app.repositories.booking import BookingRepository
from app.repositories.room import RoomRepository, RoomTypeRepository

__all__ = [
    "BookingRepository",
    "RoomRepository",
    "RoomTypeRepository",
]
