"""
Room services package.
"""

from app.services.room.room_availability_service import RoomAvailabilityService
from app.services.room.room_service import RoomService

__all__ = [
    "RoomAvailabilityService",
    "RoomService",
]
