"""
Room repositories package.
"""

from app.repositories.room.room_repository import RoomRepository
from app.repositories.room.room_type_repository import RoomTypeRepository

__all__ = [
    "RoomRepository",
    "RoomTypeRepository",
]
