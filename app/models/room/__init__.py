from app.models.room.room import Room, RoomFeature
from app.models.room.room_type import RoomType

__all__ = ["Room", "RoomFeature", "RoomType"]
