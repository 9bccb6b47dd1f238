# app/models/__init__.py
from app.models.base import Base, BaseModel
from app.models.hotel import Hotel
from app.models.room import Room, RoomFeature, RoomType
from app.models.booking import Booking

__all__ = [
    "Base",
    "BaseModel",
    "Hotel",
    "Room",
    "RoomFeature",
    "RoomType",
    "Booking",
]
