"""
Base models package.

Provides the declarative base, mixins and enums for all database models.
"""

from app.models.base.base_model import Base, BaseModel
from app.models.base.mixins import TimestampMixin
from app.models.base.enums import ACTIVE_BOOKING_STATUSES, BookingStatus, RoomStatus

__all__ = [
    "Base",
    "BaseModel",
    "TimestampMixin",
    "RoomStatus",
    "BookingStatus",
    "ACTIVE_BOOKING_STATUSES",
]
