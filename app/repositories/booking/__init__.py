"""
Booking repositories package.
"""

from app.repositories.booking.booking_repository import BookingRepository

__all__ = ["BookingRepository"]
