"""SQLAlchemy Base class for all models."""
from app.models.base import Base


def import_models() -> None:
    """Import all models so they are registered on Base.metadata."""
    from app.models.hotel import Hotel  # noqa: F401
    from app.models.room import Room, RoomFeature, RoomType  # noqa: F401
    from app.models.booking import Booking  # noqa: F401


import_models()
