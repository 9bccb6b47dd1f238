# app/repositories/room/room_type_repository.py
"""
Room type repository.
"""

from sqlalchemy.orm import Session

from app.models.room import RoomType
from app.repositories.base.base_repository import BaseRepository


class RoomTypeRepository(BaseRepository[RoomType]):
    """Repository for RoomType entity."""

    def __init__(self, db: Session):
        super().__init__(RoomType, db)
