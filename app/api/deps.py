# app/api/deps.py
"""
Shared FastAPI dependencies.

Example usage in a router:
    from fastapi import Depends, APIRouter
    from app.api import deps

    router = APIRouter()

    @router.delete("/{room_id}")
    def delete_room(
        room_id: str,
        service: RoomService = Depends(deps.get_room_service),
        admin: CurrentUser = Depends(deps.get_current_admin),
    ):
        ...
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config.settings import settings
from app.core.exceptions import AuthenticationError, AuthorizationError
from app.core.security import CurrentUser, user_from_token
from app.db.session import get_db
from app.services.room import RoomAvailabilityService, RoomService

_bearer = HTTPBearer(auto_error=False)


# --- Services -----------------------------------------------------------------

def get_room_service(db: Session = Depends(get_db)) -> RoomService:
    return RoomService.for_session(db)


def get_availability_service(db: Session = Depends(get_db)) -> RoomAvailabilityService:
    return RoomAvailabilityService.for_session(db)


# --- Authentication & Authorization -------------------------------------------

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
) -> CurrentUser:
    """Resolve the caller from the bearer token; 401 when absent or invalid."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()
    return user_from_token(credentials.credentials)


def get_current_admin(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """Require the admin role; 403 for any other authenticated caller."""
    if user.role != settings.ADMIN_ROLE:
        raise AuthorizationError(
            f"User role {user.role} is not authorized to access this route",
            required_role=settings.ADMIN_ROLE,
        )
    return user


__all__ = [
    "get_db",
    "get_room_service",
    "get_availability_service",
    "get_current_user",
    "get_current_admin",
]
