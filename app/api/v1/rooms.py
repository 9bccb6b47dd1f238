# app/api/v1/rooms.py
"""
Room endpoints.

Reads are public; every write requires an admin bearer token. Fixed
paths are declared before ``/{room_id}`` so they are matched first.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, status

from app.api import deps
from app.core.security import CurrentUser
from app.schemas.common.response import (
    list_response,
    paginated_response,
    success_response,
)
from app.schemas.room import (
    AvailabilityQuery,
    RoomCreate,
    RoomStatusUpdate,
    RoomUpdate,
    serialize_room,
    serialize_rooms,
)
from app.services.room import RoomAvailabilityService, RoomService

router = APIRouter(prefix="/rooms", tags=["Room Management"])


@router.get("")
def list_rooms(
    request: Request,
    service: RoomService = Depends(deps.get_room_service),
):
    """
    List rooms.

    Any query parameter other than ``select``, ``sort``, ``page`` and
    ``limit`` is an equality filter, e.g. ``?status=available&floor=2``.
    Repeating a filter key matches any of its values, e.g. ``?floor=1&floor=2``.
    """
    result = service.list_rooms(request.query_params.multi_items())
    return paginated_response(
        serialize_rooms(result.items, result.fields),
        result.pagination,
    )


@router.get("/available")
def get_available_rooms(
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    hotel_id: Optional[str] = Query(default=None, alias="hotelId"),
    room_type_id: Optional[str] = Query(default=None, alias="roomTypeId"),
    service: RoomAvailabilityService = Depends(deps.get_availability_service),
):
    query = AvailabilityQuery.from_raw(start_date, end_date, hotel_id, room_type_id)
    rooms = service.find_available_rooms(query)
    return list_response(serialize_rooms(rooms))


@router.get("/hotel/{hotel_id}")
def get_rooms_by_hotel(hotel_id: str, service: RoomService = Depends(deps.get_room_service)):
    return list_response(serialize_rooms(service.rooms_by_hotel(hotel_id)))


@router.get("/type/{room_type_id}")
def get_rooms_by_room_type(room_type_id: str, service: RoomService = Depends(deps.get_room_service)):
    return list_response(serialize_rooms(service.rooms_by_room_type(room_type_id)))


@router.post("/bulk", status_code=status.HTTP_201_CREATED)
def bulk_create_rooms(
    body: Any = Body(...),
    service: RoomService = Depends(deps.get_room_service),
    admin: CurrentUser = Depends(deps.get_current_admin),
):
    rooms = service.bulk_create(body)
    return list_response(serialize_rooms(rooms))


@router.get("/{room_id}")
def get_room(room_id: str, service: RoomService = Depends(deps.get_room_service)):
    detail = service.get_room(room_id)
    return success_response(detail.model_dump(by_alias=True, mode="json"))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_room(
    payload: RoomCreate,
    service: RoomService = Depends(deps.get_room_service),
    admin: CurrentUser = Depends(deps.get_current_admin),
):
    return success_response(serialize_room(service.create_room(payload)))


@router.put("/{room_id}")
def update_room(
    room_id: str,
    payload: RoomUpdate,
    service: RoomService = Depends(deps.get_room_service),
    admin: CurrentUser = Depends(deps.get_current_admin),
):
    return success_response(serialize_room(service.update_room(room_id, payload)))


@router.delete("/{room_id}")
def delete_room(
    room_id: str,
    service: RoomService = Depends(deps.get_room_service),
    admin: CurrentUser = Depends(deps.get_current_admin),
):
    service.delete_room(room_id)
    return success_response({})


@router.patch("/{room_id}/status")
def update_room_status(
    room_id: str,
    payload: Optional[RoomStatusUpdate] = None,
    service: RoomService = Depends(deps.get_room_service),
    admin: CurrentUser = Depends(deps.get_current_admin),
):
    new_status = payload.status if payload else None
    return success_response(serialize_room(service.update_status(room_id, new_status)))


@router.post("/{room_id}/maintenance")
def set_room_maintenance(
    room_id: str,
    service: RoomService = Depends(deps.get_room_service),
    admin: CurrentUser = Depends(deps.get_current_admin),
):
    return success_response(serialize_room(service.set_maintenance(room_id)))
