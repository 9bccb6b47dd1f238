"""Tests for room mutations, guards and bulk creation."""

from datetime import datetime, timedelta, timezone

import pytest

from app.core.exceptions import (
    ActiveBookingConflictError,
    ConstraintViolationError,
    RoomNotFoundError,
    RoomTypeNotFoundError,
    ValidationError,
)
from app.models import Room
from app.schemas.room import RoomCreate, RoomUpdate
from app.services.room import RoomService


@pytest.fixture
def service(db_session):
    return RoomService.for_session(db_session)


def _room_payload(seed, **overrides):
    data = {
        "roomNumber": "301",
        "roomTypeId": seed.deluxe,
        "hotelId": seed.hotel_a,
        "floor": 3,
    }
    data.update(overrides)
    return data


def _room_count(db_session):
    return db_session.query(Room).count()


# =============================================================================
# Guards
# =============================================================================

@pytest.mark.parametrize("status", ["pending", "confirmed"])
def test_delete_refused_with_active_booking(service, db_session, seed, make_booking, status):
    make_booking(seed.a101, "2024-01-10", "2024-01-15", status=status)

    with pytest.raises(ActiveBookingConflictError) as exc_info:
        service.delete_room(seed.a101)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Cannot delete room with active bookings"
    assert db_session.get(Room, seed.a101) is not None


def test_maintenance_refused_with_active_booking(service, db_session, seed, make_booking):
    make_booking(seed.a101, "2024-01-10", "2024-01-15", status="pending")

    with pytest.raises(ActiveBookingConflictError):
        service.set_maintenance(seed.a101)

    db_session.expire_all()
    room = db_session.get(Room, seed.a101)
    assert room.status == "available"
    assert room.last_maintenance is None


def test_delete_allowed_when_bookings_are_closed(service, db_session, seed, make_booking):
    make_booking(seed.a102, "2024-01-10", "2024-01-15", status="cancelled")
    make_booking(seed.a102, "2024-02-10", "2024-02-15", status="completed")

    service.delete_room(seed.a102)

    db_session.expire_all()
    assert db_session.get(Room, seed.a102) is None


def test_set_maintenance_stamps_time(service, seed):
    before = datetime.now(timezone.utc)
    room = service.set_maintenance(seed.a201)

    assert room.status == "maintenance"
    stamped = room.last_maintenance
    if stamped.tzinfo is None:
        stamped = stamped.replace(tzinfo=timezone.utc)
    assert stamped >= before - timedelta(seconds=1)


def test_delete_missing_room(service, seed):
    with pytest.raises(RoomNotFoundError):
        service.delete_room("missing")


# =============================================================================
# Create / update
# =============================================================================

def test_create_room(service, seed):
    room = service.create_room(RoomCreate.model_validate(
        _room_payload(seed, features=[" jacuzzi ", ""])
    ))
    assert room.id
    assert room.status == "available"
    assert room.features == ["jacuzzi"]


def test_create_room_requires_existing_room_type(service, seed):
    with pytest.raises(RoomTypeNotFoundError) as exc_info:
        service.create_room(RoomCreate.model_validate(_room_payload(seed, roomTypeId="nope")))
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Room type not found with id of nope"


def test_room_number_unique_per_hotel(service, db_session, seed):
    with pytest.raises(ConstraintViolationError) as exc_info:
        service.create_room(RoomCreate.model_validate(_room_payload(seed, roomNumber="101")))
    assert exc_info.value.status_code == 400
    assert _room_count(db_session) == 5


def test_same_room_number_in_other_hotel_is_allowed(service, seed):
    room = service.create_room(RoomCreate.model_validate(
        _room_payload(seed, roomNumber="102", hotelId=seed.hotel_b)
    ))
    assert room.hotel_id == seed.hotel_b


def test_room_hotel_is_not_constrained(service, seed):
    assert not Room.__table__.c.hotel_id.foreign_keys
    room = service.create_room(RoomCreate.model_validate(
        _room_payload(seed, hotelId="hotel-elsewhere")
    ))
    assert room.hotel_id == "hotel-elsewhere"
    assert service.get_room(room.id).hotel is None


def test_partial_update_keeps_other_fields(service, seed):
    room = service.update_room(seed.a101, RoomUpdate.model_validate({"specialNotes": "Quiet side"}))
    assert room.special_notes == "Quiet side"
    assert room.floor == 1
    assert room.features == ["sea-view", "balcony"]


def test_update_replaces_features(service, seed):
    room = service.update_room(seed.a101, RoomUpdate.model_validate({"features": ["garden"]}))
    assert room.features == ["garden"]


def test_update_missing_room(service, seed):
    with pytest.raises(RoomNotFoundError):
        service.update_room("missing", RoomUpdate.model_validate({"floor": 4}))


# =============================================================================
# Status patch
# =============================================================================

def test_update_status(service, seed):
    assert service.update_status(seed.a101, "occupied").status == "occupied"


@pytest.mark.parametrize("status", [None, ""])
def test_update_status_requires_value(service, seed, status):
    with pytest.raises(ValidationError) as exc_info:
        service.update_status(seed.a101, status)
    assert exc_info.value.message == "Please provide a status"


def test_update_status_rejects_unknown_value(service, seed):
    with pytest.raises(ValidationError):
        service.update_status(seed.a101, "flooded")


def test_update_status_validates_before_lookup(service, seed):
    with pytest.raises(ValidationError):
        service.update_status("missing", "")
    with pytest.raises(RoomNotFoundError):
        service.update_status("missing", "occupied")


# =============================================================================
# Detail
# =============================================================================

def test_get_room_attaches_latest_booking(service, seed, make_booking):
    now = datetime.now(timezone.utc)
    make_booking(seed.a101, "2024-01-10", "2024-01-15", status="completed",
                 created_at=now - timedelta(days=10))
    latest = make_booking(seed.a101, "2024-03-01", "2024-03-04", status="confirmed", created_at=now)

    detail = service.get_room(seed.a101)

    assert detail.booking_details.id == latest.id
    assert detail.room_type.name == "Deluxe"
    assert detail.hotel.name == "Harbour View"


def test_get_room_without_bookings(service, seed):
    assert service.get_room(seed.a201).booking_details is None


def test_get_missing_room(service, seed):
    with pytest.raises(RoomNotFoundError) as exc_info:
        service.get_room("missing")
    assert exc_info.value.message == "Room not found with id of missing"


# =============================================================================
# Bulk create
# =============================================================================

def test_bulk_create(service, db_session, seed):
    rooms = service.bulk_create({"rooms": [
        _room_payload(seed, roomNumber="401", floor=4),
        _room_payload(seed, roomNumber="402", floor=4),
    ]})
    assert [room.room_number for room in rooms] == ["401", "402"]
    assert _room_count(db_session) == 7


@pytest.mark.parametrize("body", [{"rooms": {"roomNumber": "401"}}, {}, {"rooms": "401"}])
def test_bulk_create_requires_list(service, db_session, seed, body):
    with pytest.raises(ValidationError) as exc_info:
        service.bulk_create(body)
    assert exc_info.value.message == "Please provide an array of rooms"
    assert _room_count(db_session) == 5


def test_bulk_create_validates_every_item_first(service, db_session, seed):
    with pytest.raises(ValidationError) as exc_info:
        service.bulk_create({"rooms": [
            _room_payload(seed, roomNumber="401"),
            {"roomNumber": "402"},
        ]})
    assert any(key.startswith("rooms.1.") for key in exc_info.value.details["field_errors"])
    assert _room_count(db_session) == 5


def test_bulk_create_is_all_or_nothing(service, db_session, seed):
    with pytest.raises(ConstraintViolationError):
        service.bulk_create({"rooms": [
            _room_payload(seed, roomNumber="501"),
            _room_payload(seed, roomNumber="501"),
        ]})
    assert _room_count(db_session) == 5
