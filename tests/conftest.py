"""Pytest configuration and shared fixtures."""

import os

# Settings are read at import time; point them at an in-memory database first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"

from datetime import date, datetime, timezone
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token
from app.db.init_db import drop_db, init_db
from app.db.session import get_db
from app.main import app
from app.models import Booking, Hotel, Room, RoomType


# =============================================================================
# Database
# =============================================================================

@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(session_factory):
    """TestClient whose requests each get their own session on the test database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# =============================================================================
# Auth
# =============================================================================

@pytest.fixture
def admin_headers():
    token = create_access_token("admin-1", "admin")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_access_token("user-1", "user")
    return {"Authorization": f"Bearer {token}"}


# =============================================================================
# Data
# =============================================================================

@pytest.fixture
def seed(db_session):
    """
    Two hotels, two room types and five rooms.

    Hotel A: 101, 102 (deluxe, floor 1), 201 (suite, floor 2),
    202 (suite, floor 2, under maintenance). Hotel B: 101 (deluxe, floor 3).
    """
    hotel_a = Hotel(name="Harbour View", city="Lisbon")
    hotel_b = Hotel(name="Old Town Inn", city="Porto")
    db_session.add_all([hotel_a, hotel_b])
    db_session.flush()

    deluxe = RoomType(hotel_id=hotel_a.id, name="Deluxe", capacity=2, price_per_night=120)
    suite = RoomType(hotel_id=hotel_a.id, name="Suite", capacity=4, price_per_night=250)
    db_session.add_all([deluxe, suite])
    db_session.flush()

    rooms = {
        "a101": Room(room_number="101", room_type_id=deluxe.id, hotel_id=hotel_a.id,
                     floor=1, features=["sea-view", "balcony"]),
        "a102": Room(room_number="102", room_type_id=deluxe.id, hotel_id=hotel_a.id,
                     floor=1, features=["balcony"]),
        "a201": Room(room_number="201", room_type_id=suite.id, hotel_id=hotel_a.id,
                     floor=2),
        "a202": Room(room_number="202", room_type_id=suite.id, hotel_id=hotel_a.id,
                     floor=2, status="maintenance"),
        "b101": Room(room_number="101", room_type_id=deluxe.id, hotel_id=hotel_b.id,
                     floor=3),
    }
    db_session.add_all(rooms.values())
    db_session.commit()

    return SimpleNamespace(
        hotel_a=hotel_a.id,
        hotel_b=hotel_b.id,
        deluxe=deluxe.id,
        suite=suite.id,
        **{key: room.id for key, room in rooms.items()},
    )


@pytest.fixture
def make_booking(db_session, seed):
    """Factory adding a booking for a room of hotel A."""

    def _make(room_id, check_in, check_out, status="confirmed", created_at=None):
        booking = Booking(
            check_in=check_in if isinstance(check_in, date) else date.fromisoformat(check_in),
            check_out=check_out if isinstance(check_out, date) else date.fromisoformat(check_out),
            user_id="guest-1",
            hotel_id=seed.hotel_a,
            room_type_id=seed.deluxe,
            room_id=room_id,
            status=status,
            created_at=created_at or datetime.now(timezone.utc),
        )
        db_session.add(booking)
        db_session.commit()
        return booking

    return _make
