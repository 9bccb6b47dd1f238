"""
Specification pattern for encapsulating business rules and query logic.

Provides reusable, composable, and testable query conditions for the
room availability and booking guard rules.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Collection, Generic, Optional, Type, TypeVar

from sqlalchemy import and_, not_
from sqlalchemy.orm import Query
from sqlalchemy.sql.expression import ClauseElement

from app.models.base import ACTIVE_BOOKING_STATUSES, BaseModel, RoomStatus

ModelType = TypeVar("ModelType", bound=BaseModel)


class Specification(ABC, Generic[ModelType]):
    """
    Abstract specification for query conditions.

    Implements the Specification pattern for building
    reusable and composable query logic.
    """

    @abstractmethod
    def to_expression(self, model: Type[ModelType]) -> ClauseElement:
        """
        Convert specification to SQLAlchemy expression.

        Args:
            model: Model class

        Returns:
            SQLAlchemy clause element
        """

    def apply(self, query: Query, model: Type[ModelType]) -> Query:
        """Apply specification to query."""
        return query.filter(self.to_expression(model))

    def __and__(self, other: "Specification[ModelType]") -> "AndSpecification[ModelType]":
        """Combine specifications with AND."""
        return AndSpecification(self, other)

    def __invert__(self) -> "NotSpecification[ModelType]":
        """Negate specification."""
        return NotSpecification(self)


class AndSpecification(Specification[ModelType]):
    """AND combination of specifications."""

    def __init__(self, *specs: Specification[ModelType]):
        self.specs = specs

    def to_expression(self, model: Type[ModelType]) -> ClauseElement:
        return and_(*[spec.to_expression(model) for spec in self.specs])


class NotSpecification(Specification[ModelType]):
    """NOT negation of specification."""

    def __init__(self, spec: Specification[ModelType]):
        self.spec = spec

    def to_expression(self, model: Type[ModelType]) -> ClauseElement:
        return not_(self.spec.to_expression(model))


# ==================== Generic Specifications ====================


class FieldEqualsSpecification(Specification[ModelType]):
    """Specification for field equality."""

    def __init__(self, field_name: str, value: Any):
        self.field_name = field_name
        self.value = value

    def to_expression(self, model: Type[ModelType]) -> ClauseElement:
        return getattr(model, self.field_name) == self.value


# ==================== Booking Specifications ====================


class ActiveBookingsSpecification(Specification):
    """Bookings that still hold their room (pending or confirmed)."""

    def to_expression(self, model: Type[ModelType]) -> ClauseElement:
        return model.status.in_(ACTIVE_BOOKING_STATUSES)


class OverlappingBookingsSpecification(Specification):
    """
    Bookings whose stay intersects ``[start_date, end_date]``.

    Both ends are inclusive: a booking checking out on ``start_date`` or
    checking in on ``end_date`` overlaps.
    """

    def __init__(self, start_date: date, end_date: date):
        self.start_date = start_date
        self.end_date = end_date

    def to_expression(self, model: Type[ModelType]) -> ClauseElement:
        return and_(
            model.check_in <= self.end_date,
            model.check_out >= self.start_date,
        )


# ==================== Room Specifications ====================


class AvailableRoomsSpecification(Specification):
    """
    Rooms in ``available`` status, optionally narrowed by hotel and room
    type and excluding rooms known to be booked.
    """

    def __init__(
        self,
        hotel_id: Optional[str] = None,
        room_type_id: Optional[str] = None,
        excluded_ids: Optional[Collection[str]] = None,
    ):
        self.hotel_id = hotel_id
        self.room_type_id = room_type_id
        self.excluded_ids = excluded_ids

    def to_expression(self, model: Type[ModelType]) -> ClauseElement:
        conditions = [model.status == RoomStatus.AVAILABLE.value]

        if self.hotel_id:
            conditions.append(model.hotel_id == self.hotel_id)

        if self.room_type_id:
            conditions.append(model.room_type_id == self.room_type_id)

        if self.excluded_ids:
            conditions.append(model.id.notin_(list(self.excluded_ids)))

        return and_(*conditions)
