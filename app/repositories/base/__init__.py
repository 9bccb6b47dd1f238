"""
Base repositories package.

Provides base repository infrastructure, the parameter-driven query
builder, specifications and pagination.
"""

from app.repositories.base.base_repository import BaseRepository
from app.repositories.base.pagination import (
    PageWindow,
    PaginatedResult,
    coerce_positive_int,
)
from app.repositories.base.query_builder import (
    ListQueryParams,
    QueryBuilder,
    SortKey,
    parse_select,
    parse_sort,
)
from app.repositories.base.specifications import (
    Specification,
    AndSpecification,
    NotSpecification,
    FieldEqualsSpecification,
    ActiveBookingsSpecification,
    OverlappingBookingsSpecification,
    AvailableRoomsSpecification,
)

__all__ = [
    "BaseRepository",
    "PageWindow",
    "PaginatedResult",
    "coerce_positive_int",
    "ListQueryParams",
    "QueryBuilder",
    "SortKey",
    "parse_select",
    "parse_sort",
    "Specification",
    "AndSpecification",
    "NotSpecification",
    "FieldEqualsSpecification",
    "ActiveBookingsSpecification",
    "OverlappingBookingsSpecification",
    "AvailableRoomsSpecification",
]
