"""
Offset pagination primitives.

A page window is derived from client supplied ``page``/``limit`` values;
the pagination descriptor only advertises neighbouring pages that exist.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from app.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_LIMIT, MAX_PAGE_VALUE

T = TypeVar("T")


def coerce_positive_int(value: Any, default: int, maximum: int = MAX_PAGE_VALUE) -> int:
    """
    Coerce a raw query value to a positive integer.

    Missing, non-numeric, zero and negative values fall back to ``default``;
    values above ``maximum`` are clamped to it.

    >>> coerce_positive_int("3", 1)
    3
    >>> coerce_positive_int("abc", 25)
    25
    >>> coerce_positive_int("99999999999999999999", 1, maximum=100)
    100
    """
    if value is None:
        return default
    try:
        number = int(str(value).strip())
    except ValueError:
        return default
    if number <= 0:
        return default
    return min(number, maximum)


@dataclass(frozen=True)
class PageWindow:
    """One page of an offset-paginated result set."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_LIMIT

    @classmethod
    def from_raw(
        cls,
        page: Any = None,
        limit: Any = None,
        default_limit: int = DEFAULT_PAGE_LIMIT,
    ) -> "PageWindow":
        return cls(
            page=coerce_positive_int(page, DEFAULT_PAGE),
            limit=coerce_positive_int(limit, default_limit),
        )

    @property
    def start_index(self) -> int:
        """Number of rows skipped before this page."""
        return (self.page - 1) * self.limit

    @property
    def end_index(self) -> int:
        """Exclusive index one past the last row of this page."""
        return self.page * self.limit

    def has_next(self, total: int) -> bool:
        return self.end_index < total

    def has_prev(self) -> bool:
        return self.start_index > 0

    def links(self, total: int) -> Dict[str, Dict[str, int]]:
        """
        Build the pagination descriptor.

        Returns:
            ``{"next": {...}}`` and/or ``{"prev": {...}}``, empty when the
            page has no neighbours.
        """
        pagination: Dict[str, Dict[str, int]] = {}
        if self.has_next(total):
            pagination["next"] = {"page": self.page + 1, "limit": self.limit}
        if self.has_prev():
            pagination["prev"] = {"page": self.page - 1, "limit": self.limit}
        return pagination


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated query result."""

    items: List[T]
    total: int
    window: PageWindow
    fields: Optional[List[str]] = field(default=None)

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def pagination(self) -> Dict[str, Dict[str, int]]:
        return self.window.links(self.total)
