"""
Fluent query builder driven by raw client query parameters.

Translates an arbitrary ``{name: value}`` mapping into a bounded,
deterministic SQLAlchemy query:

- reserved keys (``select``, ``sort``, ``page``, ``limit``) are split off;
- every other key becomes an equality filter, matched against the model's
  columns by attribute name or its camelCase alias; a repeated key matches
  any of its values;
- keys that name no column, and values that cannot be coerced to the
  column's type, match nothing instead of raising.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
)

from pydantic.alias_generators import to_camel
from sqlalchemy import false, inspect, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session
from sqlalchemy.orm.attributes import InstrumentedAttribute
from sqlalchemy.sql import ColumnElement

from app.core.constants import (
    DB_INT_MAX,
    DB_INT_MIN,
    DESCENDING_PREFIX,
    RESERVED_QUERY_PARAMS,
)
from app.core.exceptions import RepositoryError
from app.repositories.base.pagination import PageWindow

ModelType = TypeVar("ModelType")

# Builds a condition for a key that is not a plain column, e.g. a tag collection
CustomFilter = Callable[[str], ColumnElement]


# ==================== Parameter Parsing ====================

@dataclass(frozen=True)
class SortKey:
    """Single sort criterion."""

    field: str
    descending: bool = False

    @classmethod
    def parse(cls, token: str) -> "SortKey":
        token = token.strip()
        if token.startswith(DESCENDING_PREFIX):
            return cls(field=token[len(DESCENDING_PREFIX):], descending=True)
        return cls(field=token)


def split_csv(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def parse_sort(raw: Optional[str], default: str) -> List[SortKey]:
    """Parse ``"a,-b"`` into sort keys, using ``default`` when absent."""
    tokens = split_csv(raw) or split_csv(default)
    return [SortKey.parse(token) for token in tokens]


def parse_select(raw: Optional[str]) -> Optional[List[str]]:
    """Parse a projection list; ``None`` means full records."""
    fields = split_csv(raw)
    return fields or None


@dataclass
class ListQueryParams:
    """Normalized listing request."""

    filters: Dict[str, List[str]] = field(default_factory=dict)
    fields: Optional[List[str]] = None
    sort: List[SortKey] = field(default_factory=list)
    window: PageWindow = field(default_factory=PageWindow)

    @classmethod
    def from_mapping(
        cls,
        raw: Mapping[str, str],
        default_sort: str,
        default_limit: int,
    ) -> "ListQueryParams":
        """Build from a plain mapping with one value per key."""
        return cls.from_items(raw.items(), default_sort, default_limit)

    @classmethod
    def from_items(
        cls,
        items: Iterable[Tuple[str, str]],
        default_sort: str,
        default_limit: int,
    ) -> "ListQueryParams":
        """
        Split raw query parameters into filters, projection, sort and page window.

        A filter key may repeat; all of its values are kept. For a repeated
        reserved key the last value wins.

        Args:
            items: Client supplied ``(key, value)`` pairs in request order
            default_sort: Sort expression used when ``sort`` is absent
            default_limit: Page size used when ``limit`` is absent or invalid
        """
        filters: Dict[str, List[str]] = {}
        reserved: Dict[str, str] = {}
        for key, value in items:
            if key in RESERVED_QUERY_PARAMS:
                reserved[key] = value
            else:
                filters.setdefault(key, []).append(value)
        return cls(
            filters=filters,
            fields=parse_select(reserved.get("select")),
            sort=parse_sort(reserved.get("sort"), default_sort),
            window=PageWindow.from_raw(
                reserved.get("page"),
                reserved.get("limit"),
                default_limit=default_limit,
            ),
        )


def coerce_filter_value(column: InstrumentedAttribute, raw: str) -> Any:
    """
    Convert a raw string to the Python type of ``column``.

    Raises:
        ValueError: If the value cannot represent the column's type
    """
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return raw

    if python_type is bool:
        lowered = raw.strip().lower()
        if lowered in ("true", "1"):
            return True
        if lowered in ("false", "0"):
            return False
        raise ValueError(f"Not a boolean: {raw}")
    if python_type is int:
        number = int(raw.strip())
        if not DB_INT_MIN <= number <= DB_INT_MAX:
            raise ValueError(f"Out of integer range: {raw}")
        return number
    if python_type in (float, Decimal):
        try:
            return Decimal(raw.strip())
        except InvalidOperation as e:
            raise ValueError(f"Not a number: {raw}") from e
    if python_type is datetime:
        return datetime.fromisoformat(raw.strip())
    if python_type is date:
        return date.fromisoformat(raw.strip())
    return raw


# ==================== Query Builder ====================

class QueryBuilder(Generic[ModelType]):
    """
    Fluent query builder.

    Filters are kept apart from ordering, loader options and the page
    window so that the total count is computed over the filter alone.
    """

    def __init__(
        self,
        model: Type[ModelType],
        db: Session,
        custom_filters: Optional[Dict[str, CustomFilter]] = None,
    ):
        """
        Initialize query builder.

        Args:
            model: SQLAlchemy model class
            db: Database session
            custom_filters: Key to condition factory for non-column keys
        """
        self.model = model
        self.db = db
        self._custom_filters = custom_filters or {}
        self._columns = self._column_index(model)
        self._filters: List[ColumnElement] = []
        self._order_by: List[Any] = []
        self._options: List[Any] = []
        self._offset: Optional[int] = None
        self._limit: Optional[int] = None

    @staticmethod
    def _column_index(model: Type[ModelType]) -> Dict[str, InstrumentedAttribute]:
        """Map attribute names and their camelCase aliases to columns."""
        index: Dict[str, InstrumentedAttribute] = {}
        for attr in inspect(model).column_attrs:
            column = getattr(model, attr.key)
            index[attr.key] = column
            index.setdefault(to_camel(attr.key), column)
        return index

    def resolve(self, name: str) -> Optional[InstrumentedAttribute]:
        """Return the column for an attribute name or alias, if any."""
        return self._columns.get(name)

    # ==================== Filter Methods ====================

    def where(self, *conditions: ColumnElement) -> "QueryBuilder[ModelType]":
        self._filters.extend(conditions)
        return self

    def filter_by_params(
        self, params: Mapping[str, Sequence[str]]
    ) -> "QueryBuilder[ModelType]":
        """
        Add one condition per parameter key.

        A key with several values matches any of them. Unknown keys add an
        always-false condition; uncoercible values are dropped, and a key
        left with no usable value matches nothing.
        """
        for key, values in params.items():
            if isinstance(values, str):
                values = [values]
            self._filters.append(self._condition_for(key, values))
        return self

    def _condition_for(self, key: str, values: Sequence[str]) -> ColumnElement:
        if key in self._custom_filters:
            factory = self._custom_filters[key]
            if len(values) == 1:
                return factory(values[0])
            return or_(*[factory(raw) for raw in values])

        column = self.resolve(key)
        if column is None:
            return false()
        coerced = []
        for raw in values:
            try:
                coerced.append(coerce_filter_value(column, raw))
            except ValueError:
                continue
        if not coerced:
            return false()
        if len(coerced) == 1:
            return column == coerced[0]
        return column.in_(coerced)

    # ==================== Ordering & Loading ====================

    def order_by_keys(self, keys: Sequence[SortKey]) -> "QueryBuilder[ModelType]":
        """
        Apply sort keys, skipping names that are not columns.

        The primary key is appended last so page boundaries are stable.
        """
        seen = set()
        for key in keys:
            column = self.resolve(key.field)
            if column is None or column.key in seen:
                continue
            seen.add(column.key)
            self._order_by.append(column.desc() if key.descending else column.asc())
        if "id" not in seen:
            self._order_by.append(self.model.id.asc())
        return self

    def options(self, *options: Any) -> "QueryBuilder[ModelType]":
        self._options.extend(options)
        return self

    def paginate(self, window: PageWindow) -> "QueryBuilder[ModelType]":
        self._offset = window.start_index
        self._limit = window.limit
        return self

    # ==================== Execution ====================

    def _filtered(self) -> Query:
        query = self.db.query(self.model)
        if self._filters:
            query = query.filter(*self._filters)
        return query

    def build(self) -> Query:
        query = self._filtered()
        if self._options:
            query = query.options(*self._options)
        if self._order_by:
            query = query.order_by(*self._order_by)
        if self._offset:
            query = query.offset(self._offset)
        if self._limit is not None:
            query = query.limit(self._limit)
        return query

    def count(self) -> int:
        """Count rows matching the filters, ignoring the page window."""
        try:
            return self._filtered().count()
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Count failed: {str(e)}",
                operation="count",
                table=self.model.__tablename__,
            ) from e

    def all(self) -> List[ModelType]:
        try:
            return self.build().all()
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Query failed: {str(e)}",
                operation="find",
                table=self.model.__tablename__,
            ) from e
