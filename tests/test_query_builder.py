"""Tests for listing parameter parsing and the room query builder."""

import pytest

from app.core.constants import DB_INT_MAX, MAX_PAGE_VALUE
from app.models import Room
from app.repositories.base.query_builder import (
    ListQueryParams,
    QueryBuilder,
    SortKey,
    parse_select,
    parse_sort,
)
from app.repositories.room import RoomRepository


def _list(db_session, raw):
    params = ListQueryParams.from_mapping(raw, default_sort="roomNumber", default_limit=25)
    return RoomRepository(db_session).list_rooms(params)


def _list_items(db_session, items):
    params = ListQueryParams.from_items(items, default_sort="roomNumber", default_limit=25)
    return RoomRepository(db_session).list_rooms(params)


# =============================================================================
# Parsing
# =============================================================================

def test_parse_sort_handles_descending_prefix():
    assert parse_sort("floor,-roomNumber", "roomNumber") == [
        SortKey("floor"),
        SortKey("roomNumber", descending=True),
    ]


def test_parse_sort_falls_back_to_default():
    assert parse_sort(None, "roomNumber") == [SortKey("roomNumber")]
    assert parse_sort("", "roomNumber") == [SortKey("roomNumber")]


def test_parse_select():
    assert parse_select("roomNumber, floor") == ["roomNumber", "floor"]
    assert parse_select(None) is None
    assert parse_select(" , ") is None


def test_reserved_keys_are_not_filters():
    params = ListQueryParams.from_mapping(
        {"select": "floor", "sort": "-floor", "page": "2", "limit": "5", "status": "available"},
        default_sort="roomNumber",
        default_limit=25,
    )
    assert params.filters == {"status": ["available"]}
    assert params.fields == ["floor"]
    assert params.sort == [SortKey("floor", descending=True)]
    assert (params.window.page, params.window.limit) == (2, 5)


def test_invalid_page_and_limit_fall_back():
    params = ListQueryParams.from_mapping(
        {"page": "abc", "limit": "-1"},
        default_sort="roomNumber",
        default_limit=25,
    )
    assert (params.window.page, params.window.limit) == (1, 25)


def test_repeated_filter_keys_keep_every_value():
    params = ListQueryParams.from_items(
        [("floor", "1"), ("status", "available"), ("floor", "2")],
        default_sort="roomNumber",
        default_limit=25,
    )
    assert params.filters == {"floor": ["1", "2"], "status": ["available"]}


def test_repeated_reserved_key_uses_last_value():
    params = ListQueryParams.from_items(
        [("limit", "1"), ("limit", "3"), ("sort", "floor"), ("sort", "-floor")],
        default_sort="roomNumber",
        default_limit=25,
    )
    assert params.window.limit == 3
    assert params.sort == [SortKey("floor", descending=True)]


def test_oversized_page_and_limit_are_clamped():
    params = ListQueryParams.from_mapping(
        {"page": "99999999999999999999", "limit": "99999999999999999999"},
        default_sort="roomNumber",
        default_limit=25,
    )
    assert params.window.page == MAX_PAGE_VALUE
    assert params.window.limit == MAX_PAGE_VALUE
    assert params.window.start_index <= DB_INT_MAX
    assert params.window.end_index <= DB_INT_MAX


# =============================================================================
# Filtering
# =============================================================================

def test_no_filters_returns_all_rooms(db_session, seed):
    result = _list(db_session, {})
    assert result.total == 5
    assert result.count == 5


def test_filter_by_status(db_session, seed):
    result = _list(db_session, {"status": "maintenance"})
    assert [room.id for room in result.items] == [seed.a202]


def test_filter_accepts_camel_case_and_snake_case(db_session, seed):
    camel = _list(db_session, {"hotelId": seed.hotel_b})
    snake = _list(db_session, {"hotel_id": seed.hotel_b})
    assert [room.id for room in camel.items] == [seed.b101]
    assert [room.id for room in snake.items] == [seed.b101]


def test_filter_coerces_integer_column(db_session, seed):
    result = _list(db_session, {"floor": "2"})
    assert {room.id for room in result.items} == {seed.a201, seed.a202}


def test_unknown_filter_key_matches_nothing(db_session, seed):
    result = _list(db_session, {"colour": "blue"})
    assert result.total == 0
    assert result.items == []


def test_uncoercible_filter_value_matches_nothing(db_session, seed):
    result = _list(db_session, {"floor": "abc"})
    assert result.total == 0


def test_filter_by_feature_tag(db_session, seed):
    result = _list(db_session, {"features": "balcony"})
    assert {room.id for room in result.items} == {seed.a101, seed.a102}


@pytest.mark.parametrize("floor", ["99999999999999999999", "-99999999999999999999"])
def test_out_of_range_integer_filter_matches_nothing(db_session, seed, floor):
    result = _list(db_session, {"floor": floor})
    assert result.total == 0
    assert result.items == []


def test_repeated_filter_key_matches_any_value(db_session, seed):
    result = _list_items(db_session, [("floor", "1"), ("floor", "3")])
    assert {room.id for room in result.items} == {seed.a101, seed.a102, seed.b101}
    assert result.total == 3


def test_repeated_filter_key_drops_uncoercible_values(db_session, seed):
    result = _list_items(db_session, [("floor", "abc"), ("floor", "2")])
    assert {room.id for room in result.items} == {seed.a201, seed.a202}


def test_repeated_filter_key_with_no_usable_value_matches_nothing(db_session, seed):
    result = _list_items(db_session, [("floor", "abc"), ("floor", "99999999999999999999")])
    assert result.total == 0


def test_repeated_feature_tags_match_any_tag(db_session, seed):
    result = _list_items(db_session, [("features", "sea-view"), ("features", "balcony")])
    assert {room.id for room in result.items} == {seed.a101, seed.a102}
    assert result.total == 2


def test_repeated_keys_combine_with_other_filters(db_session, seed):
    result = _list_items(
        db_session,
        [("floor", "1"), ("floor", "2"), ("status", "maintenance")],
    )
    assert [room.id for room in result.items] == [seed.a202]


# =============================================================================
# Sorting & paging
# =============================================================================

def test_default_sort_is_room_number_with_id_tiebreak(db_session, seed):
    result = _list(db_session, {})
    numbers = [room.room_number for room in result.items]
    assert numbers == sorted(numbers)
    tied = [room.id for room in result.items if room.room_number == "101"]
    assert tied == sorted(tied)


def test_descending_sort(db_session, seed):
    result = _list(db_session, {"sort": "-floor,roomNumber"})
    assert [room.floor for room in result.items] == [3, 2, 2, 1, 1]
    assert [room.room_number for room in result.items][1:3] == ["201", "202"]


def test_unknown_sort_field_is_ignored(db_session, seed):
    result = _list(db_session, {"sort": "nonsense"})
    assert result.count == 5


def test_count_ignores_page_window(db_session, seed):
    result = _list(db_session, {"hotelId": seed.hotel_a, "page": "2", "limit": "3"})
    assert result.total == 4
    assert result.count == 1
    assert result.pagination == {"prev": {"page": 1, "limit": 3}}


def test_page_beyond_end_is_empty(db_session, seed):
    result = _list(db_session, {"page": "10", "limit": "2"})
    assert result.items == []
    assert result.total == 5


def test_oversized_page_is_empty(db_session, seed):
    result = _list(db_session, {"page": "99999999999999999999", "limit": "2"})
    assert result.items == []
    assert result.total == 5
    assert result.pagination == {"prev": {"page": MAX_PAGE_VALUE - 1, "limit": 2}}


def test_oversized_limit_returns_everything(db_session, seed):
    result = _list(db_session, {"limit": "99999999999999999999"})
    assert result.count == 5
    assert result.pagination == {}


def test_builder_resolves_aliases():
    builder = QueryBuilder(Room, db=None)
    assert builder.resolve("roomNumber") is Room.room_number
    assert builder.resolve("room_number") is Room.room_number
    assert builder.resolve("missing") is None


def test_walking_all_pages_yields_each_room_once(db_session, seed):
    seen = []
    page = 1
    while True:
        result = _list(db_session, {"page": str(page), "limit": "2"})
        seen.extend(room.id for room in result.items)
        if "next" not in result.pagination:
            break
        page = result.pagination["next"]["page"]

    assert page == 3
    assert len(seen) == len(set(seen)) == 5
    assert seen == [room.id for room in _list(db_session, {}).items]
