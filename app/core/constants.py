# app/core/constants.py
from __future__ import annotations

"""
Core application constants.

Pagination defaults, reserved listing parameters and common header names.
"""

# Pagination defaults
DEFAULT_PAGE: int = 1
DEFAULT_PAGE_LIMIT: int = 25

# Query parameters consumed by the listing query builder rather than
# passed through as equality filters
RESERVED_QUERY_PARAMS: tuple[str, ...] = ("select", "sort", "page", "limit")

# Prefix marking a descending sort key, e.g. "-roomNumber"
DESCENDING_PREFIX: str = "-"

# Common HTTP header names
HEADER_REQUEST_ID: str = "X-Request-ID"
HEADER_PROCESS_TIME: str = "X-Process-Time"

# Signed 64-bit range of a database INTEGER / BIGINT column
DB_INT_MIN: int = -(2**63)
DB_INT_MAX: int = 2**63 - 1

# Upper bound for page and limit; their product stays within DB_INT_MAX
MAX_PAGE_VALUE: int = 2**31 - 1
