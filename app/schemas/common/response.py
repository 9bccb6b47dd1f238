# --- File: app/schemas/common/response.py ---
"""
Standard API response envelopes.

Success bodies have the shape ``{success, count?, pagination?, data}``;
error bodies are rendered by the exception handlers.
"""

from typing import Any, Dict, Optional

__all__ = [
    "success_response",
    "list_response",
    "paginated_response",
]


def success_response(data: Any) -> Dict[str, Any]:
    """Envelope for a single resource."""
    return {"success": True, "data": data}


def list_response(data: list) -> Dict[str, Any]:
    """Envelope for an unpaginated collection."""
    return {"success": True, "count": len(data), "data": data}


def paginated_response(
    data: list,
    pagination: Optional[Dict[str, Dict[str, int]]] = None,
) -> Dict[str, Any]:
    """Envelope for one page of a collection."""
    return {
        "success": True,
        "count": len(data),
        "pagination": pagination or {},
        "data": data,
    }
