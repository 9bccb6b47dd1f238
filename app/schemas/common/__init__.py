"""
Common schemas shared across resources.
"""

from app.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
)
from app.schemas.common.response import (
    list_response,
    paginated_response,
    success_response,
)

__all__ = [
    "BaseSchema",
    "BaseCreateSchema",
    "BaseUpdateSchema",
    "BaseResponseSchema",
    "success_response",
    "list_response",
    "paginated_response",
]
