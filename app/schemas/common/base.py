# --- File: app/schemas/common/base.py ---
"""
Base schema classes with common fields and configurations.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "BaseSchema",
    "BaseCreateSchema",
    "BaseUpdateSchema",
    "BaseResponseSchema",
]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    Fields are exposed in camelCase on the wire while snake_case names are
    still accepted on input.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class BaseCreateSchema(BaseSchema):
    """Base schema for create operations."""

    model_config = ConfigDict(extra="ignore")


class BaseUpdateSchema(BaseSchema):
    """
    Base schema for partial updates.

    Only fields explicitly sent by the client are applied.
    """

    model_config = ConfigDict(extra="ignore")

    def changes(self) -> Dict[str, Any]:
        """Return the explicitly set fields keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class BaseResponseSchema(BaseSchema):
    """Base schema for persisted entities."""

    id: str = Field(..., description="Unique identifier")
    created_at: Optional[datetime] = Field(default=None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Last update timestamp")
