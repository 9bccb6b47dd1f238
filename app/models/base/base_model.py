# app/models/base/base_model.py
"""
Base model configuration for SQLAlchemy ORM.

Provides the declarative base and an abstract model with a UUID string
primary key.
"""

from uuid import uuid4

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base shared by all models."""


class BaseModel(Base):
    """
    Abstract base model with common fields and methods.

    Provides the UUID primary key shared by all database models.
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        nullable=False,
        comment="Primary key (UUID)"
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"
