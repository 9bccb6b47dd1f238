"""
Base repository with standardized CRUD operations, transaction management, and error handling.

Provides the foundation for the domain repositories. Store failures are
translated into application exceptions after rolling the session back:
integrity failures become ConstraintViolationError, anything else from
SQLAlchemy becomes RepositoryError.
"""

from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Optional, Sequence, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from app.config.logging import get_logger
from app.core.exceptions import ConstraintViolationError, RepositoryError
from app.models.base import BaseModel
from app.repositories.base.query_builder import QueryBuilder

logger = get_logger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with standardized operations.

    Provides CRUD operations, transaction management, and error handling
    for all domain repositories.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    # ==================== Transaction Management ====================

    @contextmanager
    def transaction(self, operation: str = "transaction") -> Iterator[Session]:
        """
        Transaction context manager with automatic rollback.

        Usage:
            with repository.transaction("delete room"):
                ...
        """
        try:
            yield self.db
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise self._constraint_error(operation, e) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Transaction rollback during {operation}: {str(e)}", exc_info=True)
            raise RepositoryError(
                f"{operation} failed: {str(e)}",
                operation=operation,
                table=self.model.__tablename__,
            ) from e
        except Exception:
            self.db.rollback()
            raise

    def _constraint_error(self, operation: str, error: IntegrityError) -> ConstraintViolationError:
        logger.info(f"Constraint violation during {operation} on {self.model.__tablename__}: {error.orig}")
        return ConstraintViolationError(
            f"Duplicate or invalid reference in {self.model.__name__}: {error.orig}",
            operation=operation,
            table=self.model.__tablename__,
        )

    # ==================== Query Helpers ====================

    def query(self) -> Query:
        return self.db.query(self.model)

    def builder(self) -> QueryBuilder[ModelType]:
        """Start a fluent query against this repository's model."""
        return QueryBuilder(self.model, self.db)

    # ==================== Create Operations ====================

    def create(self, entity: ModelType) -> ModelType:
        """
        Persist a new entity.

        Raises:
            ConstraintViolationError: If a unique or foreign key constraint fails
            RepositoryError: On any other store failure
        """
        with self.transaction(f"create {self.model.__name__}"):
            self.db.add(entity)
        self.db.refresh(entity)
        logger.info(f"Created {self.model.__name__} with id: {entity.id}")
        return entity

    def create_many(self, entities: Sequence[ModelType]) -> List[ModelType]:
        """
        Insert all entities in a single transaction.

        Either every entity is persisted or none is.
        """
        with self.transaction(f"bulk create {self.model.__name__}"):
            self.db.add_all(entities)
            self.db.flush()
        for entity in entities:
            self.db.refresh(entity)
        logger.info(f"Bulk created {len(entities)} {self.model.__name__} entities")
        return list(entities)

    # ==================== Read Operations ====================

    def find_by_id(self, id: str) -> Optional[ModelType]:
        """
        Find entity by ID.

        Args:
            id: Entity ID

        Returns:
            Entity or None
        """
        try:
            return self.query().filter(self.model.id == id).first()
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Find by ID failed: {str(e)}",
                operation="find_by_id",
                table=self.model.__tablename__,
            ) from e

    def exists(self, id: str) -> bool:
        try:
            return self.db.query(self.query().filter(self.model.id == id).exists()).scalar()
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Exists check failed: {str(e)}",
                operation="exists",
                table=self.model.__tablename__,
            ) from e

    def find_by_criteria(self, criteria: Dict[str, Any], *options: Any) -> List[ModelType]:
        """
        Find entities whose attributes equal the given values.

        Args:
            criteria: Attribute name to value mapping
            *options: Loader options such as joinedload()

        Returns:
            List of matching entities
        """
        try:
            query = self.query()
            for key, value in criteria.items():
                query = query.filter(getattr(self.model, key) == value)
            if options:
                query = query.options(*options)
            return query.all()
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Find by criteria failed: {str(e)}",
                operation="find_by_criteria",
                table=self.model.__tablename__,
            ) from e

    # ==================== Update Operations ====================

    def update(self, entity: ModelType, data: Dict[str, Any]) -> ModelType:
        """
        Apply attribute updates to an entity and commit.

        Args:
            entity: Loaded entity to update
            data: Attribute name to new value mapping

        Returns:
            Updated entity
        """
        with self.transaction(f"update {self.model.__name__}"):
            for key, value in data.items():
                setattr(entity, key, value)
        self.db.refresh(entity)
        logger.info(f"Updated {self.model.__name__} with id: {entity.id}")
        return entity

    # ==================== Delete Operations ====================

    def delete(self, entity: ModelType) -> None:
        """Hard delete entity."""
        entity_id = entity.id
        with self.transaction(f"delete {self.model.__name__}"):
            self.db.delete(entity)
        logger.info(f"Deleted {self.model.__name__} with id: {entity_id}")
