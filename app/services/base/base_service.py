"""
Base service class providing common functionality for all services.
"""

from typing import Generic, TypeVar

from sqlalchemy.orm import Session

from app.config.logging import get_logger
from app.core.exceptions import ResourceNotFoundError
from app.repositories.base.base_repository import BaseRepository


TModel = TypeVar("TModel")
TRepo = TypeVar("TRepo", bound=BaseRepository)


class BaseService(Generic[TModel, TRepo]):
    """
    Base service with common behaviors:
    - Shared logger and db session
    - Lookup-or-404 helper

    Services raise application exceptions; the API layer renders them.
    """

    def __init__(self, repository: TRepo, db_session: Session):
        """
        Initialize base service.

        Args:
            repository: Repository instance for data access
            db_session: SQLAlchemy database session
        """
        self.repository: TRepo = repository
        self.db: Session = db_session
        self._logger = get_logger(self.__class__.__module__)

    def get_or_404(self, entity_id: str) -> TModel:
        """
        Retrieve entity by ID.

        Raises:
            ResourceNotFoundError: If no entity has this ID
        """
        entity = self.repository.find_by_id(entity_id)
        if entity is None:
            raise self._not_found(entity_id)
        return entity

    def _not_found(self, entity_id: str) -> ResourceNotFoundError:
        return ResourceNotFoundError(self.repository.model.__name__, entity_id)
