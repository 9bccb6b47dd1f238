# app/services/__init__.py
"""
Service layer root package.

Each subpackage implements application use-cases on top of:

- SQLAlchemy models (app.models.*)
- Repositories (app.repositories.*)
- Pydantic schemas (app.schemas.*)

Typical pattern for a service:

    class SomeService(BaseService[SomeModel, SomeRepository]):
        @classmethod
        def for_session(cls, db: Session) -> "SomeService":
            return cls(SomeRepository(db), db)
"""
