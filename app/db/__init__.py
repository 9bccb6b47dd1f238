"""Database engine, session factory and schema bootstrap."""
