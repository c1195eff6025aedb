"""Database module."""

from applybureau.database.errors import is_relation_missing
from applybureau.database.session import get_db, engine, async_session_maker

__all__ = ["get_db", "engine", "async_session_maker", "is_relation_missing"]
