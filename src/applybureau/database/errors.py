"""Helpers for interpreting database driver errors."""

from sqlalchemy.exc import DBAPIError

# Postgres SQLSTATE for "relation does not exist"
UNDEFINED_TABLE = "42P01"


def is_relation_missing(exc: BaseException) -> bool:
    """Return True if the error means the queried table is not provisioned yet."""
    if not isinstance(exc, DBAPIError):
        return False

    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code == UNDEFINED_TABLE:
        return True

    # SQLite (local development and tests)
    return "no such table" in str(orig).lower()
