"""Shared utilities for SQLAlchemy repositories."""

from sqlalchemy.exc import IntegrityError


def integrity_message(exc: IntegrityError) -> str:
    """Driver message of an IntegrityError (without the SQL statement)."""
    return str(getattr(exc, "orig", exc))


def violates(message: str, constraint: str, table: str, column: str) -> bool:
    """
    Check whether an integrity error message names a unique constraint.

    PostgreSQL reports the constraint name, SQLite reports ``table.column``.
    """
    return constraint in message or f"{table}.{column}" in message
