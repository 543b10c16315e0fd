"""Storage layer for leaguebook application."""

from leaguebook.database.base import Storage
from leaguebook.database.factories import create_sqlite_storage

__all__ = ["Storage", "create_sqlite_storage"]
