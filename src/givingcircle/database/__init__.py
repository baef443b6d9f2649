"""Database layer for givingcircle application."""

from givingcircle.database.base import Database
from givingcircle.database.factories import create_memory_database, create_sqlite_database

__all__ = ["Database", "create_memory_database", "create_sqlite_database"]
