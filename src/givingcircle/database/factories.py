"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from givingcircle.database.memory import InMemoryDatabase
from givingcircle.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks GIVINGCIRCLE_DB_PATH
            environment variable, then defaults to ~/.givingcircle/givingcircle.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("GIVINGCIRCLE_DB_PATH")

    if database_path is None:
        # Default to ~/.givingcircle/givingcircle.db
        home = Path.home()
        db_dir = home / ".givingcircle"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "givingcircle.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)


def create_memory_database() -> InMemoryDatabase:
    """Create an empty in-memory database instance."""
    return InMemoryDatabase()
