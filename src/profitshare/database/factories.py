"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from profitshare.database.retry import DEFAULT_RETRY_ATTEMPTS, DEFAULT_RETRY_DELAY
from profitshare.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(
    database_path: Optional[str] = None,
    retry_attempts: int = DEFAULT_RETRY_ATTEMPTS,
    retry_delay: float = DEFAULT_RETRY_DELAY,
) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks PROFITSHARE_DB_PATH
            environment variable, then defaults to ~/.profitshare/profitshare.db
        retry_attempts: Total attempts per operation when the database is locked
        retry_delay: Seconds to wait between attempts

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("PROFITSHARE_DB_PATH")

    if database_path is None:
        # Default to ~/.profitshare/profitshare.db
        home = Path.home()
        db_dir = home / ".profitshare"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "profitshare.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(
        database_url, retry_attempts=retry_attempts, retry_delay=retry_delay
    )
