"""Database layer for profitshare application."""

from profitshare.database.base import Database
from profitshare.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
