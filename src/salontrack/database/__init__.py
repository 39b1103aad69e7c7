"""Database layer for salontrack application."""

from salontrack.database.base import Database
from salontrack.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
