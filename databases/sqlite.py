"""
SQLite Backend - Stub that prints acknowledgments instead of doing I/O.
"""

from .base import DatabaseAdapter


class SQLiteDatabase:
    """Mock SQLite client."""

    def connect(self) -> None:
        print("Підключення до SQLite")

    def execute_query(self, query: str) -> None:
        print(f"SQLite виконує: {query}")


class SQLiteAdapter(DatabaseAdapter):
    """Adapter for the SQLite stub."""

    def __init__(self):
        self._db = SQLiteDatabase()

    @property
    def name(self) -> str:
        return "SQLite"

    def connect(self) -> None:
        self._db.connect()

    def execute_query(self, query: str) -> None:
        self._db.execute_query(query)
