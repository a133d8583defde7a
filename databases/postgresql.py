"""
PostgreSQL Backend - Stub that prints acknowledgments instead of doing I/O.
"""

from .base import DatabaseAdapter


class PostgreSQLDatabase:
    """Mock PostgreSQL client."""

    def connect(self) -> None:
        print("Підключення до PostgreSQL")

    def execute_query(self, query: str) -> None:
        print(f"PostgreSQL виконує: {query}")


class PostgreSQLAdapter(DatabaseAdapter):
    """Adapter for the PostgreSQL stub."""

    def __init__(self):
        self._db = PostgreSQLDatabase()

    @property
    def name(self) -> str:
        return "PostgreSQL"

    def connect(self) -> None:
        self._db.connect()

    def execute_query(self, query: str) -> None:
        self._db.execute_query(query)
