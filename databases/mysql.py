"""
MySQL Backend - Stub that prints acknowledgments instead of doing I/O.
"""

from .base import DatabaseAdapter


class MySQLDatabase:
    """Mock MySQL client."""

    def connect(self) -> None:
        print("Підключення до MySQL")

    def execute_query(self, query: str) -> None:
        print(f"MySQL виконує: {query}")


class MySQLAdapter(DatabaseAdapter):
    """Adapter for the MySQL stub."""

    def __init__(self):
        self._db = MySQLDatabase()

    @property
    def name(self) -> str:
        return "MySQL"

    def connect(self) -> None:
        self._db.connect()

    def execute_query(self, query: str) -> None:
        self._db.execute_query(query)
