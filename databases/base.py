"""
Abstract interface for all database adapters.

Adding a backend means wrapping it in a DatabaseAdapter subclass and
registering the class with the adapter registry.
"""

from abc import ABC, abstractmethod


class DatabaseAdapter(ABC):
    """Abstract base class for database adapters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the wrapped backend."""
        pass

    @abstractmethod
    def connect(self) -> None:
        """Open a connection to the backend."""
        pass

    @abstractmethod
    def execute_query(self, query: str) -> None:
        """
        Run a query on the backend.

        Args:
            query: Query text, passed to the backend unchanged
        """
        pass
