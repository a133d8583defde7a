"""
Adapter Registry - Maps backend keys to adapter classes.

Provides a single place to build an adapter by name.
"""

import logging
from typing import Dict, List, Type

from .base import DatabaseAdapter
from .mysql import MySQLAdapter
from .postgresql import PostgreSQLAdapter
from .sqlite import SQLiteAdapter

logger = logging.getLogger(__name__)


class UnknownBackendError(KeyError):
    """Raised when no adapter is registered under a key."""


class AdapterRegistry:
    """
    Registry of database adapter classes.

    Keys are case-insensitive. Built-in backends are registered on creation.
    """

    def __init__(self):
        self._adapters: Dict[str, Type[DatabaseAdapter]] = {}
        self._initialize_adapters()

    def _initialize_adapters(self):
        """Register the built-in backends."""
        adapter_classes = [
            ('mysql', MySQLAdapter),
            ('postgresql', PostgreSQLAdapter),
            ('sqlite', SQLiteAdapter),
        ]

        for key, cls in adapter_classes:
            self.register(key, cls)

    def register(self, key: str, adapter_cls: Type[DatabaseAdapter]) -> None:
        """Register (or replace) the adapter class for a backend key."""
        if not (isinstance(adapter_cls, type) and issubclass(adapter_cls, DatabaseAdapter)):
            raise TypeError(f"{adapter_cls!r} is not a DatabaseAdapter subclass")
        self._adapters[key.lower()] = adapter_cls
        logger.debug("Registered adapter %s -> %s", key.lower(), adapter_cls.__name__)

    def create(self, key: str) -> DatabaseAdapter:
        """
        Build a new adapter for a backend key.

        Raises:
            UnknownBackendError: If nothing is registered under the key
        """
        try:
            adapter_cls = self._adapters[key.lower()]
        except KeyError:
            raise UnknownBackendError(f"No database adapter registered for {key!r}") from None
        return adapter_cls()

    def available(self) -> List[str]:
        """Registered backend keys, in registration order."""
        return list(self._adapters)


# Global instance
adapter_registry = AdapterRegistry()
