"""
Data Processor - Backend-agnostic consumer of a DatabaseAdapter.
"""

import logging

from .base import DatabaseAdapter

logger = logging.getLogger(__name__)


class DataProcessor:
    """
    Runs queries through whatever adapter it was given.

    The adapter is shared, not owned: its lifetime belongs to the caller.
    Every request connects first, then executes. No retry, no connection reuse.
    """

    def __init__(self, adapter: DatabaseAdapter):
        self._adapter = adapter

    @property
    def adapter(self) -> DatabaseAdapter:
        return self._adapter

    def process_data(self, query: str) -> None:
        """Connect, then execute the query."""
        logger.debug("Processing query on %s: %s", self._adapter.name, query)
        self._adapter.connect()
        self._adapter.execute_query(query)
