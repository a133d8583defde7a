"""Databases module - Uniform adapter interface over mock backends."""

from .base import DatabaseAdapter
from .mysql import MySQLDatabase, MySQLAdapter
from .postgresql import PostgreSQLDatabase, PostgreSQLAdapter
from .sqlite import SQLiteDatabase, SQLiteAdapter
from .processor import DataProcessor
from .manager import AdapterRegistry, UnknownBackendError, adapter_registry

__all__ = [
    'DatabaseAdapter',
    'MySQLDatabase',
    'MySQLAdapter',
    'PostgreSQLDatabase',
    'PostgreSQLAdapter',
    'SQLiteDatabase',
    'SQLiteAdapter',
    'DataProcessor',
    'AdapterRegistry',
    'UnknownBackendError',
    'adapter_registry',
]
