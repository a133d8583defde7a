"""
Singleton Cache Manager

One process-wide string -> string store, created lazily on first access.

- No eviction, no expiry, no capacity bound
- Missing keys read as None
- Instance creation and every map access are lock-guarded
"""

import logging
import threading
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class CacheManager:
    """
    Process-wide key/value cache.

    Use get_instance() (or get_cache_manager()) to obtain the shared cache.
    Calling CacheManager() directly builds an independent store that nobody
    else sees, which is handy in tests.
    """

    _instance: Optional["CacheManager"] = None
    _instance_lock = threading.Lock()

    def __init__(self):
        self._cache: Dict[str, str] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "CacheManager":
        """
        Return the shared instance, creating it on the first call.

        Double-checked: the fast path skips the lock once the instance exists,
        the locked path re-checks so racing first callers build only one.
        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("Created shared CacheManager %#x", id(cls._instance))
        return cls._instance

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite a value."""
        with self._lock:
            self._cache[key] = value

    def get(self, key: str) -> Optional[str]:
        """Get value for key, or None if it was never set."""
        with self._lock:
            return self._cache.get(key)

    def delete(self, key: str) -> bool:
        """Delete key if exists."""
        with self._lock:
            if key in self._cache:
                del self._cache[key]
                return True
            return False

    def clear(self) -> None:
        """Clear all entries."""
        with self._lock:
            self._cache.clear()

    def stats(self) -> dict:
        """Get cache statistics."""
        with self._lock:
            return {'total_entries': len(self._cache)}

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)


def get_cache_manager() -> CacheManager:
    """Shared cache handle. Pass it to consumers instead of looking it up globally."""
    return CacheManager.get_instance()
