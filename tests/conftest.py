"""Shared fixtures."""

import pytest

from cache import CacheManager, get_cache_manager
from notifications import NewsBlog, NewsFan


@pytest.fixture
def shared_cache():
    """The process-wide cache, emptied before and after the test."""
    cache = get_cache_manager()
    cache.clear()
    yield cache
    cache.clear()


@pytest.fixture
def private_cache() -> CacheManager:
    return CacheManager()


@pytest.fixture
def blog() -> NewsBlog:
    return NewsBlog("SportLife")


@pytest.fixture
def fans():
    return NewsFan("A"), NewsFan("B"), NewsFan("C")


@pytest.fixture
def read_lines(capsys):
    """Callable returning the non-empty stdout lines printed since the last call."""
    def _read():
        return [line for line in capsys.readouterr().out.splitlines() if line]
    return _read
