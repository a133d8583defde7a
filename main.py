"""
Pattern Demos - Command-line demonstration driver

Walks through three classic patterns, one section each:
- Singleton: process-wide cache
- Adapter: one DataProcessor over MySQL, PostgreSQL and SQLite stubs
- Observer: news blogs notifying their fans

Run with `python main.py` or the `pattern-demos` console script.
"""

import logging
from typing import Optional

from config import config
from cache import CacheManager, get_cache_manager
from databases import DataProcessor, adapter_registry
from notifications import NewsBlog, NewsFan


# =============================================================================
# SINGLETON
# =============================================================================

def demo_singleton(cache: CacheManager) -> None:
    print("=== Singleton ===")
    cache.set("user", "Іван")
    print(f"Користувач з кешу: {cache.get('user')}")


# =============================================================================
# ADAPTER
# =============================================================================

ADAPTER_QUERIES = [
    ('mysql', "SELECT * FROM users"),
    ('postgresql', "SELECT * FROM employees"),
    ('sqlite', "SELECT * FROM products"),
]


def demo_adapters() -> None:
    print("=== Adapter ===")
    for backend, query in ADAPTER_QUERIES:
        processor = DataProcessor(adapter_registry.create(backend))
        processor.process_data(query)


# =============================================================================
# OBSERVER
# =============================================================================

def run_blog(blog_name: str, fan_names: list, articles: list) -> NewsBlog:
    """Subscribe every fan to a new blog, then publish each article in turn."""
    blog = NewsBlog(blog_name)
    for fan_name in fan_names:
        blog.subscribe(NewsFan(fan_name))

    for title in articles:
        blog.publish_article(title)
    return blog


def demo_observer() -> None:
    print("=== Observer ===")
    run_blog(
        "SportLife",
        ["Андрій", "Марія", "Олег"],
        [
            "10 найкращих голів Ліги чемпіонів",
            "Огляд фіналу NBA 2025",
            "Українські спортсмени на Олімпіаді",
        ],
    )


def demo_fitness_blog() -> None:
    print("=== Observer (Ще один приклад) ===")
    run_blog(
        "FitToday",
        ["Анна", "Богдан"],
        [
            "Топ 5 вправ для пресу",
            "Рецепти здорових сніданків",
        ],
    )


# =============================================================================
# RUN
# =============================================================================

def main(cache: Optional[CacheManager] = None) -> int:
    """Run every demo section in order. Returns the process exit code."""
    logging.basicConfig(level=config.log_level)
    if cache is None:
        cache = get_cache_manager()

    demo_singleton(cache)
    print()

    demo_adapters()
    print()

    demo_observer()
    print()

    demo_fitness_blog()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
