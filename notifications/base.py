"""
Abstract interface for blog subscribers.
"""

from abc import ABC, abstractmethod


class Subscriber(ABC):
    """Anything that wants to hear about new articles."""

    @abstractmethod
    def notify(self, article: str) -> None:
        """
        Called once per published article.

        Args:
            article: Title of the article that was just published
        """
        pass
