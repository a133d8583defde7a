"""
News Blog - Publisher side of the observer pattern.

Subscribers are notified synchronously, in the order they subscribed.
Publishing iterates over a snapshot of the subscriber list, so a subscriber
that subscribes or unsubscribes someone during notify() only affects the
next article.
"""

import logging
from typing import List, Tuple

from .base import Subscriber

logger = logging.getLogger(__name__)


class NewsBlog:
    """A named blog that fans can follow."""

    def __init__(self, name: str):
        self._name = name
        self._subscribers: List[Subscriber] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def subscribers(self) -> Tuple[Subscriber, ...]:
        """Current subscribers in notification order."""
        return tuple(self._subscribers)

    def subscribe(self, subscriber: Subscriber) -> None:
        """Append a subscriber. Subscribing twice means two notifications."""
        self._subscribers.append(subscriber)
        logger.debug("[%s] subscribed %r (%d total)", self._name, subscriber, len(self._subscribers))

    def unsubscribe(self, subscriber: Subscriber) -> None:
        """Remove the first matching subscriber; no-op if it isn't subscribed."""
        try:
            self._subscribers.remove(subscriber)
        except ValueError:
            logger.debug("[%s] %r was not subscribed", self._name, subscriber)
            return
        logger.debug("[%s] unsubscribed %r", self._name, subscriber)

    def publish_article(self, title: str) -> None:
        """Announce the article, then notify every subscriber."""
        print(f"Блог {self._name} опублікував новину: {title}")
        for subscriber in tuple(self._subscribers):
            subscriber.notify(title)

    def __len__(self) -> int:
        return len(self._subscribers)
