"""
News Fan - Subscriber that prints each notification it receives.
"""

from .base import Subscriber


class NewsFan(Subscriber):
    """A reader following one or more blogs."""

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def notify(self, article: str) -> None:
        print(f'{self._name} отримав сповіщення: нова новина - "{article}"')

    def __repr__(self) -> str:
        return f"NewsFan({self._name!r})"
