"""Notifications module - News blog publisher and its subscribers."""

from .base import Subscriber
from .blog import NewsBlog
from .fan import NewsFan

__all__ = ['Subscriber', 'NewsBlog', 'NewsFan']
