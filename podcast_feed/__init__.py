"""Podcast RSS feed loading with an optional on-disk cache."""

from .exceptions import (
    CacheDirectoryError,
    PodcastCancelledError,
    PodcastError,
    PodcastFailedError,
    PodcastParseError,
    PodcastTimeoutError,
)
from .models import Episode, Podcast
from .podcast import load_feed

try:
    from importlib.metadata import version

    __version__ = version("podcast-feed")
except Exception:
    __version__ = "unknown"

__all__ = [
    "load_feed",
    "Podcast",
    "Episode",
    "PodcastError",
    "PodcastTimeoutError",
    "PodcastFailedError",
    "PodcastCancelledError",
    "CacheDirectoryError",
    "PodcastParseError",
]
