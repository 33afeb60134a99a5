"""Exceptions raised while loading a podcast feed.

Exception Hierarchy:
    PodcastError (base)
    ├── PodcastTimeoutError - connect/read timeouts and unreachable hosts
    ├── PodcastFailedError - a response arrived but was not usable
    ├── PodcastCancelledError - the caller aborted the request
    ├── CacheDirectoryError - the cache directory could not be created
    └── PodcastParseError - the body is not an RSS document
"""

from typing import Optional


class PodcastError(Exception):
    """Base exception for all feed loading errors.

    Attributes:
        message: Human-readable error message, usually the transport's own
        url: Feed URL being loaded, when known
    """

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        self.message = message
        self.url = url
        super().__init__(message)


class PodcastTimeoutError(PodcastError):
    """Raised when the feed could not be reached in time."""


class PodcastFailedError(PodcastError):
    """Raised when the server answered with an error or a broken response."""


class PodcastCancelledError(PodcastError):
    """Raised when the request was cancelled through its cancel event."""


class CacheDirectoryError(PodcastError):
    """Raised when the cache directory is missing and cannot be created.

    Attributes:
        directory: The directory that could not be created
    """

    def __init__(self, message: str, directory: str) -> None:
        self.directory = directory
        super().__init__(message)


class PodcastParseError(PodcastError):
    """Raised when the downloaded document has no RSS channel."""
