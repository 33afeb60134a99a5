"""On-disk cache for raw feed documents."""

import os
import time
from datetime import timedelta

from .exceptions import CacheDirectoryError
from .logger import logger

SCHEME_SEPARATOR = "://"
PATH_SEPARATORS = ("/", "\\")


def cache_filename(url: str) -> str:
    """Derive the cache filename for a feed URL.

    Everything up to and including the first ``://`` is dropped and path
    separators become underscores, so ``https://example.com/feed/rss`` maps
    to ``example.com_feed_rss``. URLs that only differ in their scheme share
    a filename.
    """
    filename = url.split(SCHEME_SEPARATOR, 1)[-1]
    for separator in PATH_SEPARATORS:
        filename = filename.replace(separator, "_")
    return filename


def resolve_cache_path(url: str, cache_directory: str) -> str:
    """Generate cache file path in cache directory based on URL.

    Args:
        url: The feed URL to cache
        cache_directory: Directory holding cache files, created if missing

    Returns:
        Path to cache file

    Raises:
        CacheDirectoryError: If the directory is missing and cannot be created
    """
    cache_directory = os.fspath(cache_directory)
    if not os.path.isdir(cache_directory):
        try:
            os.makedirs(cache_directory, exist_ok=True)
        except OSError as e:
            raise CacheDirectoryError(
                f"Cannot create cache directory {cache_directory}: {e}",
                directory=cache_directory,
            ) from e
        logger.debug(f"Created cache directory {cache_directory}")

    return os.path.join(cache_directory, cache_filename(url))


def is_fresh(path: str, max_age: timedelta) -> bool:
    """Check whether a cache file exists and is younger than max_age."""
    if not os.path.isfile(path):
        return False
    try:
        modified = os.path.getmtime(path)
    except OSError:
        return False
    return time.time() < modified + max_age.total_seconds()


def read_cache(path: str) -> bytes:
    """Read cached feed bytes. Freshness is the caller's concern."""
    with open(path, "rb") as f:
        return f.read()


def write_cache(path: str, data: bytes):
    """Write feed bytes to the cache, replacing any previous entry."""
    with open(path, "wb") as f:
        f.write(data)
    logger.debug(f"Cached feed to {path}")
