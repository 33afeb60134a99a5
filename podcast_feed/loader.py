"""Cache-aware retrieval of raw feed documents."""

import threading
from datetime import timedelta
from typing import Optional

from .cache import is_fresh, read_cache, resolve_cache_path, write_cache
from .config import default_cache_dir
from .logger import logger
from .transport import DEFAULT_TIMEOUT, fetch_feed


def load_raw_feed(
    url: str,
    timeout: int = DEFAULT_TIMEOUT,
    cache_max_age: Optional[timedelta] = None,
    cache_directory: Optional[str] = None,
    cancel_event: Optional[threading.Event] = None,
    show_progress: bool = False,
) -> bytes:
    """Return the raw feed document, from the cache when it is still fresh.

    Caching is opt-in: without cache_max_age the feed is always downloaded
    and the cache is never touched.

    Args:
        url: Feed URL
        timeout: Request timeout in milliseconds
        cache_max_age: How long a cached copy stays valid
        cache_directory: Cache location, defaults to default_cache_dir()
        cancel_event: Optional event that aborts the download once set
        show_progress: Render a download progress bar

    Returns:
        Raw feed bytes

    Raises:
        PodcastTimeoutError, PodcastFailedError, PodcastCancelledError:
            Propagated from the transport
        CacheDirectoryError: If the cache directory cannot be created
    """
    if cache_max_age is None:
        return fetch_feed(url, timeout, cancel_event, show_progress)

    if cache_directory is None:
        cache_directory = default_cache_dir()

    cache_path = resolve_cache_path(url, cache_directory)
    logger.debug(f"Cache file for {url}: {cache_path}")

    if is_fresh(cache_path, cache_max_age):
        try:
            logger.info(f"Loading feed from cache: {cache_path}")
            return read_cache(cache_path)
        except OSError as e:
            logger.warning(f"Failed to load cached feed: {e}, downloading from remote")

    raw_xml = fetch_feed(url, timeout, cancel_event, show_progress)

    try:
        write_cache(cache_path, raw_xml)
    except OSError as e:
        logger.warning(f"Failed to cache feed at {cache_path}: {e}")

    return raw_xml
