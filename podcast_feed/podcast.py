"""Loading a podcast feed into the Podcast model."""

import threading
from datetime import timedelta
from typing import Optional, Sequence

from .episodes import map_items
from .loader import load_raw_feed
from .models import Episode, Podcast
from .parser import ParsedFeed, parse_feed
from .transport import DEFAULT_TIMEOUT


def channel_author(feed: ParsedFeed) -> Optional[str]:
    """Channel author, falling back to the channel's iTunes author."""
    if feed.author:
        return feed.author
    if feed.itunes is not None:
        return feed.itunes.author
    return None


def assemble_podcast(url: str, feed: ParsedFeed, episodes: Sequence[Episode]) -> Podcast:
    """Combine channel metadata and mapped episodes into a Podcast."""
    return Podcast(
        url=url,
        link=feed.link,
        title=feed.title,
        description=feed.description,
        image=feed.image_url,
        copyright=channel_author(feed),
        episodes=tuple(episodes),
    )


def load_feed(
    url: str,
    timeout: int = DEFAULT_TIMEOUT,
    cache_max_age: Optional[timedelta] = None,
    cache_directory: Optional[str] = None,
    cancel_event: Optional[threading.Event] = None,
    show_progress: bool = False,
) -> Podcast:
    """Load a podcast and its episodes from a feed URL.

    Every call runs the whole pipeline independently: fetch (or read from
    the cache), parse, map episodes, assemble. A failure at any step raises;
    no partially filled Podcast is ever returned.

    Args:
        url: Feed URL
        timeout: Request timeout in milliseconds
        cache_max_age: Enables the disk cache with this maximum age
        cache_directory: Cache location, defaults to default_cache_dir()
        cancel_event: Optional event that aborts the download once set
        show_progress: Render a download progress bar

    Returns:
        The loaded Podcast

    Raises:
        PodcastTimeoutError: The feed could not be reached in time
        PodcastFailedError: The server returned an error or broken response
        PodcastCancelledError: cancel_event was set during the download
        CacheDirectoryError: The cache directory could not be created
        PodcastParseError: The document is not an RSS feed
    """
    raw_xml = load_raw_feed(
        url,
        timeout=timeout,
        cache_max_age=cache_max_age,
        cache_directory=cache_directory,
        cancel_event=cancel_event,
        show_progress=show_progress,
    )
    feed = parse_feed(raw_xml)
    episodes = map_items(feed.items, channel_author(feed))
    return assemble_podcast(url, feed, episodes)
