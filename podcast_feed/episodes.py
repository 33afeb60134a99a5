"""Mapping of parsed feed items to episodes."""

from typing import Iterable, List, Optional

from .models import Episode
from .parser import ItunesItem, ParsedItem
from .utils import parse_pub_date


def episode_author(item: ParsedItem, channel_author: Optional[str]) -> Optional[str]:
    """Item author, then the item's iTunes author, then the channel author."""
    if item.author:
        return item.author
    if item.itunes is not None and item.itunes.author:
        return item.itunes.author
    return channel_author


def map_item(item: ParsedItem, channel_author: Optional[str]) -> Episode:
    """Build an Episode from one parsed item.

    Missing or unparsable values become None; this never raises for a
    single bad item.
    """
    itunes = item.itunes or ItunesItem()
    return Episode(
        guid=item.guid,
        title=item.title,
        description=item.description,
        link=item.link,
        published_at=parse_pub_date(item.pub_date),
        author=episode_author(item, channel_author),
        duration_text=itunes.duration,
        media_url=item.enclosure_url,
        season=itunes.season,
        episode_number=itunes.episode,
    )


def map_items(items: Iterable[ParsedItem], channel_author: Optional[str]) -> List[Episode]:
    """Map feed items to episodes, preserving feed order."""
    return [map_item(item, channel_author) for item in items]
