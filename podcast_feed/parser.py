"""RSS document parsing into plain feed structures."""

from dataclasses import dataclass, field
from typing import List, Optional

from lxml import etree

from .exceptions import PodcastParseError
from .logger import logger

ITUNES_NS = "http://www.itunes.com/dtds/podcast-1.0.dtd"


@dataclass
class ItunesChannel:
    """iTunes extension fields of a channel."""

    author: Optional[str] = None


@dataclass
class ItunesItem:
    """iTunes extension fields of an item."""

    author: Optional[str] = None
    duration: Optional[str] = None
    season: Optional[int] = None
    episode: Optional[int] = None


@dataclass
class ParsedItem:
    guid: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    pub_date: Optional[str] = None
    author: Optional[str] = None
    enclosure_url: Optional[str] = None
    itunes: Optional[ItunesItem] = None


@dataclass
class ParsedFeed:
    title: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None
    image_url: Optional[str] = None
    itunes: Optional[ItunesChannel] = None
    items: List[ParsedItem] = field(default_factory=list)


def _itunes(tag: str) -> str:
    return f"{{{ITUNES_NS}}}{tag}"


def _text(parent, path: str) -> Optional[str]:
    """Stripped text of the first element matching path, None when empty."""
    elem = parent.find(path)
    if elem is None:
        return None
    text = "".join(elem.itertext()).strip()
    return text or None


def _int(parent, path: str) -> Optional[int]:
    text = _text(parent, path)
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def _has_itunes_fields(elem) -> bool:
    return any(
        isinstance(child.tag, str) and child.tag.startswith(f"{{{ITUNES_NS}}}")
        for child in elem
    )


def _parse_item(item) -> ParsedItem:
    enclosure_url = None
    enclosure = item.find("enclosure")
    if enclosure is not None:
        enclosure_url = (enclosure.get("url") or "").strip() or None

    itunes = None
    if _has_itunes_fields(item):
        itunes = ItunesItem(
            author=_text(item, _itunes("author")),
            duration=_text(item, _itunes("duration")),
            season=_int(item, _itunes("season")),
            episode=_int(item, _itunes("episode")),
        )

    return ParsedItem(
        guid=_text(item, "guid"),
        title=_text(item, "title"),
        description=_text(item, "description"),
        link=_text(item, "link"),
        pub_date=_text(item, "pubDate"),
        author=_text(item, "author"),
        enclosure_url=enclosure_url,
        itunes=itunes,
    )


def parse_feed(raw_xml: bytes) -> ParsedFeed:
    """Parse an RSS 2.0 document.

    Args:
        raw_xml: Raw XML bytes of the feed

    Returns:
        ParsedFeed with channel metadata and items in document order

    Raises:
        PodcastParseError: If the document has no channel element
    """
    # recover=True tolerates the small breakages common in real feeds
    parser = etree.XMLParser(recover=True, resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(raw_xml, parser)
    except etree.XMLSyntaxError as e:
        raise PodcastParseError(f"Feed is not valid XML: {e}") from e

    channel = root.find("channel") if root is not None else None
    if channel is None:
        raise PodcastParseError("No channel element found in RSS feed")

    itunes = None
    if _has_itunes_fields(channel):
        itunes = ItunesChannel(author=_text(channel, _itunes("author")))

    items = [_parse_item(item) for item in channel.iterfind("item")]
    logger.info(f"✓ Found {len(items)} episodes in feed")

    return ParsedFeed(
        title=_text(channel, "title"),
        link=_text(channel, "link"),
        description=_text(channel, "description"),
        author=_text(channel, "author"),
        image_url=_text(channel, "image/url"),
        itunes=itunes,
        items=items,
    )
