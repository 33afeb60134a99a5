"""Utility functions for podcast feed loading."""

from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Optional

RFC822_FORMATS = ("%a, %d %b %Y %H:%M:%S %z",)


def parse_pub_date(pub_date_str: Optional[str]) -> Optional[datetime]:
    """Parse publication date from RSS feed.

    Args:
        pub_date_str: Value of an item's ``pubDate`` element

    Returns:
        Parsed datetime, or None if the value is missing or unparsable
    """
    if not pub_date_str:
        return None

    pub_date_str = pub_date_str.strip()

    # Attempt the common numeric-offset format first
    for date_format in RFC822_FORMATS:
        try:
            return datetime.strptime(pub_date_str, date_format)
        except ValueError:
            continue

    # Anything else RFC 2822 allows (GMT and other named zones, no weekday, ...)
    try:
        return parsedate_to_datetime(pub_date_str)
    except (TypeError, ValueError, IndexError):
        return None
