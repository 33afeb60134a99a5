"""
Shared test fixtures.

Provides pytest fixtures for:
- Sample RSS documents
- Mocked HTTP responses for requests.get
"""

from typing import Dict, List, Optional
from unittest.mock import MagicMock

import pytest
import requests

TEST_FEED_URL = "https://feeds.example/show.xml"

SAMPLE_RSS = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd">
  <channel>
    <title>Acme Show</title>
    <link>https://acme.example/</link>
    <description>Weekly talk from Acme.</description>
    <author>Acme Radio</author>
    <image>
      <url>https://acme.example/art.png</url>
      <title>Acme Show</title>
    </image>
    <itunes:author>Acme Radio Network</itunes:author>
    <item>
      <guid>ep-2</guid>
      <title>Episode 2</title>
      <description><![CDATA[<p>Second episode</p>]]></description>
      <link>https://acme.example/2</link>
      <pubDate>Tue, 02 Jan 2024 10:00:00 +0000</pubDate>
      <author>Jane Host</author>
      <enclosure url="https://cdn.acme.example/2.mp3" length="100" type="audio/mpeg"/>
      <itunes:duration>01:02:03</itunes:duration>
      <itunes:season>1</itunes:season>
      <itunes:episode>2</itunes:episode>
    </item>
    <item>
      <guid>ep-1</guid>
      <title>Episode 1</title>
      <description>First episode</description>
      <pubDate>not a date</pubDate>
      <itunes:author>Guest Host</itunes:author>
    </item>
    <item>
      <guid>ep-0</guid>
      <title>Trailer</title>
    </item>
  </channel>
</rss>
"""


def build_rss(channel_fields: str = "", items: Optional[List[str]] = None) -> bytes:
    """Build a minimal RSS document from raw channel and item XML fragments."""
    item_xml = "".join(f"<item>{item}</item>" for item in (items or []))
    return (
        '<?xml version="1.0"?>'
        '<rss version="2.0" xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd">'
        f"<channel>{channel_fields}{item_xml}</channel></rss>"
    ).encode()


def make_response(
    body: bytes = SAMPLE_RSS,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
    chunk_size: int = 64,
) -> MagicMock:
    """Build a mock requests.Response that streams body in chunks."""
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers if headers is not None else {"content-length": str(len(body))}
    chunks = [body[i:i + chunk_size] for i in range(0, len(body), chunk_size)]
    response.iter_content.side_effect = lambda chunk_size=1: iter(chunks)
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Client Error: Not Found for url: {TEST_FEED_URL}"
        )
    return response


@pytest.fixture
def sample_rss() -> bytes:
    return SAMPLE_RSS


@pytest.fixture
def cache_dir(tmp_path):
    """Cache directory that does not exist yet."""
    return str(tmp_path / "cache")
