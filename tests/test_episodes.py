"""Tests for mapping parsed items to episodes."""

from datetime import datetime, timezone

from podcast_feed.episodes import episode_author, map_item, map_items
from podcast_feed.parser import ItunesItem, ParsedItem


class TestEpisodeAuthor:
    def test_item_author_wins(self):
        item = ParsedItem(author="Jane", itunes=ItunesItem(author="iTunes Jane"))
        assert episode_author(item, "Acme Radio") == "Jane"

    def test_itunes_author_before_channel(self):
        item = ParsedItem(itunes=ItunesItem(author="Guest Host"))
        assert episode_author(item, "Acme Radio") == "Guest Host"

    def test_empty_item_author_is_ignored(self):
        item = ParsedItem(author="", itunes=ItunesItem(author="Guest Host"))
        assert episode_author(item, "Acme Radio") == "Guest Host"

    def test_channel_fallback(self):
        assert episode_author(ParsedItem(), "Acme Radio") == "Acme Radio"

    def test_no_author_anywhere(self):
        assert episode_author(ParsedItem(itunes=ItunesItem()), None) is None


def test_full_item():
    item = ParsedItem(
        guid="ep-2",
        title="Episode 2",
        description="Second",
        link="https://acme.example/2",
        pub_date="Tue, 02 Jan 2024 10:00:00 +0000",
        author="Jane Host",
        enclosure_url="https://cdn.acme.example/2.mp3",
        itunes=ItunesItem(duration="01:02:03", season=1, episode=2),
    )

    episode = map_item(item, "Acme Radio")

    assert episode.guid == "ep-2"
    assert episode.title == "Episode 2"
    assert episode.description == "Second"
    assert episode.link == "https://acme.example/2"
    assert episode.published_at == datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)
    assert episode.author == "Jane Host"
    assert episode.duration_text == "01:02:03"
    assert episode.media_url == "https://cdn.acme.example/2.mp3"
    assert episode.season == 1
    assert episode.episode_number == 2


def test_missing_itunes_structure_leaves_fields_absent():
    episode = map_item(ParsedItem(guid="x", enclosure_url="https://cdn/x.mp3"), None)

    assert episode.duration_text is None
    assert episode.season is None
    assert episode.episode_number is None
    assert episode.media_url == "https://cdn/x.mp3"


def test_bad_date_degrades_to_none():
    episode = map_item(ParsedItem(guid="x", pub_date="yesterday-ish"), None)

    assert episode.published_at is None


def test_order_preserved_without_dedup():
    items = [ParsedItem(guid="b"), ParsedItem(guid="a"), ParsedItem(guid="b")]

    episodes = map_items(items, "Acme Radio")

    assert [e.guid for e in episodes] == ["b", "a", "b"]
    assert all(e.author == "Acme Radio" for e in episodes)
