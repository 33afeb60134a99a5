"""Tests for publication date parsing."""

from datetime import datetime, timedelta, timezone

import pytest

from podcast_feed.utils import parse_pub_date


def test_numeric_offset():
    parsed = parse_pub_date("Tue, 02 Jan 2024 10:00:00 +0200")
    assert parsed == datetime(2024, 1, 2, 10, 0, tzinfo=timezone(timedelta(hours=2)))


def test_gmt_suffix_is_utc_aware():
    parsed = parse_pub_date("Tue, 02 Jan 2024 10:00:00 GMT")
    assert parsed == datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)
    assert parsed.utcoffset() == timedelta(0)


def test_rfc2822_without_weekday():
    parsed = parse_pub_date("2 Jan 2024 10:00:00 -0500")
    assert parsed == datetime(2024, 1, 2, 15, 0, tzinfo=timezone.utc)


def test_surrounding_whitespace():
    parsed = parse_pub_date("  Tue, 02 Jan 2024 10:00:00 GMT\n")
    assert parsed == datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", [None, "", "not a date", "2024-13-45"])
def test_unparsable_returns_none(value):
    assert parse_pub_date(value) is None


def test_mixed_zone_styles_are_comparable():
    dates = [
        parse_pub_date("Tue, 02 Jan 2024 10:00:00 GMT"),
        parse_pub_date("Tue, 02 Jan 2024 11:00:00 +0200"),
        parse_pub_date("2 Jan 2024 08:00:00 EST"),
    ]
    assert sorted(dates)[0] == dates[1]
