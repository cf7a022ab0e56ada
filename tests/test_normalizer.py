"""Tests for entry normalization and link rewriting."""

from datetime import datetime, timezone

import pytest

from newseum.config import LinkRewrite, SourceConfig, UndatedPolicy
from newseum.ingestion import FeedItem, normalize_entry, rewrite_link
from newseum.ingestion.normalizer import extract_description, find_audio_enclosure, parse_published

NOW = datetime(2024, 1, 15, 14, 0, tzinfo=timezone.utc)
SOURCE = SourceConfig(name="My Feed", url="https://example.com/rss")


def entry(**fields):
    base = {
        "title": "Hello World",
        "link": "https://example.com/hello",
        "summary": "Some Description",
        "published_parsed": (2024, 1, 10, 9, 30, 0, 2, 10, 0),
    }
    base.update(fields)
    return base


def test_normalize_basic_fields():
    item = normalize_entry(entry(), SOURCE, feed_title="Declared Title", now=NOW)

    assert item.title == "Hello World"
    assert item.feed_title == "My Feed"
    assert item.link == "https://example.com/hello"
    assert item.description == "Some Description"
    assert item.published_at == datetime(2024, 1, 10, 9, 30, tzinfo=timezone.utc)
    assert item.search_text == "hello world my feed some description"


def test_feed_title_falls_back_to_declared_title():
    source = SourceConfig(name="", url="https://example.com/rss")

    item = normalize_entry(entry(), source, feed_title="Declared Title", now=NOW)

    assert item.feed_title == "Declared Title"
    assert "declared title" in item.search_text


def test_updated_time_used_when_published_missing():
    e = entry(published_parsed=None, updated_parsed=(2023, 5, 1, 12, 0, 0, 0, 121, 0))

    assert parse_published(e) == datetime(2023, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_malformed_time_is_treated_as_absent():
    assert parse_published({"published_parsed": ("bad",)}) is None


@pytest.mark.parametrize(
    "policy,expected",
    [
        (UndatedPolicy.NEWEST, NOW),
        (UndatedPolicy.OLDEST, None),
    ],
)
def test_undated_policy(policy, expected):
    item = normalize_entry(entry(published_parsed=None), SOURCE, now=NOW, undated=policy)

    assert item.published_at == expected


def test_undated_policy_excluded_returns_none():
    assert normalize_entry(entry(published_parsed=None), SOURCE, undated=UndatedPolicy.EXCLUDED) is None


def test_first_audio_enclosure_wins():
    e = entry(
        enclosures=[
            {"type": "video/mp4", "href": "https://cdn.example.com/v.mp4"},
            {"type": "audio/mpeg", "href": "https://cdn.example.com/a.mp3"},
            {"type": "audio/ogg", "href": "https://cdn.example.com/b.ogg"},
        ]
    )

    assert find_audio_enclosure(e) == "https://cdn.example.com/a.mp3"


def test_no_audio_enclosure_is_empty():
    assert find_audio_enclosure(entry(enclosures=[{"type": "image/png", "href": "x"}])) == ""
    assert find_audio_enclosure(entry()) == ""


def test_description_falls_back_to_content():
    e = entry(summary="", content=[{"value": "<p>Full content</p>"}])

    assert extract_description(e) == "<p>Full content</p>"
    assert extract_description(entry(summary="", content=[])) == ""


def test_rewrite_mirror_link():
    link = rewrite_link("https://nitter.net/user/rss", "https://mirror.example/user/status/123#m")

    assert link == "https://x.com/user/status/123"


def test_rewrite_leaves_other_sources_alone():
    link = "https://mirror.example/user/status/123#m"

    assert rewrite_link("https://example.com/rss", link) == link


def test_rewrite_with_custom_rule():
    rules = [LinkRewrite(pattern="invidious.", canonical="https://www.youtube.com/")]

    link = rewrite_link("https://invidious.example/feed/channel/abc", "https://invidious.example/watch?v=xyz", rules)

    assert link == "https://www.youtube.com/watch?v=xyz"


def test_search_text_cannot_be_overridden():
    item = FeedItem(title="ABC", feed_title="Feed", description="Desc", search_text="bogus")

    assert item.search_text == "abc feed desc"


def test_items_are_immutable_values():
    a = FeedItem(title="Same", feed_title="Feed")
    b = FeedItem(title="Same", feed_title="Feed")

    assert a == b
    with pytest.raises(Exception):
        a.title = "Changed"
