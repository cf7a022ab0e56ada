"""Shared test fixtures for newseum tests."""

from datetime import datetime, timezone

import httpx
import pytest

from newseum.config import SourceConfig
from newseum.ingestion import FeedItem


SAMPLE_RSS_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Test Podcast</title>
    <link>https://example.com</link>
    <description>A test RSS feed</description>
    <item>
      <title>Episode 2</title>
      <link>https://example.com/episode-2</link>
      <guid>episode-2</guid>
      <description>Second episode notes</description>
      <pubDate>Mon, 15 Jan 2024 10:00:00 GMT</pubDate>
      <enclosure url="https://cdn.example.com/cover.jpg" type="image/jpeg" length="10"/>
      <enclosure url="https://cdn.example.com/ep2.mp3" type="audio/mpeg" length="1234"/>
    </item>
    <item>
      <title>Episode 1</title>
      <link>https://example.com/episode-1</link>
      <guid>episode-1</guid>
      <description>First episode notes</description>
      <pubDate>Sun, 14 Jan 2024 10:00:00 GMT</pubDate>
    </item>
  </channel>
</rss>"""

SAMPLE_ATOM_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Test Atom Feed</title>
  <link href="https://blog.example.org"/>
  <id>urn:uuid:feed</id>
  <updated>2024-01-15T12:00:00Z</updated>
  <entry>
    <title>Atom Entry</title>
    <link href="https://blog.example.org/entry-1"/>
    <id>urn:uuid:entry-1</id>
    <summary>Summary of the atom entry</summary>
    <updated>2024-01-15T12:00:00Z</updated>
  </entry>
</feed>"""

SAMPLE_MIRROR_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>user / X</title>
    <link>https://nitter.example.net/user</link>
    <description>Mirror timeline</description>
    <item>
      <title>A post</title>
      <link>https://nitter.example.net/user/status/123#m</link>
      <description>Post body</description>
      <pubDate>Sat, 13 Jan 2024 08:00:00 GMT</pubDate>
    </item>
  </channel>
</rss>"""

SAMPLE_MALFORMED = b"%%% this is definitely not a feed %%%"


def make_item(title="Title", feed_title="Feed", description="", published_at=None, **kwargs):
    """Build a FeedItem with sensible defaults."""
    return FeedItem(
        title=title,
        feed_title=feed_title,
        description=description,
        published_at=published_at,
        **kwargs,
    )


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def feed_routes():
    """URL -> (status, body) map served by the mock transport."""
    return {
        "https://example.com/podcast.xml": (200, SAMPLE_RSS_XML),
        "https://blog.example.org/atom.xml": (200, SAMPLE_ATOM_XML),
        "https://nitter.example.net/user/rss": (200, SAMPLE_MIRROR_XML),
        "https://broken.example.com/feed": (200, SAMPLE_MALFORMED),
        "https://down.example.com/feed": (500, b"Internal Server Error"),
    }


@pytest.fixture
def mock_transport(feed_routes):
    """httpx transport that serves feed_routes and 404s everything else."""

    def handler(request: httpx.Request) -> httpx.Response:
        status, body = feed_routes.get(str(request.url), (404, b"not found"))
        return httpx.Response(status, content=body)

    return httpx.MockTransport(handler)


@pytest.fixture
def podcast_source():
    return SourceConfig(name="Podcast", url="https://example.com/podcast.xml")


@pytest.fixture
def atom_source():
    return SourceConfig(name="", url="https://blog.example.org/atom.xml")


@pytest.fixture
def mirror_source():
    return SourceConfig(name="Mirror", url="https://nitter.example.net/user/rss")


@pytest.fixture
def broken_source():
    return SourceConfig(name="Broken", url="https://broken.example.com/feed")


@pytest.fixture
def down_source():
    return SourceConfig(name="Down", url="https://down.example.com/feed")
