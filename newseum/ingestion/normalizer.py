"""Turn raw feedparser entries into FeedItems."""

import calendar
import re
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

import pendulum

from ..config import LinkRewrite, SourceConfig, UndatedPolicy
from .models import FeedItem

DEFAULT_REWRITES = (LinkRewrite(pattern="nitter.", canonical="https://x.com"),)

_LINK_PATH = re.compile(r"https?://[^/]+/(.*)")


def rewrite_link(
    source_url: str,
    link: str,
    rewrites: Sequence[LinkRewrite] = DEFAULT_REWRITES,
) -> str:
    """Point links from mirror feeds at the canonical site.

    The path of ``link`` is kept, its fragment dropped and its host replaced.
    Links of other sources are returned unchanged.
    """
    for rewrite in rewrites:
        if rewrite.pattern and rewrite.pattern in source_url:
            match = _LINK_PATH.match(link)
            if match:
                path = match.group(1).split("#", 1)[0]
                return f"{rewrite.canonical}/{path}"
            return link
    return link


def parse_published(entry: Mapping[str, Any]) -> Optional[datetime]:
    """Return the entry's publish time as a UTC datetime, if it has one."""
    for key in ("published_parsed", "updated_parsed"):
        value = entry.get(key)
        if not value:
            continue
        try:
            # feedparser normalizes parsed dates to UTC
            ts = calendar.timegm(tuple(value))
            return pendulum.from_timestamp(ts, tz="UTC")
        except (TypeError, ValueError, OverflowError):
            continue
    return None


def find_audio_enclosure(entry: Mapping[str, Any]) -> str:
    """URL of the first enclosure with an audio/* type."""
    for enclosure in entry.get("enclosures") or []:
        media_type = enclosure.get("type") or ""
        if media_type.startswith("audio/"):
            return enclosure.get("href") or enclosure.get("url") or ""
    return ""


def extract_description(entry: Mapping[str, Any]) -> str:
    description = entry.get("summary") or entry.get("description")
    if description:
        return description
    for content in entry.get("content") or []:
        value = content.get("value")
        if value:
            return value
    return ""


def normalize_entry(
    entry: Mapping[str, Any],
    source: SourceConfig,
    feed_title: str = "",
    now: Optional[datetime] = None,
    undated: UndatedPolicy = UndatedPolicy.NEWEST,
    rewrites: Sequence[LinkRewrite] = DEFAULT_REWRITES,
) -> Optional[FeedItem]:
    """
    Map one parsed entry of ``source`` to a FeedItem.

    Args:
        entry: feedparser entry (any mapping with feedparser's keys)
        source: Source the entry came from
        feed_title: Title the feed declares for itself
        now: Instant used for undated entries under the ``newest`` policy
        undated: Dating policy for entries without a publish time
        rewrites: Mirror link rewrites

    Returns:
        The item, or None when the entry is undated and the policy excludes it
    """
    published_at = parse_published(entry)
    if published_at is None:
        if undated == UndatedPolicy.EXCLUDED:
            return None
        if undated == UndatedPolicy.NEWEST:
            published_at = now if now is not None else pendulum.now("UTC")

    return FeedItem(
        title=entry.get("title") or "",
        published_at=published_at,
        feed_title=source.name or feed_title or "",
        link=rewrite_link(source.url, entry.get("link") or "", rewrites),
        media_url=find_audio_enclosure(entry),
        description=extract_description(entry),
    )
