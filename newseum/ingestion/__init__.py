"""Feed ingestion: fetching, parsing and normalizing entries."""

from .models import AggregateResult, FeedItem, FeedResult, build_search_text
from .normalizer import normalize_entry, rewrite_link
from .rss_fetcher import RSSFetcher, print_feed_summary

__all__ = [
    "RSSFetcher",
    "AggregateResult",
    "FeedItem",
    "FeedResult",
    "build_search_text",
    "normalize_entry",
    "print_feed_summary",
    "rewrite_link",
]
