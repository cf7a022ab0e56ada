"""Recency ordering of the aggregate item collection."""

from datetime import datetime, timezone
from typing import Iterable, List

from ..ingestion.models import FeedItem

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _recency_key(item: FeedItem):
    published = item.published_at
    if published is None:
        return (False, _EPOCH)
    if published.tzinfo is None:
        published = published.replace(tzinfo=timezone.utc)
    return (True, published)


def sort_by_recency(items: Iterable[FeedItem]) -> List[FeedItem]:
    """Most recent first; undated items last.

    The sort is stable, so items with equal timestamps keep their arrival order.
    """
    return sorted(items, key=_recency_key, reverse=True)
