"""Substring search over precomputed item text."""

from typing import List, Sequence

from ..ingestion.models import FeedItem


def filter_items(query: str, items: Sequence[FeedItem]) -> List[FeedItem]:
    """
    Items whose search text contains ``query``, case-insensitively.

    Order is preserved and the returned items are the same objects as in
    ``items``. An empty query returns every item.
    """
    needle = query.lower()
    if not needle:
        return list(items)
    return [item for item in items if needle in item.search_text]
