"""State of one interactive browsing session."""

from typing import List, Optional, Sequence

from ..ingestion.models import FeedItem
from ..ranking import filter_items


class BrowserSession:
    """Current query, filtered view and selection over the canonical items.

    The canonical list is never modified; every query change rebuilds the
    view from it.
    """

    def __init__(self, items: Sequence[FeedItem], page_size: int = 20) -> None:
        self.items: List[FeedItem] = list(items)
        self.page_size = max(1, page_size)
        self.query = ""
        self.view: List[FeedItem] = list(self.items)
        self.selected = 0

    def set_query(self, query: str) -> None:
        self.query = query.lower()
        self.view = filter_items(self.query, self.items)
        self.selected = 0

    def clear_query(self) -> None:
        self.set_query("")

    @property
    def selected_item(self) -> Optional[FeedItem]:
        if 0 <= self.selected < len(self.view):
            return self.view[self.selected]
        return None

    def select(self, index: int) -> bool:
        """Select row ``index`` of the view; out-of-range indexes are ignored."""
        if 0 <= index < len(self.view):
            self.selected = index
            return True
        return False

    def move(self, delta: int) -> bool:
        """Move the selection, stopping at either end of the view."""
        return self.select(self.selected + delta)

    def first(self) -> None:
        self.select(0)

    def last(self) -> None:
        self.select(len(self.view) - 1)

    def next_page(self) -> None:
        self.select(min(self.selected + self.page_size, len(self.view) - 1))

    def prev_page(self) -> None:
        self.select(max(self.selected - self.page_size, 0))

    def page(self) -> range:
        """Indexes of the view rows on the selection's page."""
        start = (self.selected // self.page_size) * self.page_size
        return range(start, min(start + self.page_size, len(self.view)))
