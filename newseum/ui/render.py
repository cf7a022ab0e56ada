"""Rich renderables for item lists and the preview pane."""

from datetime import datetime
from typing import Iterable, Optional, Tuple

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..display import clean_string, format_date
from ..ingestion.models import FeedItem


def item_row(item: FeedItem, now: datetime) -> Tuple[str, str, str]:
    """Feed name, title and relative date as displayed in a list row."""
    return (
        clean_string(item.feed_title),
        clean_string(item.title),
        format_date(item.published_at, now),
    )


def items_table(
    rows: Iterable[Tuple[int, FeedItem]],
    now: datetime,
    selected: Optional[int] = None,
    title: Optional[str] = None,
) -> Table:
    """Table of numbered items; the selected row is highlighted."""
    table = Table(title=title, expand=True)
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Feed", style="green", max_width=25, no_wrap=True, overflow="ellipsis")
    table.add_column("Title", style="red", ratio=3, no_wrap=True, overflow="ellipsis")
    table.add_column("Date", no_wrap=True)

    for index, item in rows:
        feed, item_title, date = item_row(item, now)
        style = "black on white" if index == selected else None
        table.add_row(str(index + 1), Text(feed), Text(item_title), date, style=style)

    return table


def preview_panel(item: Optional[FeedItem], now: datetime) -> Panel:
    """Title, feed, date and description of the selected item."""
    body = Text()
    if item is not None:
        body.append(item.title, style="yellow")
        body.append("\n\n")
        body.append(item.feed_title, style="green")
        body.append("\n")
        body.append(format_date(item.published_at, now))
        body.append("\n\n")
        body.append(clean_string(item.description))
    return Panel(body, title=" Preview ")
