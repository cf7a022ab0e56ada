"""Pipeline that fetches every source and builds the sorted item list."""

import logging
import time
from typing import List, Optional

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeElapsedColumn

from ..config import ConfigModel, SourceConfig
from ..ingestion import AggregateResult, FeedResult, RSSFetcher
from ..ranking import sort_by_recency

default_console = Console()
logger = logging.getLogger(__name__)


class Aggregator:
    """Fetch, merge and order items from all configured sources."""

    def __init__(
        self,
        config: ConfigModel,
        fetcher: Optional[RSSFetcher] = None,
        console: Optional[Console] = None,
    ) -> None:
        """Initialize aggregator from settings.

        Pass the console that logging writes to so warnings print above the
        progress bar instead of through it.
        """
        self.config = config
        self.console = console or default_console
        self.fetcher = fetcher or RSSFetcher(
            timeout=config.fetch.timeout,
            max_concurrent=config.fetch.workers,
            user_agent=config.fetch.user_agent,
            undated=config.undated,
            rewrites=config.rewrites,
        )

    def collect(self, sources: List[SourceConfig], show_progress: bool = True) -> AggregateResult:
        """Fetch all sources and return their items, most recent first."""
        start = time.time()

        if show_progress and sources:
            with Progress(
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                MofNCompleteColumn(),
                TimeElapsedColumn(),
                console=self.console,
                transient=True,
            ) as progress:
                task = progress.add_task("Fetching feeds", total=len(sources))

                def on_progress(processed: int, total: int, result: FeedResult) -> None:
                    progress.update(task, completed=processed)

                result = self.fetcher.fetch_feeds_sync(sources, on_progress)
        else:
            result = self.fetcher.fetch_feeds_sync(sources)

        result.items = sort_by_recency(result.items)

        logger.info(
            "Fetched %d/%d feeds (%d failed), %d items in %.1fs",
            result.processed,
            result.total,
            len(result.failures),
            len(result.items),
            time.time() - start,
        )
        return result
