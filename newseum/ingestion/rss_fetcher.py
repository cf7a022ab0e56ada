"""RSS feed fetcher with concurrent processing."""

import asyncio
import logging
from datetime import datetime
from typing import Callable, List, Optional, Sequence

import feedparser
import httpx
import pendulum
from rich.console import Console

from ..config import LinkRewrite, SourceConfig, UndatedPolicy
from .models import AggregateResult, FeedItem, FeedResult
from .normalizer import DEFAULT_REWRITES, normalize_entry

console = Console()
logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, FeedResult], None]


class RSSFetcher:
    """Fetch and parse RSS feeds."""

    def __init__(
        self,
        timeout: float = 30.0,
        max_concurrent: int = 5,
        user_agent: str = "newseum/1.0 (feed reader)",
        undated: UndatedPolicy = UndatedPolicy.NEWEST,
        rewrites: Sequence[LinkRewrite] = DEFAULT_REWRITES,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize RSS fetcher."""
        self.timeout = timeout
        self.max_concurrent = max(1, max_concurrent)
        self.user_agent = user_agent
        self.undated = undated
        self.rewrites = list(rewrites)
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
            limits=httpx.Limits(max_connections=self.max_concurrent),
            transport=self.transport,
        )

    def parse_feed(self, source: SourceConfig, content: bytes, now: Optional[datetime] = None) -> FeedResult:
        """Parse a fetched feed document into normalized items."""
        feed = feedparser.parse(content)

        feed_title = feed.feed.get("title") or ""
        if feed.bozo and not feed.entries and not feed_title:
            return FeedResult(
                source=source,
                success=False,
                error=f"Invalid feed {source.url}: {feed.get('bozo_exception')}",
            )

        if now is None:
            now = pendulum.now("UTC")

        items: List[FeedItem] = []
        for entry in feed.entries:
            item = normalize_entry(
                entry,
                source,
                feed_title=feed_title,
                now=now,
                undated=self.undated,
                rewrites=self.rewrites,
            )
            if item is not None:
                items.append(item)

        return FeedResult(
            source=source,
            success=True,
            feed_title=feed_title or None,
            items=items,
            item_count=len(items),
        )

    async def _download(self, client: httpx.AsyncClient, url: str) -> bytes:
        response = await client.get(url)
        response.raise_for_status()
        return response.content

    async def fetch_feed(self, client: httpx.AsyncClient, source: SourceConfig) -> FeedResult:
        """Fetch and parse a single RSS feed.

        The whole download shares one deadline of ``timeout`` seconds, so a
        server that trickles bytes still fails in bounded time.
        """
        try:
            content = await asyncio.wait_for(self._download(client, source.url), timeout=self.timeout)
            return self.parse_feed(source, content)
        except asyncio.TimeoutError:
            return FeedResult(
                source=source,
                success=False,
                error=f"Timed out fetching {source.url} after {self.timeout:g}s",
            )
        except httpx.HTTPError as e:
            return FeedResult(
                source=source,
                success=False,
                error=f"HTTP error fetching {source.url}: {e}",
            )
        except Exception as e:
            return FeedResult(
                source=source,
                success=False,
                error=f"Unexpected error parsing {source.url}: {e}",
            )

    async def fetch_all_feeds(
        self,
        sources: Sequence[SourceConfig],
        on_progress: Optional[ProgressCallback] = None,
    ) -> AggregateResult:
        """Fetch all feeds with a fixed pool of workers.

        Items are returned in arrival order; sorting is left to the caller.
        """
        total = len(sources)
        if not sources:
            return AggregateResult(total=0)

        queue: asyncio.Queue = asyncio.Queue(maxsize=total)
        for source in sources:
            queue.put_nowait(source)

        lock = asyncio.Lock()
        items: List[FeedItem] = []
        failures: List[FeedResult] = []
        processed = 0

        async def worker(client: httpx.AsyncClient) -> None:
            nonlocal processed
            while True:
                try:
                    source = queue.get_nowait()
                except asyncio.QueueEmpty:
                    return

                result = await self.fetch_feed(client, source)
                if result.success:
                    logger.debug("Fetched %s: %d items", source.url, result.item_count)
                else:
                    logger.warning("%s", result.error)

                async with lock:
                    if result.success:
                        items.extend(result.items)
                    else:
                        failures.append(result)
                    processed += 1
                    if on_progress is not None:
                        on_progress(processed, total, result)

        async with self._client() as client:
            workers = [worker(client) for _ in range(min(self.max_concurrent, total))]
            await asyncio.gather(*workers)

        return AggregateResult(items=items, failures=failures, processed=processed, total=total)

    def fetch_feeds_sync(
        self,
        sources: Sequence[SourceConfig],
        on_progress: Optional[ProgressCallback] = None,
    ) -> AggregateResult:
        """Synchronous wrapper for fetch_all_feeds."""
        return asyncio.run(self.fetch_all_feeds(sources, on_progress))


def print_feed_summary(result: AggregateResult) -> None:
    """Print summary of feed fetch results."""
    console.print("\n[bold]Feed Summary:[/bold]")
    console.print(f"  Sources fetched: {result.processed}/{result.total}")
    console.print(f"  Successful: [green]{result.successful}[/green]")
    console.print(f"  Failed: [red]{len(result.failures)}[/red]")
    console.print(f"  Total items: {len(result.items)}")

    if result.failures:
        console.print("\n[bold red]Failed feeds:[/bold red]")
        for failure in result.failures:
            label = failure.source.name or failure.source.url
            console.print(f"  - {label}: {failure.error}", markup=False)
