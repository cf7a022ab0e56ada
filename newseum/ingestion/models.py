"""Data models for ingestion."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..config import SourceConfig


def build_search_text(title: str, feed_title: str, description: str) -> str:
    """Lowercased text the search filter matches against."""
    return " ".join((title.lower(), feed_title.lower(), description.lower()))


class FeedItem(BaseModel):
    """One normalized feed entry.

    Items are immutable value objects. ``search_text`` is always derived from
    title, feed title and description when the item is built.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field("", description="Entry title")
    published_at: Optional[datetime] = Field(None, description="Publication instant (UTC)")
    feed_title: str = Field("", description="Source name or the feed's own title")
    link: str = Field("", description="Article URL after link rewriting")
    media_url: str = Field("", description="First audio enclosure URL")
    description: str = Field("", description="Description, or full content")
    search_text: str = Field("", description="Derived lowercase search text")

    @model_validator(mode="before")
    @classmethod
    def derive_search_text(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            data["search_text"] = build_search_text(
                data.get("title") or "",
                data.get("feed_title") or "",
                data.get("description") or "",
            )
        return data


class FeedResult(BaseModel):
    """Result of fetching one feed."""

    source: SourceConfig = Field(..., description="Source that was fetched")
    success: bool = Field(..., description="Whether fetch was successful")
    feed_title: Optional[str] = Field(None, description="Feed's self-declared title")
    items: List[FeedItem] = Field(default_factory=list, description="Normalized items")
    error: Optional[str] = Field(None, description="Error message if failed")
    item_count: int = Field(0, description="Number of items produced")


class AggregateResult(BaseModel):
    """Union of all feed results from one run."""

    items: List[FeedItem] = Field(default_factory=list, description="Collected items")
    failures: List[FeedResult] = Field(default_factory=list, description="Failed feeds")
    processed: int = Field(0, description="Sources processed so far")
    total: int = Field(0, description="Sources scheduled")

    @property
    def successful(self) -> int:
        return self.processed - len(self.failures)
