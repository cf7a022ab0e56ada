"""Recency ordering and search filtering of feed items."""

from .ordering import sort_by_recency
from .search import filter_items

__all__ = ["filter_items", "sort_by_recency"]
