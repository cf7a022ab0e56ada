"""Fetch-merge-sort pipeline."""

from .aggregator import Aggregator

__all__ = ["Aggregator"]
