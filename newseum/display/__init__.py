"""Text and date presentation helpers."""

from .formatting import UNKNOWN_DATE, clean_string, format_date

__all__ = ["UNKNOWN_DATE", "clean_string", "format_date"]
