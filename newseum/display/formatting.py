"""Presentation helpers for item text and dates."""

import re
from datetime import datetime, timedelta
from typing import Optional, Union

import pendulum
from pendulum.tz.timezone import Timezone

UNKNOWN_DATE = "Unknown date"

_WHITESPACE = re.compile(r"\s+")


def clean_string(text: str) -> str:
    """Single-line text safe to embed in rich markup."""
    cleaned = _WHITESPACE.sub(" ", text or "")
    cleaned = cleaned.replace("[", "(").replace("]", ")")
    return cleaned.strip()


def _is_unknown(value: Optional[datetime]) -> bool:
    return value is None or value.year <= 1


def format_date(
    published_at: Optional[datetime],
    now: datetime,
    tz: Optional[Union[str, Timezone]] = None,
) -> str:
    """
    Human relative date for an item, in local time.

    Args:
        published_at: Item timestamp (naive values are taken as UTC)
        now: Reference instant
        tz: Display timezone, defaults to the local one

    Returns:
        "Today at 9:00 AM", "Yesterday at 9:00 AM", "Wednesday at 9:00 AM"
        within a week, "January 1, 2023" beyond that, or "Unknown date"
    """
    if _is_unknown(published_at):
        return UNKNOWN_DATE

    if tz is None:
        tz = pendulum.local_timezone()
    local_date = pendulum.instance(published_at).in_timezone(tz)
    local_now = pendulum.instance(now).in_timezone(tz)

    age = timedelta(seconds=local_now.timestamp() - local_date.timestamp())
    clock = local_date.format("h:mm A")

    if age < timedelta(days=1) and local_date.date() == local_now.date():
        return f"Today at {clock}"
    if age < timedelta(days=2) and local_date.date() == local_now.date() - timedelta(days=1):
        return f"Yesterday at {clock}"
    if age < timedelta(days=7):
        return f"{local_date.format('dddd')} at {clock}"
    return local_date.format("MMMM D, YYYY")
