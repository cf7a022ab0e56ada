"""Decide what to open for a feed item and how."""

from enum import Enum
from typing import NamedTuple
from urllib.parse import urlparse

from ..ingestion.models import FeedItem

MEDIA_EXTENSIONS = (
    ".mp3",
    ".wav",
    ".m4a",
    ".ogg",
    ".opus",
    ".flac",
    ".aac",
    ".mp4",
    ".m4v",
    ".mkv",
    ".webm",
    ".mov",
)

VIDEO_HOSTS = ("youtube.com", "youtu.be", "vimeo.com")


class LaunchMode(str, Enum):
    """How a resolved URL should be opened."""

    MEDIA = "media"
    GENERIC = "generic"


class ResolvedAction(NamedTuple):
    """Target URL, launch mode and display label for one item."""

    target_url: str
    mode: LaunchMode
    label: str


def _is_video_host(host: str) -> bool:
    return any(host == known or host.endswith("." + known) for known in VIDEO_HOSTS)


def classify_url(url: str) -> LaunchMode:
    """MEDIA for audio/video files and video-hosting sites, GENERIC otherwise."""
    url = url.strip()
    parsed = urlparse(url)
    if not parsed.scheme and not parsed.netloc:
        # "youtube.com/watch?v=..." has no scheme, so its host lands in the path
        parsed = urlparse("//" + url)
    if parsed.path.lower().endswith(MEDIA_EXTENSIONS):
        return LaunchMode.MEDIA
    if _is_video_host((parsed.hostname or "").lower()):
        return LaunchMode.MEDIA
    return LaunchMode.GENERIC


def resolve(item: FeedItem) -> ResolvedAction:
    """Prefer the item's audio enclosure, else its link."""
    target = item.media_url or item.link
    return ResolvedAction(target_url=target, mode=classify_url(target), label=item.title)
