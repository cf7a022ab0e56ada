"""Configuration models."""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UndatedPolicy(str, Enum):
    """How entries without a usable publish time are dated."""

    NEWEST = "newest"
    OLDEST = "oldest"
    EXCLUDED = "excluded"


class FetchConfig(BaseModel):
    """Feed fetching parameters."""

    workers: int = Field(5, description="Concurrent feed fetches", ge=1, le=32)
    timeout: float = Field(30.0, description="Per-feed HTTP timeout in seconds", gt=0)
    user_agent: str = Field("newseum/1.0 (feed reader)", description="HTTP User-Agent header")


class LinkRewrite(BaseModel):
    """Rewrite item links of mirror feeds onto the canonical site."""

    pattern: str = Field(..., description="Substring identifying a mirror feed URL")
    canonical: str = Field(..., description="Canonical origin, e.g. https://x.com")

    @field_validator("canonical")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store the origin without a trailing slash."""
        return v.rstrip("/")


class PlayerConfig(BaseModel):
    """External media player."""

    command: str = Field("mpv", description="Media player executable")
    enabled: bool = Field(True, description="Use the media player for audio/video links")


class ConfigModel(BaseModel):
    """Main configuration model."""

    fetch: FetchConfig = Field(default_factory=FetchConfig)
    undated: UndatedPolicy = Field(
        UndatedPolicy.NEWEST,
        description="Dating policy for entries without a publish time",
    )
    rewrites: List[LinkRewrite] = Field(
        default_factory=lambda: [LinkRewrite(pattern="nitter.", canonical="https://x.com")],
        description="Mirror link rewrites",
    )
    player: PlayerConfig = Field(default_factory=PlayerConfig)


class SourceConfig(BaseModel):
    """One feed from feeds.csv."""

    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="Display name (may be empty)")
    url: str = Field(..., description="RSS/Atom feed URL")
