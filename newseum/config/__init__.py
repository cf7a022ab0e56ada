"""Configuration management for newseum."""

from .loader import (
    Config,
    default_config_dir,
    load_config,
    load_sources,
    save_config,
    save_sources,
)
from .models import (
    ConfigModel,
    FetchConfig,
    LinkRewrite,
    PlayerConfig,
    SourceConfig,
    UndatedPolicy,
)

__all__ = [
    "Config",
    "ConfigModel",
    "FetchConfig",
    "LinkRewrite",
    "PlayerConfig",
    "SourceConfig",
    "UndatedPolicy",
    "default_config_dir",
    "load_config",
    "load_sources",
    "save_config",
    "save_sources",
]
