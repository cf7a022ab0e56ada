"""Configuration loader."""

import csv
import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from .models import ConfigModel, SourceConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"
SOURCES_FILENAME = "feeds.csv"


def default_config_dir() -> Path:
    """Resolve the configuration directory from the environment."""
    override = os.environ.get("NEWSEUM_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser() / "newseum"
    return Path.home() / ".config" / "newseum"


class Config:
    """Configuration manager."""

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_dir is None:
            config_dir = default_config_dir()
        self.config_dir = config_dir
        self._config: Optional[ConfigModel] = None

    @property
    def config_path(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    @property
    def sources_path(self) -> Path:
        return self.config_dir / SOURCES_FILENAME

    @property
    def config(self) -> ConfigModel:
        """Get loaded config."""
        if self._config is None:
            self._config = load_config(self.config_path)
        return self._config

    def load_sources(self) -> List[SourceConfig]:
        """Load the configured feed sources."""
        return load_sources(self.sources_path)


def load_config(config_path: Path) -> ConfigModel:
    """Load settings from YAML; a missing file means defaults."""
    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return ConfigModel()

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file {config_path}: {e}")
    except (TypeError, ValidationError) as e:
        raise ValueError(f"Invalid configuration in {config_path}: {e}")


def load_sources(sources_path: Path) -> List[SourceConfig]:
    """Load sources from a two-column CSV file (name, url)."""
    try:
        with open(sources_path, newline="", encoding="utf-8") as f:
            rows = list(enumerate(csv.reader(f), start=1))
    except FileNotFoundError:
        raise FileNotFoundError(
            f"Sources file not found: {sources_path}\n"
            "Please create the file and fill it with a CSV list of feed names and URLs "
            "(or run 'newseum init')."
        )
    except OSError as e:
        raise FileNotFoundError(f"Unable to read sources file {sources_path}: {e}")
    except csv.Error as e:
        raise ValueError(f"Error reading CSV {sources_path}: {e}")

    sources = []
    for line_no, record in rows:
        if not record:
            continue
        if len(record) != 2:
            raise ValueError(
                f"Error reading CSV {sources_path}: line {line_no} has "
                f"{len(record)} fields, expected 2 (name, url)"
            )
        sources.append(SourceConfig(name=record[0].strip(), url=record[1].strip()))

    logger.debug("Loaded %d sources from %s", len(sources), sources_path)
    return sources


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)


def save_sources(sources: List[SourceConfig], sources_path: Path) -> None:
    """Save sources to the CSV file."""
    sources_path.parent.mkdir(parents=True, exist_ok=True)

    with open(sources_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        for source in sources:
            writer.writerow([source.name, source.url])
