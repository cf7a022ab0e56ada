"""Init command implementation."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, SourceConfig, default_config_dir, save_config, save_sources
from ..config.loader import CONFIG_FILENAME, SOURCES_FILENAME

console = Console()


def create_default_sources() -> List[SourceConfig]:
    """A few well-known feeds to start from."""
    return [
        SourceConfig(name="Hacker News", url="https://news.ycombinator.com/rss"),
        SourceConfig(name="BBC News", url="https://feeds.bbci.co.uk/news/rss.xml"),
        SourceConfig(name="The Verge", url="https://www.theverge.com/rss/index.xml"),
        SourceConfig(name="", url="https://xkcd.com/atom.xml"),
    ]


def init_command(
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Configuration directory (default: $XDG_CONFIG_HOME/newseum)",
    ),
    seed_sources: bool = typer.Option(
        True,
        "--seed-sources/--no-seed-sources",
        help="Seed the feed list with a few example feeds",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing files"),
) -> None:
    """Create the feed list and settings file."""
    console.print(Panel.fit("newseum - Initialization", style="bold blue"))

    if config_dir is None:
        config_dir = default_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / CONFIG_FILENAME
    sources_path = config_dir / SOURCES_FILENAME

    if config_path.exists() and not force:
        console.print(f"[yellow]Keeping existing config: {config_path}[/yellow]")
    else:
        save_config(ConfigModel(), config_path)
        console.print(f"✅ Created config: {config_path}")

    if sources_path.exists() and not force:
        console.print(f"[yellow]Keeping existing sources: {sources_path}[/yellow]")
    else:
        sources = create_default_sources() if seed_sources else []
        save_sources(sources, sources_path)
        console.print(f"✅ Created sources: {sources_path} ({len(sources)} feeds)")

    console.print(
        Panel(
            f"[green]✅ newseum initialized![/green]\n\n"
            f"Feeds: {sources_path}\n"
            f"Settings: {config_path}\n\n"
            f"Next steps:\n"
            f"1. Add feeds: [bold]newseum sources add --name NAME --url URL[/bold]\n"
            f"2. Browse: [bold]newseum[/bold]",
            style="green",
        )
    )
