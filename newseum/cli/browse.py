"""Browse and list commands."""

from pathlib import Path
from typing import List, Optional, Tuple

import pendulum
import typer
from rich.console import Console

from ..actions import ActionDispatcher, GenericLauncher, MediaLauncher
from ..config import Config, ConfigModel, SourceConfig
from ..ingestion import AggregateResult, print_feed_summary
from ..logging_config import setup_logging
from ..pipeline import Aggregator
from ..ranking import filter_items
from ..ui import Browser, BrowserSession
from ..ui.render import items_table

console = Console()


def _load(config: Config) -> Tuple[ConfigModel, List[SourceConfig]]:
    """Load settings and sources, exiting on configuration errors."""
    try:
        return config.config, config.load_sources()
    except (FileNotFoundError, ValueError) as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(1)


def _aggregate(settings: ConfigModel, sources: List[SourceConfig]) -> AggregateResult:
    result = Aggregator(settings, console=console).collect(sources)
    if result.failures:
        console.print(
            f"[yellow]{len(result.failures)} of {result.total} feeds failed to load.[/yellow]"
        )
    return result


def browse_command(
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Initial search query"),
    config_dir: Optional[Path] = typer.Option(None, "--config-dir", "-c", help="Configuration directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Fetch all feeds and browse them interactively."""
    setup_logging(verbose=verbose, log_file=log_file, console=console)
    config = Config(config_dir)
    settings, sources = _load(config)

    if not sources:
        console.print("[yellow]No feeds configured. Add one with 'newseum sources add'.[/yellow]")
        return

    result = _aggregate(settings, sources)
    if not result.items:
        console.print("[yellow]No items found in any feed.[/yellow]")
        return

    session = BrowserSession(result.items, page_size=max(5, console.height - 16))
    if query:
        session.set_query(query)

    player = settings.player
    dispatcher = ActionDispatcher(
        media=MediaLauncher(command=player.command, enabled=player.enabled),
        generic=GenericLauncher(),
    )
    Browser(session, dispatcher=dispatcher, console=console).run()


def list_command(
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Only show items matching this text"),
    limit: int = typer.Option(50, "--limit", "-n", help="Maximum items to show (0 for all)", min=0),
    config_dir: Optional[Path] = typer.Option(None, "--config-dir", "-c", help="Configuration directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Fetch all feeds and print the most recent items."""
    setup_logging(verbose=verbose, console=console)
    config = Config(config_dir)
    settings, sources = _load(config)

    if not sources:
        console.print("[yellow]No feeds configured. Add one with 'newseum sources add'.[/yellow]")
        return

    result = _aggregate(settings, sources)
    items = filter_items(query or "", result.items)
    if limit:
        items = items[:limit]

    console.print(items_table(enumerate(items), pendulum.now("UTC"), title="Latest items"))
    print_feed_summary(result)
