"""Sources management commands."""

from pathlib import Path
from typing import List, Optional

import httpx
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import Config, SourceConfig, save_sources
from ..ingestion import RSSFetcher

console = Console()
sources_app = typer.Typer(help="Manage feed sources")

ConfigDirOption = typer.Option(None, "--config-dir", "-c", help="Configuration directory")


def _read_sources(config: Config, missing_ok: bool = False) -> List[SourceConfig]:
    try:
        return config.load_sources()
    except FileNotFoundError as e:
        if missing_ok:
            return []
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(1)
    except ValueError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(1)


@sources_app.command("list")
def sources_list(config_dir: Optional[Path] = ConfigDirOption) -> None:
    """List all configured sources."""
    sources = _read_sources(Config(config_dir))

    if not sources:
        console.print("[yellow]No sources configured.[/yellow]")
        return

    table = Table(title="Configured Sources")
    table.add_column("Name", style="cyan")
    table.add_column("URL", style="blue")

    for source in sources:
        table.add_row(source.name or "[dim](feed title)[/dim]", source.url)

    console.print(table)


@sources_app.command("add")
def sources_add(
    url: str = typer.Option(..., "--url", "-u", help="RSS/Atom feed URL"),
    name: str = typer.Option("", "--name", "-n", help="Display name (default: the feed's title)"),
    config_dir: Optional[Path] = ConfigDirOption,
) -> None:
    """Add a new feed source."""
    config = Config(config_dir)
    sources = _read_sources(config, missing_ok=True)
    url, name = url.strip(), name.strip()

    if any(s.url == url or (name and s.name == name) for s in sources):
        console.print(f"[red]Source '{name or url}' already exists.[/red]")
        raise typer.Exit(1)

    sources.append(SourceConfig(name=name, url=url))
    save_sources(sources, config.sources_path)

    console.print(f"[green]✅ Added source: {name or url}[/green]")


@sources_app.command("remove")
def sources_remove(
    name: str = typer.Argument(..., help="Source name or URL to remove"),
    config_dir: Optional[Path] = ConfigDirOption,
) -> None:
    """Remove a source."""
    config = Config(config_dir)
    sources = _read_sources(config)

    original_count = len(sources)
    sources = [s for s in sources if name not in (s.name, s.url)]

    if len(sources) == original_count:
        console.print(f"[red]Source '{name}' not found.[/red]")
        raise typer.Exit(1)

    save_sources(sources, config.sources_path)
    console.print(f"[green]✅ Removed source: {name}[/green]")


@sources_app.command("test")
def sources_test(
    name: Optional[str] = typer.Argument(None, help="Source name or URL to test (or test all)"),
    config_dir: Optional[Path] = ConfigDirOption,
) -> None:
    """Test feed connectivity and parsing."""
    config = Config(config_dir)
    sources = _read_sources(config)

    if name:
        sources = [s for s in sources if name in (s.name, s.url)]
        if not sources:
            console.print(f"[red]Source '{name}' not found.[/red]")
            raise typer.Exit(1)

    try:
        settings = config.config
    except ValueError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(1)

    fetcher = RSSFetcher(
        user_agent=settings.fetch.user_agent,
        undated=settings.undated,
        rewrites=settings.rewrites,
    )

    failed = 0
    with httpx.Client(timeout=10.0, follow_redirects=True, headers={"User-Agent": fetcher.user_agent}) as client:
        for source in sources:
            label = source.name or source.url
            try:
                response = client.get(source.url)
                response.raise_for_status()
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                console.print(f"❌ {label}: Failed - {e}", style="red", markup=False)
                failed += 1
                continue

            result = fetcher.parse_feed(source, response.content)
            if not result.success:
                console.print(f"❌ {label}: {result.error}", style="red", markup=False)
                failed += 1
                continue
            console.print(
                f"[green]✅ {escape(label)}: OK ({response.status_code}, {result.item_count} items)[/green]"
            )

    if failed:
        raise typer.Exit(1)
