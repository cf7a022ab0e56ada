"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .browse import browse_command, list_command
from .init import init_command
from .sources import sources_app

app = typer.Typer(
    name="newseum",
    help="newseum - Read all your feeds in one place",
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Browse all feeds when no command is given."""
    if ctx.invoked_subcommand is None:
        browse_command(query=None, config_dir=None, verbose=False, log_file=None)


# Register commands
app.command("browse")(browse_command)
app.command("list")(list_command)
app.command("init")(init_command)
app.add_typer(sources_app, name="sources", help="Manage feed sources")


if __name__ == "__main__":
    app()
