"""Interactive item browser."""

import logging
from typing import Optional

import pendulum
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from ..actions import ActionDispatcher, LaunchError, resolve
from .render import items_table, preview_panel
from .session import BrowserSession

logger = logging.getLogger(__name__)

HELP = (
    "[dim]j/k move  n/p page  g/G first/last  <number> select  "
    "/text search  / or esc clear  o or enter open  q quit[/dim]"
)


class Browser:
    """Render a session and route typed commands to it."""

    def __init__(
        self,
        session: BrowserSession,
        dispatcher: Optional[ActionDispatcher] = None,
        console: Optional[Console] = None,
    ) -> None:
        self.session = session
        self.dispatcher = dispatcher or ActionDispatcher()
        self.console = console or Console()
        self.message = ""

    def render(self) -> None:
        session = self.session
        now = pendulum.now("UTC")
        title = f"{len(session.view)} items"
        if session.query:
            title += f" matching /{session.query}"
        rows = ((i, session.view[i]) for i in session.page())

        self.console.clear()
        self.console.print(items_table(rows, now, selected=session.selected, title=title))
        self.console.print(preview_panel(session.selected_item, now))
        if self.message:
            self.console.print(self.message)
            self.message = ""
        self.console.print(HELP)

    def open_selected(self) -> None:
        item = self.session.selected_item
        if item is None:
            self.message = "[yellow]Nothing selected.[/yellow]"
            return
        action = resolve(item)
        try:
            self.dispatcher.dispatch(action)
        except LaunchError as e:
            logger.debug("Launch failed for %s: %s", action.target_url, e)
            self.message = f"[red]{escape(str(e))}[/red]"
            return
        self.message = f"[green]Opened ({action.mode.value}):[/green] {escape(action.target_url)}"

    def handle(self, command: str) -> bool:
        """Apply one command; returns False when the session should end."""
        session = self.session
        command = command.strip()

        if command == "q":
            return False
        if command in ("", "o"):
            self.open_selected()
        elif command in ("esc", "\x1b", "/"):
            session.clear_query()
        elif command.startswith("/"):
            session.set_query(command[1:])
        elif command == "j":
            session.move(1)
        elif command == "k":
            session.move(-1)
        elif command == "n":
            session.next_page()
        elif command == "p":
            session.prev_page()
        elif command == "g":
            session.first()
        elif command == "G":
            session.last()
        elif command.isdigit():
            if not session.select(int(command) - 1):
                self.message = f"[yellow]No item {escape(command)}.[/yellow]"
        else:
            self.message = f"[yellow]Unknown command: {escape(command)}[/yellow]"
        return True

    def run(self) -> None:
        """Loop until the user quits."""
        while True:
            self.render()
            try:
                command = Prompt.ask(">", console=self.console, default="", show_default=False)
            except (EOFError, KeyboardInterrupt):
                break
            if not self.handle(command):
                break
