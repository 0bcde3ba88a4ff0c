"""
Main application module for the terminal sheet client.

The SheetApp opens an API client, shows a waiting message while the sheet
is fetched, then switches to a :class:`SheetScreen`. If the fetch fails the
waiting message is replaced by the error.

Entry Point:
    The main() function serves as the CLI entry point, configured in
    pyproject.toml as the "vte-sheet-tui" console script.

Example:
    vte-sheet-tui --server http://localhost:8000 --character demo
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from vte_sheet.tui.api.client import APIError, SheetAPIClient
from vte_sheet.tui.config import Config
from vte_sheet.tui.screens.sheet import SheetScreen

WAITING_MESSAGE = "Waiting for character sheet..."


class SheetApp(App):
    """
    Terminal character sheet.

    Attributes:
        config: Client configuration (server URL, timeout, character).
        api_client: HTTP client for server communication. Created on mount.

    Key Bindings (App-level):
        ctrl+c, ctrl+q: Quit application
        r: Retry loading the sheet
    """

    TITLE = "VtE Sheet"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
        Binding("ctrl+q", "quit", "Quit", priority=True, show=False),
        Binding("r", "retry", "Retry"),
    ]

    CSS = """
    Screen {
        background: $surface;
    }

    #status {
        padding: 1 2;
    }

    #status.-error {
        color: $error;
    }
    """

    def __init__(self, config: Config) -> None:
        super().__init__()
        self.config = config
        self.api_client: SheetAPIClient | None = None

    def compose(self) -> ComposeResult:
        yield Static(WAITING_MESSAGE, id="status")

    async def on_mount(self) -> None:
        self.api_client = SheetAPIClient(self.config)
        await self.api_client.__aenter__()
        self.load_sheet()

    async def on_unmount(self) -> None:
        if self.api_client:
            await self.api_client.__aexit__(None, None, None)
            self.api_client = None

    @work(thread=False, exclusive=True, group="load")
    async def load_sheet(self) -> None:
        """Fetch the configured character's sheet and show it."""
        if not self.api_client:
            raise RuntimeError("API client not initialized")

        try:
            sheet = await self.api_client.get_sheet(
                self.config.character_id, columns=self.config.columns
            )
        except APIError as e:
            if isinstance(self.screen, SheetScreen):
                self.screen.notify(str(e), severity="error")
                return
            status = self.query_one("#status", Static)
            status.update(f"Could not load sheet: {e}")
            status.add_class("-error")
            return

        if isinstance(self.screen, SheetScreen):
            self.switch_screen(SheetScreen(sheet))
        else:
            self.push_screen(SheetScreen(sheet))

    def action_retry(self) -> None:
        if isinstance(self.screen, SheetScreen):
            self.load_sheet()
            return
        status = self.query_one("#status", Static)
        status.update(WAITING_MESSAGE)
        status.remove_class("-error")
        self.load_sheet()


def main(args: Sequence[str] | None = None) -> int:
    """
    Main entry point for the sheet client.

    Args:
        args: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        config = Config.from_args(args)
        app = SheetApp(config)
        app.run()
        return 0

    except KeyboardInterrupt:
        return 130

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
