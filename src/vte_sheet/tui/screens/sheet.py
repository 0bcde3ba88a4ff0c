"""
Sheet screen for the terminal client.

Renders a :class:`~vte_sheet.sheet.CharacterSheet` as one titled
:class:`AutoGrid` per section and pushes every value change back to the
server. When the server rejects a value the screen reloads the sheet so the
widgets show what the server actually holds.
"""

from __future__ import annotations

from typing import Any

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from vte_sheet.sheet.models import CharacterSheet
from vte_sheet.tui.api.client import APIError
from vte_sheet.tui.widgets.auto_grid import AutoGrid
from vte_sheet.tui.widgets.dot_trait import DotTrait
from vte_sheet.tui.widgets.dropdown import DropdownTrait
from vte_sheet.tui.widgets.free_text import FreeTextTrait


class SheetScreen(Screen):
    """
    A character sheet.

    Key Bindings:
        r: Reload the sheet from the server
        q: Quit application
    """

    BINDINGS = [
        Binding("r", "reload", "Reload", priority=True),
        Binding("q", "quit", "Quit", priority=True),
    ]

    CSS = """
    .sheet-container {
        padding: 0 1;
    }

    .section-title {
        text-style: bold;
        color: $accent;
        margin-top: 1;
        border-bottom: solid $primary-darken-2;
    }
    """

    def __init__(self, sheet: CharacterSheet) -> None:
        super().__init__()
        self.sheet = sheet

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(classes="sheet-container"):
            for section in self.sheet.sections:
                yield Static(section.title, classes="section-title")
                yield AutoGrid(section.widgets)
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = f"{self.sheet.character_id} ({', '.join(self.sheet.templates)})"

    # -------------------------------------------------------------------------
    # Value changes
    # -------------------------------------------------------------------------

    def on_dot_trait_changed(self, message: DotTrait.Changed) -> None:
        self.save_trait(message.trait_id, message.value)

    def on_free_text_trait_changed(self, message: FreeTextTrait.Changed) -> None:
        self.save_trait(message.trait_id, message.value)

    def on_dropdown_trait_changed(self, message: DropdownTrait.Changed) -> None:
        self.save_trait(message.trait_id, message.value)

    @work(thread=False, group="save")
    async def save_trait(self, trait_id: int, value: Any) -> None:
        """Push one value to the server; reload on rejection."""
        api_client = self.app.api_client
        try:
            await api_client.assign_trait(self.sheet.character_id, trait_id, value)
        except APIError as e:
            self.notify(str(e), severity="error")
            if e.status_code == 422:
                self.action_reload()

    # -------------------------------------------------------------------------
    # Actions (Bound to Keys)
    # -------------------------------------------------------------------------

    def action_reload(self) -> None:
        """Reload the sheet from the server (key: r)."""
        self.app.load_sheet()

    def action_quit(self) -> None:
        self.app.exit()
