"""Labelled select box for traits chosen from a list."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Label, Select


class DropdownTrait(Widget):
    """A trait whose value is one of ``valid_values`` (or empty)."""

    DEFAULT_CSS = """
    DropdownTrait {
        height: 3;
        width: 1fr;
        layout: horizontal;
    }
    DropdownTrait > Label {
        width: 14;
        padding-top: 1;
    }
    DropdownTrait > Select {
        width: 1fr;
    }
    """

    class Changed(Message):
        def __init__(self, trait_id: int, value: str) -> None:
            self.trait_id = trait_id
            self.value = value
            super().__init__()

    def __init__(self, trait_id: int, name: str, valid_values: list[str], value: str = "") -> None:
        super().__init__()
        self.trait_id = trait_id
        self.trait_name = name
        self.valid_values = list(valid_values)
        self.value = value if value in self.valid_values else ""

    def compose(self) -> ComposeResult:
        yield Label(self.trait_name)
        yield Select(
            [(option, option) for option in self.valid_values],
            value=self.value or Select.BLANK,
            allow_blank=True,
            prompt=self.trait_name,
        )

    @on(Select.Changed)
    def commit(self, event: Select.Changed) -> None:
        event.stop()
        selected = "" if event.value is Select.BLANK else str(event.value)
        if selected == self.value:
            return
        self.value = selected
        self.post_message(self.Changed(self.trait_id, self.value))
