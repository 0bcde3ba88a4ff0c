"""Labelled text input for free-text traits."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Label


class FreeTextTrait(Widget):
    """A trait whose value is arbitrary text, committed on Enter."""

    DEFAULT_CSS = """
    FreeTextTrait {
        height: 3;
        width: 1fr;
        layout: horizontal;
    }
    FreeTextTrait > Label {
        width: 14;
        padding-top: 1;
    }
    FreeTextTrait > Input {
        width: 1fr;
    }
    """

    class Changed(Message):
        def __init__(self, trait_id: int, value: str) -> None:
            self.trait_id = trait_id
            self.value = value
            super().__init__()

    def __init__(self, trait_id: int, name: str, value: str = "") -> None:
        super().__init__()
        self.trait_id = trait_id
        self.trait_name = name
        self.value = value

    def compose(self) -> ComposeResult:
        yield Label(self.trait_name)
        yield Input(value=self.value, placeholder=self.trait_name)

    @on(Input.Submitted)
    def commit(self, event: Input.Submitted) -> None:
        event.stop()
        if event.value == self.value:
            return
        self.value = event.value
        self.post_message(self.Changed(self.trait_id, self.value))
