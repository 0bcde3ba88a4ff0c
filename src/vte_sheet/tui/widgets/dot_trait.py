"""
Dot-row widget for bounded integer traits.

A :class:`DotTrait` owns one :class:`~vte_sheet.traits.DotTraitState` and
renders one :class:`Dot` per glyph. Clicking a dot posts
:class:`Dot.Clicked`; the trait reinterprets the click through the state
controller and repaints every dot from the committed value. ``+`` and ``-``
step the value while the trait has focus.
"""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Label, Static

from vte_sheet.traits.dot_trait import DECREMENT_KEY, INCREMENT_KEY, DotGlyph, DotTraitState

# Key names Textual reports for the step keys.
_STEP_KEYS = {"plus": INCREMENT_KEY, "minus": DECREMENT_KEY}


class Dot(Static):
    """A single clickable dot."""

    DEFAULT_CSS = """
    Dot {
        width: 2;
        color: $text-muted;
    }
    Dot.-filled {
        color: $accent;
    }
    Dot.-locked {
        text-style: bold;
    }
    """

    class Clicked(Message):
        """Posted when a dot is clicked."""

        def __init__(self, index: int) -> None:
            self.index = index
            super().__init__()

    def __init__(self, glyph: DotGlyph) -> None:
        super().__init__(glyph.glyph)
        self.index = glyph.index
        self.filled = glyph.filled
        self.locked = glyph.locked
        self._apply_classes()

    def show(self, glyph: DotGlyph) -> None:
        """Repaint from a freshly rendered glyph."""
        self.filled = glyph.filled
        self.locked = glyph.locked
        self.update(glyph.glyph)
        self._apply_classes()

    def _apply_classes(self) -> None:
        self.set_class(self.filled, "-filled")
        self.set_class(self.locked, "-locked")

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Clicked(self.index))


class DotTrait(Widget, can_focus=True):
    """
    Named integer trait shown as a row of dots.

    Args:
        trait_id: Id of the trait the value belongs to.
        name: Label shown before the dots.
        state: Controller holding the bounds and current value.
    """

    DEFAULT_CSS = """
    DotTrait {
        height: 1;
        width: 1fr;
        layout: horizontal;
    }
    DotTrait:focus {
        background: $boost;
    }
    DotTrait > Label {
        width: 1fr;
    }
    DotTrait > Horizontal {
        width: auto;
        height: 1;
    }
    """

    class Changed(Message):
        """Posted after a click or key press changes the value."""

        def __init__(self, trait_id: int, value: int) -> None:
            self.trait_id = trait_id
            self.value = value
            super().__init__()

    def __init__(self, trait_id: int, name: str, state: DotTraitState) -> None:
        super().__init__()
        self.trait_id = trait_id
        self.trait_name = name
        self.state = state

    @property
    def value(self) -> int:
        return self.state.value

    def compose(self) -> ComposeResult:
        yield Label(self.trait_name)
        with Horizontal():
            for glyph in self.state.render_dots():
                yield Dot(glyph)

    def refresh_dots(self) -> None:
        for dot, glyph in zip(self.query(Dot), self.state.render_dots(), strict=True):
            dot.show(glyph)

    def _commit(self, previous: int) -> None:
        self.refresh_dots()
        if self.state.value != previous:
            self.post_message(self.Changed(self.trait_id, self.state.value))

    def on_dot_clicked(self, message: Dot.Clicked) -> None:
        message.stop()
        previous = self.state.value
        # Fill state is read from the value now, not when the click was posted.
        self.state.click_dot(message.index)
        self._commit(previous)

    def on_key(self, event: events.Key) -> None:
        key = _STEP_KEYS.get(event.key, event.character or "")
        previous = self.state.value
        if self.state.key_press(key):
            event.stop()
            self._commit(previous)
