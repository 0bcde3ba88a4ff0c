"""Map widget descriptions from the server onto Textual widgets."""

from __future__ import annotations

import logging
from typing import Any

from textual.widget import Widget
from textual.widgets import Static

from vte_sheet.traits.dot_trait import DotTraitState
from vte_sheet.tui.widgets.dot_trait import DotTrait
from vte_sheet.tui.widgets.dropdown import DropdownTrait
from vte_sheet.tui.widgets.free_text import FreeTextTrait

logger = logging.getLogger(__name__)


class EmptyCell(Static):
    """Placeholder for grid cells with nothing to show."""

    DEFAULT_CSS = """
    EmptyCell {
        width: 1fr;
        height: 1;
    }
    """

    def __init__(self) -> None:
        super().__init__("")


def create_grid_element(widget: Any) -> Widget:
    """
    Build the Textual widget for one positioned widget description.

    Dispatches on ``kind``. Unknown kinds render as an :class:`EmptyCell`.
    """
    kind = getattr(widget, "kind", None)
    if kind == "integer":
        state = DotTraitState(widget.min_value, widget.max_value, widget.value)
        return DotTrait(widget.trait_id, widget.name, state)
    if kind == "dropdown":
        return DropdownTrait(widget.trait_id, widget.name, widget.valid_values, widget.value)
    if kind == "free_text":
        return FreeTextTrait(widget.trait_id, widget.name, widget.value)

    logger.warning("No grid element for widget kind %r", kind)
    return EmptyCell()
