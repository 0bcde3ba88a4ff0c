"""Plain-text rendering of character sheets for the command line."""

from __future__ import annotations

from vte_sheet.layout.grid import cells
from vte_sheet.sheet.models import CharacterSheet, SheetSection
from vte_sheet.traits.dot_trait import DotTraitState
from vte_sheet.traits.widgets import IntegerWidget, TraitWidget

CELL_WIDTH = 26


def truncate(text: str, max_length: int) -> str:
    """Truncate text to a maximum length."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def format_widget(widget: TraitWidget) -> str:
    """One-line text form of a widget: dots for integers, the value otherwise."""
    if isinstance(widget, IntegerWidget):
        state = DotTraitState(widget.min_value, widget.max_value, widget.value)
        dots = "".join(dot.glyph for dot in state.render_dots())
        return f"{widget.name} {dots}"
    return f"{widget.name}: {widget.value or '-'}"


def format_section(section: SheetSection, width: int = CELL_WIDTH) -> list[str]:
    """Render one section as its title followed by one line per grid row."""
    lines = [section.title, "-" * len(section.title)]
    grid = cells(section.widgets)
    if not grid:
        return lines
    rows = sorted({row for row, _ in grid})
    last_column = max(column for _, column in grid)
    for row in rows:
        parts = []
        for column in range(1, last_column + 1):
            widget = grid.get((row, column))
            text = format_widget(widget) if widget is not None else ""
            parts.append(truncate(text, width).ljust(width))
        lines.append(" ".join(parts).rstrip())
    return lines


def format_sheet(sheet: CharacterSheet, width: int = CELL_WIDTH) -> str:
    """Render every section of ``sheet``, separated by blank lines."""
    header = f"Character {sheet.character_id} ({', '.join(sheet.templates)})"
    blocks = [header]
    for section in sheet.sections:
        blocks.append("\n".join(format_section(section, width)))
    return "\n\n".join(blocks) + "\n"
