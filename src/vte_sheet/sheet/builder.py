"""
Build a :class:`CharacterSheet` from a :class:`Character`.

Each sheet section collects the character's traits in one category, turns
them into widget descriptions and runs them through the grid allocator.
Sections are stacked vertically: each one starts where the previous
section's ``rows_consumed`` left off.

Traits marked ``AUTOHIDE`` are left off the sheet while their value is empty
or zero, and hidden-category traits (character-wide maxima) never render.
"""

from __future__ import annotations

import logging

from vte_sheet.layout.grid import allocate
from vte_sheet.models.character import Character
from vte_sheet.models.constants import TraitCategory
from vte_sheet.models.trait import DROPDOWN_TYPES, Trait, try_get_int
from vte_sheet.sheet.models import CharacterSheet, SheetSection
from vte_sheet.traits.widgets import (
    DropdownWidget,
    FreeTextWidget,
    IntegerWidget,
    TraitWidget,
)

logger = logging.getLogger(__name__)

DEFAULT_COLUMN_COUNT = 3

# Section title and category, in display order.
SECTIONS: tuple[tuple[str, TraitCategory], ...] = (
    ("Top", TraitCategory.TOP_TEXT),
    ("Attributes", TraitCategory.ATTRIBUTE),
    ("Skills", TraitCategory.SKILL),
    ("Progression", TraitCategory.PROGRESSION),
    ("Powers", TraitCategory.POWER),
    ("Backgrounds", TraitCategory.BACKGROUND),
    ("Path", TraitCategory.PATH),
    ("Vital Statistics", TraitCategory.VITAL_STATISTIC),
)


def trait_widget(trait: Trait) -> TraitWidget:
    """Describe ``trait`` as the widget kind matching its type."""
    if trait.info.is_integer:
        low, high = trait.min_value, max(trait.min_value, trait.max_value)
        # A lowered max variable can leave a stored value above the new bound.
        value = try_get_int(trait.value)
        return IntegerWidget(
            trait_id=trait.unique_id,
            name=trait.name,
            min_value=low,
            max_value=high,
            value=None if value is None else max(low, min(high, value)),
        )
    if trait.info.type in DROPDOWN_TYPES:
        return DropdownWidget(
            trait_id=trait.unique_id,
            name=trait.name,
            valid_values=trait.options,
            value=str(trait.value or ""),
        )
    return FreeTextWidget(
        trait_id=trait.unique_id,
        name=trait.name,
        value="" if trait.value is None else str(trait.value),
    )


def _visible(trait: Trait) -> bool:
    return not (trait.info.parsed.auto_hide and trait.is_empty)


def build_sheet(
    character: Character, column_count: int = DEFAULT_COLUMN_COUNT, starting_row: int = 1
) -> CharacterSheet:
    """
    Lay out ``character`` as stacked, allocated sections.

    Raises:
        InvalidArgument: If ``column_count`` is below one.
    """
    sections: list[SheetSection] = []
    row = starting_row

    for title, category in SECTIONS:
        widgets = [trait_widget(t) for t in character.traits_in(category) if _visible(t)]
        if not widgets:
            continue
        allocation = allocate(widgets, column_count, starting_row=row)
        sections.append(
            SheetSection(
                title=title,
                starting_row=row,
                rows_consumed=allocation.rows_consumed,
                widgets=allocation.items,
            )
        )
        row += allocation.rows_consumed

    # Still validate the column count when every section is empty.
    if not sections:
        allocate([], column_count)

    logger.debug(
        "Built sheet for %s: %d sections, %d rows",
        character.unique_id,
        len(sections),
        row - starting_row,
    )
    return CharacterSheet(
        character_id=character.unique_id,
        templates=[key.name.lower() for key in sorted(character.template_keys)],
        column_count=column_count,
        sections=sections,
    )
