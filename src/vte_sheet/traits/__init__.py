"""Trait widget state and widget descriptions."""

from vte_sheet.traits.dot_trait import DotGlyph, DotTraitState
from vte_sheet.traits.widgets import (
    DropdownWidget,
    FreeTextWidget,
    IntegerWidget,
    TraitWidget,
)

__all__ = [
    "DotGlyph",
    "DotTraitState",
    "DropdownWidget",
    "FreeTextWidget",
    "IntegerWidget",
    "TraitWidget",
]
