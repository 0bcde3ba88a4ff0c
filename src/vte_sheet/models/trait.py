"""
Trait definitions and per-character trait instances.

:class:`TraitInfo` describes a trait in general (Strength, Clan, Allies...)
as it appears in the catalog. :class:`Trait` is one character's instance of
that definition and carries the character's value for it.

Bounds and dropdown options may depend on character variables, so a Trait
resolves them through its owning character on every read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cached_property
from typing import TYPE_CHECKING, Any

from vte_sheet.models.constants import TraitCategory, TraitSubCategory, TraitType
from vte_sheet.models.trait_data import TraitData, parse_trait_data

if TYPE_CHECKING:
    from vte_sheet.models.character import Character

logger = logging.getLogger(__name__)

# Trait types whose value is an integer.
INTEGER_TYPES: frozenset[TraitType] = frozenset({TraitType.INTEGER, TraitType.PATH})

# Trait types whose value is chosen from a list of options.
DROPDOWN_TYPES: frozenset[TraitType] = frozenset(
    {TraitType.DROPDOWN, TraitType.DERIVED_DROPDOWN}
)


def try_get_int(value: Any) -> int | None:
    """Return ``value`` as an int if it is one or parses as one, else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class TraitInfo:
    """
    Catalog definition of a trait.

    Attributes:
        unique_id: Catalog id; unique per definition.
        name: Display name. Not unique (a Background and its derived top
            trait may share a name).
        type: Value and rendering behaviour.
        category: Sheet section.
        subcategory: Placement within the section.
        data: Raw keyword-encoded data field.
    """

    unique_id: int
    name: str
    type: TraitType
    category: TraitCategory
    subcategory: TraitSubCategory = TraitSubCategory.NONE
    data: str = ""

    @cached_property
    def parsed(self) -> TraitData:
        return parse_trait_data(self.data)

    @property
    def is_integer(self) -> bool:
        """True for traits whose value is a bounded integer."""
        if self.type in INTEGER_TYPES:
            return True
        return self.type == TraitType.DERIVED and self.parsed.has_bounds

    @property
    def is_computed(self) -> bool:
        """True when the value is derived from subtraits and cannot be assigned."""
        return self.parsed.main_trait_max or self.parsed.main_trait_count

    def to_dict(self) -> dict[str, Any]:
        return {
            "trait_id": self.unique_id,
            "name": self.name,
            "type": self.type.name.lower(),
            "category": self.category.name.lower(),
            "subcategory": self.subcategory.name.lower(),
            "data": self.data,
        }


@dataclass(eq=False)
class Trait:
    """One character's instance of a :class:`TraitInfo`."""

    info: TraitInfo
    character: Character = field(repr=False)
    _value: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self._value is None:
            self._value = self.min_value if self.info.is_integer else ""

    @property
    def unique_id(self) -> int:
        return self.info.unique_id

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def category(self) -> TraitCategory:
        return self.info.category

    @property
    def subcategory(self) -> TraitSubCategory:
        return self.info.subcategory

    def _resolve_bound(self, raw: str) -> int:
        resolved = try_get_int(self.character.get_variable(raw))
        return resolved if resolved is not None else 0

    @property
    def min_value(self) -> int:
        return self._resolve_bound(self.info.parsed.min_value)

    @property
    def max_value(self) -> int:
        return self._resolve_bound(self.info.parsed.max_value)

    @property
    def value(self) -> Any:
        parsed = self.info.parsed
        if parsed.main_trait_max:
            return self.character.get_max_sub_trait(self.name)
        if parsed.main_trait_count:
            return self.character.count_sub_traits(self.name)
        return self._value

    @property
    def options(self) -> list[str]:
        """Dropdown options with derived options substituted."""
        parsed = self.info.parsed
        resolved: list[str] = []
        for option in parsed.possible_values:
            variable = parsed.derived_options_lookup.get(option)
            if variable is not None:
                current = self.character.get_variable(variable)
                option = parsed.derived_options_switch[option].get(str(current), option)
            resolved.append(option)
        return resolved

    @property
    def is_empty(self) -> bool:
        value = self.value
        return value in ("", None) or value == 0

    def try_assign(self, new_value: Any) -> bool:
        """
        Attempt to set the value.

        Integer traits accept only integers inside the resolved bounds;
        dropdown traits accept an empty string or one of their options;
        computed traits accept nothing.

        Returns:
            True if the value was stored.
        """
        if self.info.is_computed:
            return False

        if self.info.is_integer:
            val = try_get_int(new_value)
            if val is None or not self.min_value <= val <= self.max_value:
                logger.debug("Rejected %r for %s", new_value, self.name)
                return False
            self._value = val
            return True

        if new_value is None:
            return False
        text = str(new_value)
        if self.info.type in DROPDOWN_TYPES and text and text not in self.options:
            logger.debug("Rejected option %r for %s", text, self.name)
            return False
        self._value = text
        return True

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "trait_id": self.unique_id,
            "name": self.name,
            "type": self.info.type.name.lower(),
            "category": self.category.name.lower(),
            "subcategory": self.subcategory.name.lower(),
            "value": self.value,
        }
        if self.info.is_integer:
            payload["min_value"] = self.min_value
            payload["max_value"] = self.max_value
        if self.info.type in DROPDOWN_TYPES:
            payload["options"] = self.options
        return payload
