"""
Enumerations and keywords shared by the catalog and the character model.

The integer values match the ids stored in the catalog file, so they must not
be renumbered.
"""

from __future__ import annotations

from enum import IntEnum


class TemplateKey(IntEnum):
    """Character templates that decide which traits a character has."""

    MORTAL = 0
    KINDRED = 1
    KALEBITE = 2
    FAE = 3
    MAGE = 4


class TraitType(IntEnum):
    """Controls validation and how a trait is rendered."""

    FREE_TEXT = 0
    DROPDOWN = 1
    INTEGER = 2
    PATH = 3
    MERIT_FLAW = 4
    WEAPON = 5
    DERIVED = 6
    DERIVED_DROPDOWN = 7
    SELECTABLE = 8


class TraitCategory(IntEnum):
    """Where on the sheet a trait appears."""

    TOP_TEXT = 0
    ATTRIBUTE = 1
    SKILL = 2
    PROGRESSION = 3
    POWER = 4
    SPECIFIC_POWER = 5
    BACKGROUND = 6
    VITAL_STATISTIC = 7
    MERIT_FLAW = 8
    PATH = 9
    WEAPON = 10
    PHYSICAL_DESCRIPTION_BIT = 11
    HIDDEN = 12


class TraitSubCategory(IntEnum):
    """Finer placement within a category (physical/social/mental, power family...)."""

    NONE = -1
    PHYSICAL = 0
    SOCIAL = 1
    MENTAL = 2
    FAITH = 3
    DISCIPLINE = 4
    LORE = 5
    TAPESTRY = 6
    KNIT = 7
    ARCANUM = 8
    NATURAL_WEAPON = 9
    SELECTABLE_WEAPON = 10


class Keywords:
    """Keywords recognised in a trait's data field.

    Each data line is ``KEYWORD|arg|arg...``; lines are separated by newlines.
    """

    MIN_MAX = "MINMAX"
    AUTO_HIDE = "AUTOHIDE"
    POSSIBLE_VALUES = "VALUES"
    IS_VAR = "IS_VARIABLE"
    DERIVED_OPTION = "DERIVED_OPTION"
    MAIN_TRAIT_MAX = "MAINTRAIT_MAX"
    MAIN_TRAIT_COUNT = "MAINTRAIT_COUNT"
    SUB_TRAIT = "SUBTRAIT"
    POWER_LEVEL = "POWER_LEVEL"


def parse_enum(enum_cls: type[IntEnum], raw: object) -> IntEnum:
    """Resolve an enum member from its name (any case) or integer value.

    Raises:
        ValueError: If ``raw`` matches no member.
    """
    if isinstance(raw, str):
        key = raw.strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return enum_cls[key]
        except KeyError:
            pass
        if key.lstrip("-").isdigit():
            return enum_cls(int(key))
        raise ValueError(f"{raw!r} is not a valid {enum_cls.__name__}")
    return enum_cls(raw)
