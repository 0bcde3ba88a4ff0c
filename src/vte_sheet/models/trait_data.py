"""
Parser for the keyword-encoded trait data field.

A trait's data is a newline-separated list of directives, each of the form
``KEYWORD|arg|arg...``. For example, an attribute is defined as::

    MINMAX|1|TRAITMAX

and the Breed dropdown of a Kalebite as::

    DERIVED_OPTION|[animal]|BROOD|Kalebite|Lycanth|Aragite|Arachnes
    VALUES|Anthrope|Yvrid|[animal]

Bounds may be integer literals or the names of character variables
(``TRAITMAX``, ``BACKGROUNDMAX``...), so they are kept as strings and
resolved against a character later.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from vte_sheet.models.constants import Keywords


@dataclass
class TraitData:
    """Parsed form of a trait data field.

    Attributes:
        min_value: Minimum value, as an integer literal or variable name.
        max_value: Maximum value, as an integer literal or variable name.
        possible_values: Options for dropdown-style traits.
        auto_hide: Hide the trait on the sheet while its value is empty/zero.
        is_var: Name of the character variable this trait provides.
        derived_options_lookup: Dummy option name -> variable it depends on.
        derived_options_switch: Dummy option name -> {variable value -> option}.
        sub_trait_of: Name of the main trait this trait belongs to.
        power_level: Level of a selectable power, if given.
        main_trait_max: The trait's value is the max of its subtraits.
        main_trait_count: The trait's value is the count of its subtraits.
    """

    min_value: str = "0"
    max_value: str = "0"
    possible_values: list[str] = field(default_factory=list)
    auto_hide: bool = False
    is_var: str | None = None
    derived_options_lookup: dict[str, str] = field(default_factory=dict)
    derived_options_switch: dict[str, dict[str, str]] = field(default_factory=dict)
    sub_trait_of: str | None = None
    power_level: int | None = None
    main_trait_max: bool = False
    main_trait_count: bool = False

    @property
    def has_bounds(self) -> bool:
        return self.min_value != "0" or self.max_value != "0"


def _require_args(keyword: str, args: list[str], count: int) -> None:
    if len(args) < count:
        raise ValueError(f"{keyword} expects {count} argument(s), got {len(args)}")


def parse_trait_data(raw: str | None) -> TraitData:
    """
    Parse a trait data field.

    Args:
        raw: The data string; ``None`` or blank yields defaults.

    Returns:
        TraitData populated from the directives.

    Raises:
        ValueError: On an unknown keyword or a directive missing arguments.
    """
    data = TraitData()
    if not raw:
        return data

    for line in raw.splitlines():
        line = line.strip()
        if not line:
            continue
        keyword, *args = line.split("|")
        keyword = keyword.strip().upper()

        if keyword == Keywords.MIN_MAX:
            _require_args(keyword, args, 2)
            data.min_value, data.max_value = args[0].strip(), args[1].strip()
        elif keyword == Keywords.AUTO_HIDE:
            data.auto_hide = True
        elif keyword == Keywords.POSSIBLE_VALUES:
            data.possible_values = [value for value in args if value]
        elif keyword == Keywords.IS_VAR:
            _require_args(keyword, args, 1)
            data.is_var = args[0].strip()
        elif keyword == Keywords.DERIVED_OPTION:
            _require_args(keyword, args, 2)
            option, variable, *pairs = args
            if len(pairs) % 2:
                raise ValueError(f"{keyword} for {option!r} has an unpaired switch value")
            data.derived_options_lookup[option] = variable
            data.derived_options_switch[option] = dict(zip(pairs[::2], pairs[1::2], strict=True))
        elif keyword == Keywords.SUB_TRAIT:
            _require_args(keyword, args, 1)
            data.sub_trait_of = args[0].strip()
        elif keyword == Keywords.POWER_LEVEL:
            data.power_level = int(args[0]) if args and args[0].strip() else None
        elif keyword == Keywords.MAIN_TRAIT_MAX:
            data.main_trait_max = True
        elif keyword == Keywords.MAIN_TRAIT_COUNT:
            data.main_trait_count = True
        else:
            raise ValueError(f"Unknown trait data keyword: {keyword!r}")

    return data
