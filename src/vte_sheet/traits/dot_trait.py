"""
State model for integer traits rendered as a row of dots.

A dot-trait shows ``max_value`` dots. The first ``value`` dots are filled;
the first ``min_value`` dots are locked (they can never be emptied because
the value is clamped at the minimum). The scalar ``value`` is the only stored
state; which dots are filled is always derived from it.

Click policy
------------
Clicking a dot reinterprets the click into a new value:

    - filled last dot        -> unfill just that dot
    - filled first dot       -> collapse to 1 if other dots are filled,
                                otherwise empty it
    - filled interior dot    -> unfill everything after it, or the dot
                                itself if nothing after it is filled
    - unfilled dot           -> fill up to and including it

The result is clamped to ``[min_value, max_value]``.

Keyboard
--------
``+`` and ``-`` step the value by one, clamped. Other keys are reported as
unhandled so the caller can let default behaviour proceed.

Each :class:`DotTraitState` instance owns its state. Widgets must create one
controller per rendered trait.
"""

from __future__ import annotations

from dataclasses import dataclass

from vte_sheet.errors import InvalidArgument

FILLED_GLYPH = "●"
EMPTY_GLYPH = "○"

INCREMENT_KEY = "+"
DECREMENT_KEY = "-"


@dataclass(frozen=True)
class DotGlyph:
    """Render state for a single dot."""

    index: int
    filled: bool
    locked: bool

    @property
    def glyph(self) -> str:
        return FILLED_GLYPH if self.filled else EMPTY_GLYPH


class DotTraitState:
    """
    Bounded integer value driven by dot clicks and +/- keys.

    Args:
        min_value: Floor of the value; dots below it are always filled.
        max_value: Ceiling of the value and number of dots rendered.
        initial_value: Starting value; ``None`` means ``min_value``.

    Raises:
        InvalidArgument: If the bounds are not ``0 <= min_value <= max_value``
            or the initial value lies outside them.
    """

    def __init__(self, min_value: int, max_value: int, initial_value: int | None = None) -> None:
        if min_value < 0:
            raise InvalidArgument(f"min_value cannot be negative, got {min_value}")
        if min_value > max_value:
            raise InvalidArgument(f"min_value {min_value} exceeds max_value {max_value}")

        value = min_value if initial_value is None else initial_value
        if not min_value <= value <= max_value:
            raise InvalidArgument(
                f"initial value {value} outside [{min_value}, {max_value}]"
            )

        self._min_value = min_value
        self._max_value = max_value
        self._value = value

    def __repr__(self) -> str:
        return (
            f"DotTraitState(value={self._value}, "
            f"min_value={self._min_value}, max_value={self._max_value})"
        )

    @property
    def value(self) -> int:
        return self._value

    @property
    def min_value(self) -> int:
        return self._min_value

    @property
    def max_value(self) -> int:
        return self._max_value

    def is_filled(self, index: int) -> bool:
        """Return True if the dot at ``index`` is currently filled."""
        return index < self._value

    def _clamp(self, desired: int) -> int:
        return max(self._min_value, min(self._max_value, desired))

    def click_dot(self, index: int, currently_filled: bool | None = None) -> int:
        """
        Apply a click on dot ``index`` and return the committed value.

        Args:
            index: Zero-based dot index in ``[0, max_value - 1]``.
            currently_filled: Fill state the caller rendered for the dot.
                Derived from the value when omitted.

        Raises:
            InvalidArgument: If the index is out of range, or the supplied
                fill state disagrees with the current value.
        """
        if not 0 <= index < self._max_value:
            raise InvalidArgument(
                f"dot index {index} outside [0, {self._max_value - 1}]"
            )

        filled = self.is_filled(index)
        if currently_filled is not None and currently_filled != filled:
            raise InvalidArgument(
                f"dot {index} reported filled={currently_filled} but value is {self._value}"
            )

        if filled:
            if index == self._max_value - 1:
                desired = index
            elif index == 0:
                desired = 1 if self._max_value > 1 and self._value > 1 else 0
            elif self._value > index + 1:
                desired = index + 1
            else:
                desired = index
        else:
            desired = index + 1

        self._value = self._clamp(desired)
        return self._value

    def key_press(self, key: str) -> bool:
        """
        Apply a key press.

        Returns:
            True if the key was consumed (``+`` or ``-``), False otherwise.
        """
        if key == INCREMENT_KEY:
            self._value = self._clamp(self._value + 1)
        elif key == DECREMENT_KEY:
            self._value = self._clamp(self._value - 1)
        else:
            return False
        return True

    def render_dots(self) -> list[DotGlyph]:
        """Project the value onto one glyph per dot, in index order."""
        return [
            DotGlyph(index=i, filled=i < self._value, locked=i < self._min_value)
            for i in range(self._max_value)
        ]
