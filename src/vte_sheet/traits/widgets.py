"""
Widget descriptions sent from the server to sheet renderers.

Every widget kind is its own Pydantic model carrying a literal ``kind``
field. :data:`TraitWidget` is the discriminated union over all kinds, so
renderers dispatch on ``kind`` instead of guessing from which fields happen
to be present.

All widgets are grid items: the layout allocator fills in ``row`` and
``column`` before the sheet is serialised.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, model_validator

from vte_sheet.errors import InvalidArgument


class GridPosition(BaseModel):
    """Grid placement fields shared by all widget kinds."""

    row: int | None = None
    column: int | None = None
    row_span: int = 1
    col_span: int = 1


class FreeTextWidget(GridPosition):
    """A named trait holding arbitrary text."""

    kind: Literal["free_text"] = "free_text"
    trait_id: int
    name: str
    value: str = ""


class DropdownWidget(GridPosition):
    """A named trait chosen from a fixed list of values.

    An empty ``value`` means nothing is selected yet.
    """

    kind: Literal["dropdown"] = "dropdown"
    trait_id: int
    name: str
    valid_values: list[str] = Field(default_factory=list)
    value: str = ""


class IntegerWidget(GridPosition):
    """A bounded integer trait rendered as dots."""

    kind: Literal["integer"] = "integer"
    trait_id: int
    name: str
    min_value: int = 0
    max_value: int = 5
    value: int | None = None

    @model_validator(mode="after")
    def _check_bounds(self) -> IntegerWidget:
        if not 0 <= self.min_value <= self.max_value:
            raise InvalidArgument(
                f"{self.name}: bounds [{self.min_value}, {self.max_value}] are invalid"
            )
        if self.value is not None and not self.min_value <= self.value <= self.max_value:
            raise InvalidArgument(
                f"{self.name}: value {self.value} outside [{self.min_value}, {self.max_value}]"
            )
        return self


TraitWidget = Annotated[
    FreeTextWidget | DropdownWidget | IntegerWidget,
    Field(discriminator="kind"),
]

WIDGET_KINDS: tuple[str, ...] = ("free_text", "dropdown", "integer")
