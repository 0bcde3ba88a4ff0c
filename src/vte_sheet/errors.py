"""Typed exceptions shared across the sheet packages.

Exception hierarchy:

    - :class:`InvalidArgument` signals a caller bug (a column count below one,
      a dot index outside the rendered row, inconsistent widget state). These
      are never retried or clamped; they surface immediately.
    - :class:`CatalogError` signals malformed catalog data at load time.
    - :class:`LookupFailure` and its subclasses signal that a template, trait
      or character key does not exist. API routes map them to HTTP 404.

Expected user input (clicking past the maximum, pressing ``-`` at the
minimum) is clamped by the dot-trait controller and never raises.
"""

from __future__ import annotations

from dataclasses import dataclass


class InvalidArgument(ValueError):
    """A caller passed an argument outside the documented domain."""


class CatalogError(RuntimeError):
    """The trait catalog could not be loaded or failed validation."""


@dataclass(slots=True)
class LookupContext:
    """Structured metadata carried by lookup failures.

    Attributes:
        kind: What was being looked up (``"template"``, ``"trait"``,
            ``"character"``).
        key: The key that was not found.
    """

    kind: str
    key: object


class LookupFailure(KeyError):
    """Base exception for unknown catalog or store keys."""

    kind = "entry"

    def __init__(self, key: object) -> None:
        self.context = LookupContext(kind=self.kind, key=key)
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown {self.context.kind}: {self.context.key!r}"


class UnknownTemplateError(LookupFailure):
    """Template key is not present in the catalog."""

    kind = "template"


class UnknownTraitError(LookupFailure):
    """Trait id is not present in the catalog or on the character."""

    kind = "trait"


class UnknownCharacterError(LookupFailure):
    """Character id is not present in the store."""

    kind = "character"
