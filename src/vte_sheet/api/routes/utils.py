"""Shared helpers for API route modules."""

from fastapi import HTTPException

from vte_sheet.db.store import CharacterStore
from vte_sheet.errors import LookupFailure
from vte_sheet.models.character import Character
from vte_sheet.models.template import CharacterTemplate


def get_character_or_404(store: CharacterStore, character_id: str) -> Character:
    """Return the stored character or raise a 404."""
    try:
        return store.get(character_id)
    except LookupFailure as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


def resolve_template(
    store: CharacterStore, key: str, status_code: int = 404
) -> CharacterTemplate:
    """
    Look up a template by key, raising ``status_code`` when it is unknown.

    Path parameters use 404; template names inside a request body use 400.
    """
    try:
        return store.catalog.template(key)
    except LookupFailure as exc:
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc
