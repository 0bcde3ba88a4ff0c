"""
Character endpoints: create, inspect, edit and lay out characters.

All character state lives in the :class:`CharacterStore` handed to
:func:`router`. Sheet endpoints run the grid allocator on every request, so
the returned positions always reflect the current trait values.
"""

import logging

from fastapi import APIRouter, HTTPException, Query

from vte_sheet.api.models import (
    AssignTraitRequest,
    CharacterResponse,
    CreateCharacterRequest,
    TraitResponse,
)
from vte_sheet.api.routes.utils import get_character_or_404, resolve_template
from vte_sheet.config import config
from vte_sheet.db.store import CharacterStore
from vte_sheet.errors import InvalidArgument, UnknownTraitError
from vte_sheet.models.character import Character
from vte_sheet.sheet import CharacterSheet, build_sheet

logger = logging.getLogger(__name__)


def _sheet_or_400(character: Character, columns: int | None) -> CharacterSheet:
    column_count = config.sheet.column_count if columns is None else columns
    try:
        return build_sheet(character, column_count=column_count)
    except InvalidArgument as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def router(store: CharacterStore) -> APIRouter:
    """Build the characters router with access to the character store."""
    api = APIRouter()

    @api.post("/characters", response_model=CharacterResponse, status_code=201)
    async def create_character(request: CreateCharacterRequest):
        """Create a character from template keys (Mortal when none are given)."""
        keys = [resolve_template(store, name, status_code=400).key for name in request.templates]
        if request.character_id and request.character_id in store:
            raise HTTPException(
                status_code=409, detail=f"Character {request.character_id!r} already exists"
            )
        character = store.create(keys, character_id=request.character_id)
        return character.to_dict()

    @api.get("/characters")
    async def list_characters():
        return {"characters": store.ids()}

    @api.get("/characters/{character_id}", response_model=CharacterResponse)
    async def get_character(character_id: str):
        return get_character_or_404(store, character_id).to_dict()

    @api.delete("/characters/{character_id}")
    async def delete_character(character_id: str):
        get_character_or_404(store, character_id)
        store.delete(character_id)
        return {"success": True, "character_id": character_id}

    # -------------------------------------------------------------------------
    # Templates
    # -------------------------------------------------------------------------

    @api.post("/characters/{character_id}/templates/{template}", response_model=CharacterResponse)
    async def add_template(character_id: str, template: str):
        """Apply a template; applying one the character already has is a no-op."""
        character = get_character_or_404(store, character_id)
        character.add_template(resolve_template(store, template).key)
        return character.to_dict()

    @api.delete(
        "/characters/{character_id}/templates/{template}", response_model=CharacterResponse
    )
    async def remove_template(character_id: str, template: str):
        """Remove a template and the traits only it granted."""
        character = get_character_or_404(store, character_id)
        character.remove_template(resolve_template(store, template).key)
        return character.to_dict()

    # -------------------------------------------------------------------------
    # Traits
    # -------------------------------------------------------------------------

    @api.put("/characters/{character_id}/traits/{trait_id}", response_model=TraitResponse)
    async def assign_trait(character_id: str, trait_id: int, request: AssignTraitRequest):
        """
        Set a trait's value.

        Returns 404 when the character lacks the trait and 422 when the trait
        rejects the value (out of bounds, not an option, or computed).
        """
        character = get_character_or_404(store, character_id)
        try:
            accepted = character.assign(trait_id, request.value)
        except UnknownTraitError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        trait = character.get_trait(trait_id)
        if not accepted:
            raise HTTPException(
                status_code=422,
                detail=f"{trait.name} does not accept value {request.value!r}",
            )
        return trait.to_dict()

    # -------------------------------------------------------------------------
    # Sheets
    # -------------------------------------------------------------------------

    @api.get("/characters/{character_id}/sheet", response_model=CharacterSheet)
    async def get_sheet(character_id: str, columns: int | None = Query(default=None)):
        """Lay out the character's sheet across ``columns`` columns."""
        character = get_character_or_404(store, character_id)
        return _sheet_or_400(character, columns)

    @api.get("/playerpersistence", response_model=CharacterSheet)
    async def player_persistence(columns: int | None = Query(default=None)):
        """Sheet of the demo character, created as a Mortal on first request."""
        return _sheet_or_400(store.get_or_create_demo(), columns)

    return api
