"""
Pydantic models for API requests and responses.

Request models are what the sheet client sends; response models wrap what
the server returns. Sheet payloads reuse :class:`vte_sheet.sheet.CharacterSheet`
directly so the widget tagged union is part of the OpenAPI schema.
"""

from typing import Any

from pydantic import BaseModel, Field

# ============================================================================
# REQUEST MODELS (Client → Server)
# ============================================================================


class CreateCharacterRequest(BaseModel):
    """
    Request to create a new character.

    Attributes:
        templates: Template keys ("kindred", "mage"...). Empty means Mortal.
        character_id: Optional id; a random one is generated when omitted.
    """

    templates: list[str] = Field(default_factory=list)
    character_id: str | None = None


class AssignTraitRequest(BaseModel):
    """
    Request to set one trait's value.

    Attributes:
        value: New value. Integer traits expect an int (or a numeric string),
            text and dropdown traits a string.
    """

    value: int | str


# ============================================================================
# RESPONSE MODELS (Server → Client)
# ============================================================================


class TraitResponse(BaseModel):
    """A character's trait after an assignment."""

    trait_id: int
    name: str
    type: str
    category: str
    subcategory: str
    value: Any
    min_value: int | None = None
    max_value: int | None = None
    options: list[str] | None = None


class CharacterResponse(BaseModel):
    """Character summary with every trait."""

    character_id: str
    templates: list[str]
    traits: list[TraitResponse]


class TemplateResponse(BaseModel):
    template_id: int
    key: str
    name: str
    trait_ids: list[int]


class MoralPathResponse(BaseModel):
    name: str
    virtues: str
    bearing: str
    hierarchy_of_sins: list[str]
