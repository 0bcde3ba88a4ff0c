"""Read-only catalog endpoints: traits, templates and moral paths."""

from fastapi import APIRouter

from vte_sheet.api.models import MoralPathResponse, TemplateResponse
from vte_sheet.db.store import CharacterStore


def router(store: CharacterStore) -> APIRouter:
    """Build the catalog router."""
    api = APIRouter()

    @api.get("/traits")
    async def list_traits():
        """Every trait definition in id order."""
        return {"traits": [info.to_dict() for info in store.catalog.get_trait_data()]}

    @api.get("/templates", response_model=list[TemplateResponse])
    async def list_templates():
        catalog = store.catalog
        return [catalog.templates[key].to_dict() for key in sorted(catalog.templates)]

    @api.get("/paths", response_model=list[MoralPathResponse])
    async def list_paths():
        return [path.to_dict() for path in store.catalog.get_path_data()]

    return api
