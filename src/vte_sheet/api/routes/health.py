"""Health and root endpoints.

Provides the root ``/`` endpoint (API identity and version) and the
``/health`` endpoint (liveness check with the stored character count).
"""

from fastapi import APIRouter

from vte_sheet import __version__
from vte_sheet.db.store import CharacterStore


def router(store: CharacterStore) -> APIRouter:
    """Build the health router."""
    api = APIRouter()

    @api.get("/")
    async def root():
        """Root endpoint showing API identity and current version."""
        return {"message": "VtE Sheet API", "version": __version__}

    @api.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok", "characters": len(store)}

    return api
