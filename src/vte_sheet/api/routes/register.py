"""
Route registration entry point for the FastAPI application.

Keeps the public ``register_routes(app, store)`` API while splitting the
implementation into focused router modules.
"""

from fastapi import FastAPI

from vte_sheet.api.routes import catalog, characters, health
from vte_sheet.db.store import CharacterStore


def register_routes(app: FastAPI, store: CharacterStore) -> None:
    """Register all API routes with the FastAPI app."""
    app.include_router(health.router(store))
    app.include_router(catalog.router(store))
    app.include_router(characters.router(store))
