"""
FastAPI backend server for the character sheet.

This module builds the FastAPI application that serves characters and their
laid-out sheets. It sets up:
- CORS middleware for the browser or terminal sheet client
- The in-memory character store every route shares
- All API route endpoints

The server runs on port 8000 by default; host, port and CORS origins come
from :mod:`vte_sheet.config`.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vte_sheet import __version__
from vte_sheet.api.routes import register_routes
from vte_sheet.config import config
from vte_sheet.db.store import CharacterStore

logger = logging.getLogger(__name__)

# ============================================================================
# APPLICATION FACTORY
# ============================================================================


def create_app(store: CharacterStore | None = None) -> FastAPI:
    """
    Build the FastAPI app around ``store``.

    Args:
        store: Character store to serve; a fresh empty one when omitted.
    """
    docs_url = "/docs" if config.security.docs_enabled else None
    redoc_url = "/redoc" if config.security.docs_enabled else None
    application = FastAPI(
        title="VtE Sheet", version=__version__, docs_url=docs_url, redoc_url=redoc_url
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.security.cors_origins,
        allow_credentials=config.security.cors_allow_credentials,
        allow_methods=config.security.cors_allow_methods,
        allow_headers=config.security.cors_allow_headers,
    )

    application.state.store = store if store is not None else CharacterStore()
    register_routes(application, application.state.store)
    return application


# Module-level app for ``uvicorn vte_sheet.api.server:app``.
app = create_app()

# ============================================================================
# SERVER STARTUP
# ============================================================================


def start_server(host: str | None = None, port: int | None = None) -> None:
    """Run the API with uvicorn, defaulting host and port from config."""
    import uvicorn

    host = host or config.server.host
    port = port or config.server.port
    logger.info("Starting sheet server on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level=config.logging.level.lower())


if __name__ == "__main__":
    start_server()
