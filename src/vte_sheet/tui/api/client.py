"""
HTTP API client for the sheet server.

This module provides an async HTTP client for the sheet server's REST API.
It must be used as an async context manager so the connection pool is
closed properly:

    async with SheetAPIClient(config) as client:
        sheet = await client.get_sheet()
        await client.assign_trait(sheet.character_id, 12, 3)

Sheets are returned as :class:`~vte_sheet.sheet.CharacterSheet` models, so
widgets arrive already discriminated by ``kind``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic import ValidationError

from vte_sheet.sheet.models import CharacterSheet
from vte_sheet.tui.config import Config

logger = logging.getLogger(__name__)

# =============================================================================
# CUSTOM EXCEPTIONS
# =============================================================================


@dataclass
class APIError(Exception):
    """
    Exception raised when an API request fails.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code, or 0 if the server was unreachable.
        detail: Additional detail from the server response, if available.
    """

    message: str
    status_code: int = 0
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class NotFoundError(APIError):
    """The character, trait or template does not exist on the server (404)."""


# =============================================================================
# API CLIENT
# =============================================================================


@dataclass
class SheetAPIClient:
    """
    Async HTTP client for the sheet API.

    Attributes:
        config: Configuration with server URL and timeout.
    """

    config: Config

    _http_client: httpx.AsyncClient | None = field(default=None, repr=False)

    # -------------------------------------------------------------------------
    # Context Manager Protocol
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> SheetAPIClient:
        self._http_client = httpx.AsyncClient(
            base_url=self.config.server_url,
            timeout=self.config.timeout,
        )
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    @property
    def http_client(self) -> httpx.AsyncClient:
        """
        Get the HTTP client, ensuring it's been initialized.

        Raises:
            RuntimeError: If accessed outside of the async context manager.
        """
        if self._http_client is None:
            raise RuntimeError(
                "SheetAPIClient must be used as an async context manager. "
                "Use 'async with SheetAPIClient(config) as client:'"
            )
        return self._http_client

    # -------------------------------------------------------------------------
    # Request plumbing
    # -------------------------------------------------------------------------

    async def _request(self, method: str, path: str, action: str, **kwargs: Any) -> Any:
        """
        Send a request and return the decoded JSON body.

        Raises:
            NotFoundError: On a 404 response.
            APIError: If the server is unreachable, the body is not JSON, or
                the response is any other non-2xx status.
        """
        try:
            response = await self.http_client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise APIError(
                message=f"{action} failed",
                status_code=0,
                detail=f"Cannot connect to server at {self.config.server_url}: {e}",
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise APIError(
                message=f"{action} failed",
                status_code=response.status_code,
                detail=f"Server returned invalid response (status {response.status_code})",
            ) from e

        if 200 <= response.status_code < 300:
            return data

        detail = data.get("detail", "Unknown error") if isinstance(data, dict) else ""
        if response.status_code == 404:
            raise NotFoundError(
                message=f"{action} failed",
                status_code=404,
                detail=str(detail),
            )
        raise APIError(
            message=f"{action} failed",
            status_code=response.status_code,
            detail=str(detail),
        )

    # -------------------------------------------------------------------------
    # Endpoints
    # -------------------------------------------------------------------------

    async def get_health(self) -> dict[str, Any]:
        """Return the server health payload (``status`` and ``characters``)."""
        return dict(await self._request("GET", "/health", "Health check"))

    async def get_templates(self) -> list[dict[str, Any]]:
        return list(await self._request("GET", "/templates", "Fetching templates"))

    async def create_character(self, templates: list[str] | None = None) -> dict[str, Any]:
        """Create a character and return its summary."""
        return dict(
            await self._request(
                "POST",
                "/characters",
                "Creating character",
                json={"templates": templates or []},
            )
        )

    async def get_sheet(
        self, character_id: str | None = None, columns: int | None = None
    ) -> CharacterSheet:
        """
        Fetch an allocated sheet.

        Args:
            character_id: Character to lay out; None fetches the demo
                character from ``/playerpersistence``.
            columns: Column count; None uses the server default.
        """
        path = "/playerpersistence" if character_id is None else f"/characters/{character_id}/sheet"
        params = {"columns": columns} if columns is not None else None
        data = await self._request("GET", path, "Fetching sheet", params=params)
        try:
            return CharacterSheet.model_validate(data)
        except ValidationError as e:
            raise APIError(message="Fetching sheet failed", detail=str(e)) from e

    async def assign_trait(
        self, character_id: str, trait_id: int, value: int | str
    ) -> dict[str, Any]:
        """
        Set a trait's value on the server.

        Raises:
            APIError: With status 422 when the server rejects the value.
        """
        logger.debug("Assigning %r to trait %d of %s", value, trait_id, character_id)
        return dict(
            await self._request(
                "PUT",
                f"/characters/{character_id}/traits/{trait_id}",
                "Saving trait",
                json={"value": value},
            )
        )
