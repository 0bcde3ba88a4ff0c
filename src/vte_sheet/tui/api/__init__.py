"""HTTP client for the sheet API."""

from vte_sheet.tui.api.client import APIError, NotFoundError, SheetAPIClient

__all__ = ["APIError", "NotFoundError", "SheetAPIClient"]
