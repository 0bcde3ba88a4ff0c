"""API route modules."""

from vte_sheet.api.routes.register import register_routes

__all__ = ["register_routes"]
