"""Screens for the terminal sheet client."""

from vte_sheet.tui.screens.sheet import SheetScreen

__all__ = ["SheetScreen"]
