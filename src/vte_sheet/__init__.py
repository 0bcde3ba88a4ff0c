"""VtE Sheet: a character sheet server and terminal client for Vampire: the Everything.

The server exposes the trait catalog, character templates and per-character
trait values over a small REST API. The terminal client renders a character
as grids of editable trait widgets (free text, dropdowns and dot-trackers).

Version Management
------------------
``__version__`` is read from the installed package metadata at import time.
The single source of truth is the ``version`` field in ``pyproject.toml``.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("vte-sheet")
except PackageNotFoundError:
    __version__ = "0.1.0"
