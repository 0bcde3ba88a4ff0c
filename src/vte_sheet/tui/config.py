"""
Configuration management for the terminal sheet client.

Precedence (highest to lowest):

1. Command-line arguments (--server, --timeout, --character, --columns)
2. Environment variables (VTE_SERVER_URL, VTE_REQUEST_TIMEOUT)
3. Default values

The configuration is immutable once created.

Example:
    config = Config.from_args(["--server", "http://localhost:8000"])
    print(config.server_url)    # "http://localhost:8000"
    print(config.character_id)  # None -> the server's demo character
"""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from dataclasses import dataclass

# =============================================================================
# DEFAULT CONFIGURATION VALUES
# =============================================================================

DEFAULT_SERVER_URL = "http://localhost:8000"

DEFAULT_TIMEOUT = 10.0

ENV_SERVER_URL = "VTE_SERVER_URL"
ENV_TIMEOUT = "VTE_REQUEST_TIMEOUT"


# =============================================================================
# CONFIGURATION DATACLASS
# =============================================================================


@dataclass(frozen=True)
class Config:
    """
    Immutable configuration for the sheet client.

    Attributes:
        server_url: Base URL of the sheet API, without a trailing slash.
        timeout: HTTP request timeout in seconds.
        character_id: Character to open. None opens the server's demo
            character through ``/playerpersistence``.
        columns: Column count to request; None uses the server default.
    """

    server_url: str
    timeout: float
    character_id: str | None = None
    columns: int | None = None

    def __post_init__(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValueError: If server_url is empty, timeout is not positive or
                columns is below one.
        """
        if not self.server_url:
            raise ValueError("server_url cannot be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be a positive number")
        if self.columns is not None and self.columns < 1:
            raise ValueError("columns must be at least 1")

    @classmethod
    def from_args(cls, args: Sequence[str] | None = None) -> Config:
        """
        Create a Config from command-line arguments.

        Args:
            args: Arguments to parse. If None, uses sys.argv[1:].
        """
        parser = argparse.ArgumentParser(
            prog="vte-sheet-tui",
            description="Terminal character sheet for the VtE sheet server",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  vte-sheet-tui                                  # Demo character on localhost:8000
  vte-sheet-tui --character 3f2a...              # Open a stored character
  VTE_SERVER_URL=http://10.0.0.1:8000 vte-sheet-tui

Environment Variables:
  VTE_SERVER_URL       Server URL (default: http://localhost:8000)
  VTE_REQUEST_TIMEOUT  Request timeout in seconds (default: 10)
            """,
        )
        parser.add_argument(
            "--server",
            "-s",
            dest="server_url",
            default=None,
            help=f"Sheet server URL (default: {DEFAULT_SERVER_URL})",
        )
        parser.add_argument(
            "--timeout",
            "-t",
            type=float,
            default=None,
            help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT})",
        )
        parser.add_argument(
            "--character",
            "-c",
            dest="character_id",
            default=None,
            help="Character id to open (default: the demo character)",
        )
        parser.add_argument(
            "--columns",
            type=int,
            default=None,
            help="Columns per sheet section (default: server setting)",
        )

        parsed = parser.parse_args(args)

        server_url = parsed.server_url or os.environ.get(ENV_SERVER_URL) or DEFAULT_SERVER_URL
        server_url = server_url.rstrip("/")

        if parsed.timeout is not None:
            timeout = parsed.timeout
        elif ENV_TIMEOUT in os.environ:
            timeout = float(os.environ[ENV_TIMEOUT])
        else:
            timeout = DEFAULT_TIMEOUT

        return cls(
            server_url=server_url,
            timeout=timeout,
            character_id=parsed.character_id,
            columns=parsed.columns,
        )
