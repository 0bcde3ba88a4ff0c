"""
Command-line interface for the VtE character sheet.

Provides CLI commands for running and inspecting the sheet server:
- run: Start the API server
- tui: Start the terminal sheet client
- sheet: Print a freshly created character's sheet as text
- check-catalog: Load and validate the trait catalog
- show-config: Print the effective configuration

Usage:
    vte-sheet run [--host HOST] [--port PORT]
    vte-sheet tui [--server URL] [--character ID]
    vte-sheet sheet [--template KEY ...] [--columns N]
    vte-sheet check-catalog [PATH]
    vte-sheet show-config

Environment Variables:
    VTE_HOST: Host to bind the API server (default: 127.0.0.1)
    VTE_PORT: Port for the API server (default: 8000)
    VTE_COLUMNS: Default sheet column count (default: 3)
    VTE_CATALOG_PATH: Catalog file to load instead of the packaged one
"""

import argparse
import logging
import sys

from vte_sheet.config import config, configure_logging, print_config_summary
from vte_sheet.errors import CatalogError, InvalidArgument, LookupFailure

logger = logging.getLogger(__name__)


def cmd_run(args: argparse.Namespace) -> int:
    """
    Run the API server in the foreground.

    Configuration priority: CLI arguments, then VTE_* environment variables,
    then config/server.ini.

    Returns:
        0 on clean shutdown, 1 on startup error
    """
    from vte_sheet.api.server import start_server

    try:
        start_server(host=getattr(args, "host", None), port=getattr(args, "port", None))
        return 0
    except KeyboardInterrupt:
        return 0
    except OSError as e:
        print(f"Error starting server: {e}", file=sys.stderr)
        return 1


def cmd_tui(args: argparse.Namespace) -> int:
    """Run the terminal sheet client, forwarding its options."""
    from vte_sheet.tui.app import main as tui_main

    forwarded: list[str] = []
    if getattr(args, "server", None):
        forwarded += ["--server", args.server]
    if getattr(args, "character", None):
        forwarded += ["--character", args.character]
    return tui_main(forwarded)


def cmd_sheet(args: argparse.Namespace) -> int:
    """
    Build a character from templates and print its sheet.

    Returns:
        0 on success, 1 for an unknown template or invalid column count
    """
    from vte_sheet.db.catalog import get_catalog
    from vte_sheet.models.character import Character
    from vte_sheet.sheet import build_sheet
    from vte_sheet.sheet.formatting import format_sheet

    columns = args.columns if args.columns is not None else config.sheet.column_count
    try:
        catalog = get_catalog()
        keys = [catalog.template(name).key for name in args.template or []]
        character = Character("cli", *keys, catalog=catalog)
        sheet = build_sheet(character, column_count=columns)
    except (LookupFailure, InvalidArgument, CatalogError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_sheet(sheet), end="")
    return 0


def cmd_check_catalog(args: argparse.Namespace) -> int:
    """
    Load a catalog file and report what it contains.

    Returns:
        0 if the catalog is valid, 1 otherwise
    """
    from vte_sheet.db.catalog import load_catalog

    path = args.path or config.sheet.absolute_catalog_path
    try:
        catalog = load_catalog(path)
    except (CatalogError, FileNotFoundError) as e:
        print(f"Error loading catalog: {e}", file=sys.stderr)
        return 1

    print(f"Catalog: {catalog.source}")
    print(f"  traits:    {len(catalog.traits)}")
    print(f"  templates: {', '.join(t.name for _, t in sorted(catalog.templates.items()))}")
    print(f"  paths:     {len(catalog.paths)}")
    return 0


def cmd_show_config(args: argparse.Namespace) -> int:
    """Print the effective configuration."""
    print_config_summary()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vte-sheet",
        description="VtE Sheet - character sheet server and terminal client",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (default: from config, or VTE_LOG_LEVEL env var)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run command
    run_parser = subparsers.add_parser(
        "run",
        help="Run the API server",
        description="Start the character sheet API server with uvicorn.",
    )
    run_parser.add_argument(
        "--host",
        type=str,
        help="Host to bind to (default: 127.0.0.1, or VTE_HOST env var)",
    )
    run_parser.add_argument(
        "--port",
        "-p",
        type=int,
        help="API server port (default: 8000, or VTE_PORT env var)",
    )
    run_parser.set_defaults(func=cmd_run)

    # tui command
    tui_parser = subparsers.add_parser(
        "tui",
        help="Run the terminal sheet client",
        description="Open a character sheet from a running API server in the terminal.",
    )
    tui_parser.add_argument("--server", type=str, help="API server URL")
    tui_parser.add_argument("--character", type=str, help="Character id to open")
    tui_parser.set_defaults(func=cmd_tui)

    # sheet command
    sheet_parser = subparsers.add_parser(
        "sheet",
        help="Print a new character's sheet",
        description="Create a character from templates and print its allocated sheet.",
    )
    sheet_parser.add_argument(
        "--template",
        "-t",
        action="append",
        help="Template key to apply (repeatable; default: mortal)",
    )
    sheet_parser.add_argument(
        "--columns",
        "-c",
        type=int,
        help="Column count (default: 3, or VTE_COLUMNS env var)",
    )
    sheet_parser.set_defaults(func=cmd_sheet)

    # check-catalog command
    check_parser = subparsers.add_parser(
        "check-catalog",
        help="Validate a catalog file",
        description="Load a catalog YAML file and report its contents.",
    )
    check_parser.add_argument("path", nargs="?", help="Catalog file (default: configured)")
    check_parser.set_defaults(func=cmd_check_catalog)

    # show-config command
    config_parser = subparsers.add_parser("show-config", help="Print the configuration")
    config_parser.set_defaults(func=cmd_show_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        config.logging.level = args.log_level.upper()
    configure_logging()

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
