"""
Server configuration management.

This module handles loading and accessing server configuration from multiple sources
with a clear priority order:

    1. Environment variables (highest priority) - for containerized deployments
    2. Config file (config/server.ini) - for static deployments
    3. Built-in defaults (lowest priority) - sensible fallbacks

Configuration is loaded once at module import time and cached. The ServerConfig
dataclass provides typed access to all settings.

Usage:
    from vte_sheet.config import config

    print(config.server.port)
    print(config.sheet.column_count)

Environment Variable Mapping:
    VTE_HOST           -> server.host
    VTE_PORT           -> server.port
    VTE_CORS_ORIGINS   -> security.cors_origins
    VTE_LOG_LEVEL      -> logging.level
    VTE_COLUMNS        -> sheet.column_count
    VTE_CATALOG_PATH   -> sheet.catalog_path
"""

import configparser
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

# Project root directory (contains src/, config/)
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Config file paths
CONFIG_DIR = PROJECT_ROOT / "config"
CONFIG_FILE = CONFIG_DIR / "server.ini"
CONFIG_EXAMPLE = CONFIG_DIR / "server.example.ini"

LOG_FORMATS: dict[str, str] = {
    "simple": "%(levelname)s %(message)s",
    "detailed": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
}


# =============================================================================
# CONFIGURATION DATACLASSES
# =============================================================================


@dataclass
class ServerSettings:
    """Network server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class SecuritySettings:
    """Cross-origin and API docs configuration."""

    cors_origins: list[str] = field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = field(default_factory=lambda: ["*"])
    cors_allow_headers: list[str] = field(default_factory=lambda: ["*"])
    docs_enabled: bool = True


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "INFO"
    format: Literal["simple", "detailed"] = "detailed"


@dataclass
class SheetSettings:
    """Character sheet layout and catalog configuration."""

    column_count: int = 3
    catalog_path: str = ""

    @property
    def absolute_catalog_path(self) -> Path | None:
        """Catalog path resolved against the project root, or None for the packaged one."""
        if not self.catalog_path:
            return None
        p = Path(self.catalog_path)
        if p.is_absolute():
            return p
        return PROJECT_ROOT / p


@dataclass
class ServerConfig:
    """
    Complete server configuration.

    Aggregates all settings sections. Access via the module-level `config` singleton.
    """

    server: ServerSettings = field(default_factory=ServerSettings)
    security: SecuritySettings = field(default_factory=SecuritySettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    sheet: SheetSettings = field(default_factory=SheetSettings)


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _parse_bool(value: str) -> bool:
    """Parse a string value to boolean."""
    return value.lower() in ("true", "yes", "1", "on", "enabled")


def _parse_list(value: str) -> list[str]:
    """Parse a comma-separated string to list, stripping whitespace."""
    if not value or value.strip() == "":
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _load_from_ini(parser: configparser.ConfigParser, cfg: ServerConfig) -> None:
    """Load configuration from parsed INI file into ServerConfig."""
    if parser.has_section("server"):
        if parser.has_option("server", "host"):
            cfg.server.host = parser.get("server", "host")
        if parser.has_option("server", "port"):
            cfg.server.port = parser.getint("server", "port")

    if parser.has_section("security"):
        if parser.has_option("security", "cors_origins"):
            cfg.security.cors_origins = _parse_list(parser.get("security", "cors_origins"))
        if parser.has_option("security", "cors_allow_credentials"):
            cfg.security.cors_allow_credentials = _parse_bool(
                parser.get("security", "cors_allow_credentials")
            )
        if parser.has_option("security", "cors_allow_methods"):
            cfg.security.cors_allow_methods = _parse_list(
                parser.get("security", "cors_allow_methods")
            )
        if parser.has_option("security", "cors_allow_headers"):
            cfg.security.cors_allow_headers = _parse_list(
                parser.get("security", "cors_allow_headers")
            )
        if parser.has_option("security", "docs_enabled"):
            cfg.security.docs_enabled = _parse_bool(parser.get("security", "docs_enabled"))

    if parser.has_section("logging"):
        if parser.has_option("logging", "level"):
            cfg.logging.level = parser.get("logging", "level").upper()
        if parser.has_option("logging", "format"):
            val = parser.get("logging", "format").lower()
            if val in LOG_FORMATS:
                cfg.logging.format = val  # type: ignore[assignment]

    if parser.has_section("sheet"):
        if parser.has_option("sheet", "column_count"):
            cfg.sheet.column_count = parser.getint("sheet", "column_count")
        if parser.has_option("sheet", "catalog_path"):
            cfg.sheet.catalog_path = parser.get("sheet", "catalog_path")


def _apply_env_overrides(cfg: ServerConfig) -> None:
    """Apply environment variable overrides to configuration."""
    if env_host := os.getenv("VTE_HOST"):
        cfg.server.host = env_host
    if env_port := os.getenv("VTE_PORT"):
        cfg.server.port = int(env_port)

    if env_cors := os.getenv("VTE_CORS_ORIGINS"):
        cfg.security.cors_origins = _parse_list(env_cors)

    if env_log := os.getenv("VTE_LOG_LEVEL"):
        cfg.logging.level = env_log.upper()

    if env_columns := os.getenv("VTE_COLUMNS"):
        cfg.sheet.column_count = int(env_columns)
    if env_catalog := os.getenv("VTE_CATALOG_PATH"):
        cfg.sheet.catalog_path = env_catalog


def load_config() -> ServerConfig:
    """
    Load configuration from all sources with proper priority.

    Priority (highest wins):
        1. Environment variables
        2. config/server.ini
        3. config/server.example.ini (fallback for development)
        4. Built-in defaults

    Returns:
        ServerConfig: Fully populated configuration object.
    """
    cfg = ServerConfig()

    config_file = None
    if CONFIG_FILE.exists():
        config_file = CONFIG_FILE
    elif CONFIG_EXAMPLE.exists():
        config_file = CONFIG_EXAMPLE

    if config_file:
        parser = configparser.ConfigParser()
        parser.read(config_file)
        _load_from_ini(parser, cfg)

    _apply_env_overrides(cfg)

    return cfg


def reload_config() -> "ServerConfig":
    """
    Reload configuration from disk and environment.

    This updates the module-level `config` singleton in place so modules that
    imported it see the new values.

    Returns:
        ServerConfig: The reloaded configuration.
    """
    fresh = load_config()
    config.server = fresh.server
    config.security = fresh.security
    config.logging = fresh.logging
    config.sheet = fresh.sheet
    return config


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

# Load configuration once at module import time
config = load_config()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def configure_logging(cfg: ServerConfig | None = None) -> None:
    """Configure the root logger from the logging settings."""
    cfg = cfg or config
    logging.basicConfig(
        level=getattr(logging, cfg.logging.level, logging.INFO),
        format=LOG_FORMATS.get(cfg.logging.format, LOG_FORMATS["detailed"]),
        force=True,
    )


def get_config_status() -> dict:
    """
    Get configuration status for diagnostics.

    Returns a dictionary with configuration source information.
    """
    return {
        "config_file_exists": CONFIG_FILE.exists(),
        "config_file_path": str(CONFIG_FILE),
        "using_example": not CONFIG_FILE.exists() and CONFIG_EXAMPLE.exists(),
        "cors_origins_count": len(config.security.cors_origins),
        "docs_enabled": config.security.docs_enabled,
        "column_count": config.sheet.column_count,
    }


def print_config_summary() -> None:
    """Print a summary of current configuration to stdout."""
    status = get_config_status()
    print("\n" + "=" * 60)
    print("SHEET SERVER CONFIGURATION")
    print("=" * 60)
    print(f"Config file: {status['config_file_path']}")
    print(f"File exists: {status['config_file_exists']}")
    if status["using_example"]:
        print("NOTE: Using example config (copy to server.ini to customise)")
    print("-" * 60)
    print(f"Server:       {config.server.host}:{config.server.port}")
    print(f"CORS origins: {config.security.cors_origins}")
    print(f"Docs enabled: {config.security.docs_enabled}")
    print(f"Columns:      {config.sheet.column_count}")
    print(f"Catalog:      {config.sheet.absolute_catalog_path or 'packaged'}")
    print(f"Log level:    {config.logging.level}")
    print("=" * 60 + "\n")


# =============================================================================
# TEST HELPERS
# =============================================================================


class use_catalog_path:
    """
    Context manager pointing the config at another catalog file.

    Usage:
        with use_catalog_path(tmp_path / "catalog.yaml"):
            catalog = load_catalog(config.sheet.absolute_catalog_path)
    """

    def __init__(self, catalog_path: Path | str):
        self.catalog_path = Path(catalog_path)
        self.original_path: str | None = None

    def __enter__(self) -> Path:
        self.original_path = config.sheet.catalog_path
        config.sheet.catalog_path = str(self.catalog_path)
        return self.catalog_path

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.original_path is not None:
            config.sheet.catalog_path = self.original_path
        return None
