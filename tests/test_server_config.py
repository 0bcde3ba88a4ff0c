"""Tests for vte_sheet.config loading and environment overrides."""

import configparser

import pytest

from vte_sheet.config import (
    PROJECT_ROOT,
    ServerConfig,
    SheetSettings,
    _load_from_ini,
    _parse_bool,
    _parse_list,
    get_config_status,
    load_config,
    print_config_summary,
)


@pytest.mark.unit
def test_server_env_overrides(monkeypatch):
    monkeypatch.setenv("VTE_HOST", "0.0.0.0")
    monkeypatch.setenv("VTE_PORT", "9100")
    monkeypatch.setenv("VTE_LOG_LEVEL", "debug")

    cfg = load_config()

    assert cfg.server.host == "0.0.0.0"
    assert cfg.server.port == 9100
    assert cfg.logging.level == "DEBUG"


@pytest.mark.unit
def test_sheet_env_overrides(monkeypatch):
    monkeypatch.setenv("VTE_COLUMNS", "4")
    monkeypatch.setenv("VTE_CATALOG_PATH", "/tmp/catalog.yaml")

    cfg = load_config()

    assert cfg.sheet.column_count == 4
    assert cfg.sheet.catalog_path == "/tmp/catalog.yaml"


@pytest.mark.unit
def test_cors_env_override(monkeypatch):
    monkeypatch.setenv("VTE_CORS_ORIGINS", "http://a, http://b")

    assert load_config().security.cors_origins == ["http://a", "http://b"]


@pytest.mark.unit
def test_load_from_ini():
    parser = configparser.ConfigParser()
    parser.read_string(
        "[server]\nport = 8123\n"
        "[security]\ndocs_enabled = no\n"
        "[logging]\nlevel = warning\nformat = simple\n"
        "[sheet]\ncolumn_count = 2\ncatalog_path = data/custom.yaml\n"
    )
    cfg = ServerConfig()

    _load_from_ini(parser, cfg)

    assert cfg.server.port == 8123
    assert cfg.security.docs_enabled is False
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.format == "simple"
    assert cfg.sheet.column_count == 2
    assert cfg.sheet.absolute_catalog_path == PROJECT_ROOT / "data" / "custom.yaml"


@pytest.mark.unit
def test_unknown_log_format_ignored():
    parser = configparser.ConfigParser()
    parser.read_string("[logging]\nformat = fancy\n")
    cfg = ServerConfig()

    _load_from_ini(parser, cfg)

    assert cfg.logging.format == "detailed"


@pytest.mark.unit
class TestHelpers:
    @pytest.mark.parametrize("raw", ["true", "Yes", "1", "on", "enabled"])
    def test_parse_bool_true(self, raw):
        assert _parse_bool(raw) is True

    def test_parse_bool_false(self):
        assert _parse_bool("off") is False

    def test_parse_list(self):
        assert _parse_list(" a, ,b ") == ["a", "b"]
        assert _parse_list("  ") == []

    def test_catalog_path_empty_means_packaged(self):
        assert SheetSettings().absolute_catalog_path is None

    def test_catalog_path_absolute(self, tmp_path):
        assert SheetSettings(catalog_path=str(tmp_path)).absolute_catalog_path == tmp_path


@pytest.mark.unit
def test_config_status_and_summary(capsys):
    status = get_config_status()
    print_config_summary()

    assert "column_count" in status
    assert "SHEET SERVER CONFIGURATION" in capsys.readouterr().out
