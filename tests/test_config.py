"""Tests for YAML configuration."""

from pathlib import Path

import pytest

from table_browser import config
from table_browser.types import SortMode


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("TABLE_BROWSER_TABLES_DIR", raising=False)
    monkeypatch.delenv("TABLE_BROWSER_ROMS_DIR", raising=False)
    monkeypatch.delenv("TABLE_BROWSER_THEME", raising=False)
    return tmp_path / "xdg" / "table-browser"


def test_paths(isolated_config):
    assert config.get_config_dir() == isolated_config
    assert config.get_config_path() == isolated_config / "config.yaml"
    assert config.get_log_path() == isolated_config / "debug.log"


def test_defaults_when_missing():
    assert config.load_config() == config.DEFAULT_CONFIG


def test_load_does_not_share_defaults():
    cfg = config.load_config()
    cfg["extensions"].append(".fpt")
    assert config.DEFAULT_CONFIG["extensions"] == [".vpx"]


def test_save_and_load_roundtrip():
    cfg = config.load_config()
    cfg["tables_dir"] = "/games/tables"
    cfg["sort"] = "last_modified"
    config.save_config(cfg)

    loaded = config.load_config()
    assert loaded["tables_dir"] == "/games/tables"
    assert config.get_sort_mode(loaded) is SortMode.LAST_MODIFIED


def test_partial_file_merged_over_defaults(isolated_config):
    isolated_config.mkdir(parents=True)
    (isolated_config / "config.yaml").write_text("theme: amber\n")
    cfg = config.load_config()
    assert cfg["theme"] == "amber"
    assert cfg["tables_dir"] == config.DEFAULT_CONFIG["tables_dir"]


def test_malformed_file_yields_defaults(isolated_config):
    isolated_config.mkdir(parents=True)
    (isolated_config / "config.yaml").write_text("tables_dir: [oops\n")
    assert config.load_config() == config.DEFAULT_CONFIG


def test_non_mapping_file_yields_defaults(isolated_config):
    isolated_config.mkdir(parents=True)
    (isolated_config / "config.yaml").write_text("- a\n- b\n")
    assert config.load_config() == config.DEFAULT_CONFIG


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TABLE_BROWSER_TABLES_DIR", "/env/tables")
    monkeypatch.setenv("TABLE_BROWSER_ROMS_DIR", "/env/roms")
    monkeypatch.setenv("TABLE_BROWSER_THEME", "amber")
    cfg = config.load_config()
    assert config.get_tables_dir(cfg) == Path("/env/tables")
    assert config.get_roms_dir(cfg) == Path("/env/roms")
    assert cfg["theme"] == "amber"


def test_tables_dir_expands_user(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert config.get_tables_dir({"tables_dir": "~/t"}) == tmp_path / "t"


def test_roms_dir_disabled():
    assert config.get_roms_dir({"roms_dir": ""}) is None
    assert config.get_roms_dir({"roms_dir": None}) is None


def test_extensions_accepts_single_string():
    assert config.get_extensions({"extensions": ".vpx"}) == [".vpx"]
    assert config.get_extensions({}) == [".vpx"]
