"""Tests for the command line entry point."""

import logging

import pytest

from table_browser import cli
from table_browser.app import Browser


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("TABLE_BROWSER_TABLES_DIR", raising=False)
    monkeypatch.delenv("TABLE_BROWSER_ROMS_DIR", raising=False)
    monkeypatch.delenv("TABLE_BROWSER_THEME", raising=False)


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.tables_dir is None
    assert args.sort is None
    assert not args.list


def test_parser_rejects_unknown_sort():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["--sort", "size"])


def test_missing_tables_dir_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--tables", str(tmp_path / "missing"), "--list"])
    assert exc.value.code == 1
    assert "tables directory not found" in capsys.readouterr().out


def test_list_prints_labels_and_warnings(table_dir, capsys):
    table_dir("mm_v1.2", sidecar="name: medieval madness\nrom: mm_109c\n")
    table_dir("afm")

    cli.main(["--tables", str(table_dir.tables), "--roms", str(table_dir.roms), "--list"])

    out = capsys.readouterr().out
    assert out.index("afm") < out.index("Medieval madness mm_v1.2")
    assert "ROM not found: mm_109c" in out


def test_list_empty_library(table_dir, capsys):
    cli.main(["--tables", str(table_dir.tables), "--list"])
    assert "No tables found" in capsys.readouterr().out


def test_interactive_launches_browser(table_dir, monkeypatch):
    table_dir("afm")
    launched = []
    monkeypatch.setattr(Browser, "run", lambda self: launched.append(self))

    cli.main(["--tables", str(table_dir.tables), "--sort", "last_modified", "--theme", "mono"])

    assert len(launched) == 1
    browser = launched[0]
    assert [item.stem for item in browser.state.items] == ["afm"]
    assert browser.state.sort_mode.value == "last_modified"
    assert browser.theme.name == "mono"


def test_debug_writes_log(table_dir, tmp_path):
    cli.main(["--tables", str(table_dir.tables), "--list", "--debug"])
    assert (tmp_path / "xdg" / "table-browser" / "debug.log").exists()


def test_repeated_setup_keeps_one_handler(table_dir):
    argv = ["--tables", str(table_dir.tables), "--list", "--debug"]
    cli.main(argv)
    cli.main(argv)
    handlers = logging.getLogger("table_browser").handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.FileHandler)
    cli.setup_logging(False)
    assert [type(h) for h in logging.getLogger("table_browser").handlers] == [logging.NullHandler]


def test_theme_flag_beats_environment(table_dir, monkeypatch):
    table_dir("afm")
    monkeypatch.setenv("TABLE_BROWSER_THEME", "amber")
    launched = []
    monkeypatch.setattr(Browser, "run", lambda self: launched.append(self))

    cli.main(["--tables", str(table_dir.tables), "--theme", "mono"])

    assert launched[0].theme.name == "mono"


def test_theme_from_environment(table_dir, monkeypatch):
    table_dir("afm")
    monkeypatch.setenv("TABLE_BROWSER_THEME", "amber")
    launched = []
    monkeypatch.setattr(Browser, "run", lambda self: launched.append(self))

    cli.main(["--tables", str(table_dir.tables)])

    assert launched[0].theme.name == "amber"
