"""YAML configuration for table-browser.

Config lives at ~/.config/table-browser/config.yaml (XDG_CONFIG_HOME is
honored). Values from the file are merged over DEFAULT_CONFIG, then a few
environment variables override them.
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from .scanner import DEFAULT_EXTENSIONS
from .types import SortMode

DEFAULT_CONFIG: dict[str, Any] = {
    "tables_dir": "~/vpinball/tables",
    "roms_dir": "~/vpinball/roms",
    "extensions": list(DEFAULT_EXTENSIONS),
    "sort": SortMode.NAME.value,
    "theme": "default",
    "debug": False,
}

# Environment variable -> config key
ENV_OVERRIDES: dict[str, str] = {
    "TABLE_BROWSER_TABLES_DIR": "tables_dir",
    "TABLE_BROWSER_ROMS_DIR": "roms_dir",
    "TABLE_BROWSER_THEME": "theme",
}


def get_config_dir() -> Path:
    """Get the table-browser config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "table-browser"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def get_log_path() -> Path:
    """Get the path to the debug log file."""
    return get_config_dir() / "debug.log"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env(cfg: dict[str, Any]) -> dict[str, Any]:
    for env_var, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            cfg[key] = value
    return cfg


def load_config() -> dict[str, Any]:
    """Load config.yaml merged over defaults, then apply env overrides.

    A missing, unreadable or malformed file yields the defaults.
    """
    config_path = get_config_path()
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
        if isinstance(data, dict):
            cfg = _deep_merge(cfg, data)
    except FileNotFoundError:
        pass
    except (yaml.YAMLError, OSError):
        pass
    return _apply_env(cfg)


def save_config(cfg: dict[str, Any]) -> None:
    """Write `cfg` to config.yaml."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.safe_dump(cfg, f, default_flow_style=False, sort_keys=False)


def get_tables_dir(cfg: dict[str, Any] | None = None) -> Path:
    """Directory scanned for table files."""
    if cfg is None:
        cfg = load_config()
    raw = cfg.get("tables_dir") or DEFAULT_CONFIG["tables_dir"]
    return Path(os.path.expanduser(raw))


def get_roms_dir(cfg: dict[str, Any] | None = None) -> Path | None:
    """Directory holding ROM zips, or None when disabled (empty value)."""
    if cfg is None:
        cfg = load_config()
    raw = cfg.get("roms_dir")
    if not raw:
        return None
    return Path(os.path.expanduser(raw))


def get_sort_mode(cfg: dict[str, Any] | None = None) -> SortMode:
    """Initial sort mode."""
    if cfg is None:
        cfg = load_config()
    return SortMode.parse(cfg.get("sort"))


def get_extensions(cfg: dict[str, Any] | None = None) -> list[str]:
    """Table file extensions to scan for."""
    if cfg is None:
        cfg = load_config()
    raw = cfg.get("extensions") or DEFAULT_CONFIG["extensions"]
    if isinstance(raw, str):
        raw = [raw]
    return [str(ext) for ext in raw]
