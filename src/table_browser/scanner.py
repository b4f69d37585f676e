"""Discovery of table files and the resources they depend on.

Tables are found by extension under a root directory. A YAML sidecar with
the same stem (``Medieval Madness.yaml`` next to ``Medieval Madness.vpx``)
can declare metadata:

    name: medieval madness
    game_name: mm_109c
    rom: mm_109c
    backglass: Medieval Madness.directb2s
    description: |
      Williams 1997.

A ``.directb2s`` file with the same stem counts as a declared backglass even
without a sidecar.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from .types import CatalogItem, ResourceRef

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".vpx",)
SIDECAR_SUFFIX = ".yaml"
BACKGLASS_SUFFIX = ".directb2s"
ROM_SUFFIX = ".zip"

ROM_KIND = "ROM"
BACKGLASS_KIND = "Backglass"


def _iter_files(root: Path) -> Iterable[Path]:
    """Walk `root` recursively, skipping hidden directories."""
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        for filename in sorted(filenames):
            yield Path(dirpath) / filename


def _read_sidecar(path: Path) -> dict[str, Any]:
    """Load the YAML sidecar for a table, or {} if missing or unreadable."""
    sidecar = path.with_suffix(SIDECAR_SUFFIX)
    if not sidecar.is_file():
        return {}
    try:
        with open(sidecar) as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        logger.debug(f"Skipping sidecar {sidecar}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.debug(f"Ignoring sidecar {sidecar}: not a mapping")
        return {}
    return data


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _rom_ref(rom: str | None, roms_dir: Path | None) -> ResourceRef | None:
    if not rom:
        return None
    identifier = rom.lower()
    path = None
    if roms_dir is not None:
        candidate = roms_dir / f"{identifier}{ROM_SUFFIX}"
        if candidate.is_file():
            path = candidate
    return ResourceRef(kind=ROM_KIND, identifier=identifier, path=path)


def _backglass_ref(table: Path, declared: str | None) -> ResourceRef | None:
    if declared:
        return ResourceRef(kind=BACKGLASS_KIND, identifier=declared, path=table.parent / declared)
    sibling = table.with_suffix(BACKGLASS_SUFFIX)
    if sibling.is_file():
        return ResourceRef(kind=BACKGLASS_KIND, identifier=sibling.name, path=sibling)
    return None


def load_table(path: Path, roms_dir: Path | None = None) -> CatalogItem:
    """Build the catalog item for a single table file."""
    meta = _read_sidecar(path)
    mtime = path.stat().st_mtime
    return CatalogItem(
        path=path,
        last_modified=datetime.fromtimestamp(mtime, tz=timezone.utc),
        metadata_name=_optional_str(meta, "name"),
        game_name=_optional_str(meta, "game_name"),
        primary_resource=_rom_ref(_optional_str(meta, "rom"), roms_dir),
        secondary_resource=_backglass_ref(path, _optional_str(meta, "backglass")),
        description=_optional_str(meta, "description"),
    )


def scan_tables(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    roms_dir: Path | None = None,
) -> list[CatalogItem]:
    """Find all table files under `root`.

    Args:
        root: Directory to walk.
        extensions: Table file extensions, matched case-insensitively.
        roms_dir: Directory holding ROM zips, used to fill in ROM paths.

    Returns:
        Catalog items in walk order (sorting is up to the caller).
    """
    wanted = {ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in extensions}
    items: list[CatalogItem] = []

    if not root.is_dir():
        logger.debug(f"Tables directory does not exist: {root}")
        return items

    for path in _iter_files(root):
        if path.suffix.lower() not in wanted:
            continue
        try:
            items.append(load_table(path, roms_dir))
        except OSError as e:
            logger.debug(f"Skipping {path}: {e}")

    logger.debug(f"Scanned {len(items)} tables under {root}")
    return items


def scan_resources(roms_dir: Path | None, tables_root: Path | None = None) -> frozenset[str]:
    """Snapshot of resource identifiers that exist on disk.

    ROMs are identified by their lower-cased zip stem, backglasses by file
    name, matching the identifiers scan_tables() declares.
    """
    found: set[str] = set()

    if roms_dir is not None and roms_dir.is_dir():
        for path in roms_dir.iterdir():
            if path.is_file() and path.suffix.lower() == ROM_SUFFIX:
                found.add(path.stem.lower())

    if tables_root is not None and tables_root.is_dir():
        for path in _iter_files(tables_root):
            if path.suffix.lower() == BACKGLASS_SUFFIX:
                found.add(path.name)

    return frozenset(found)
