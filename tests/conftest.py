"""Pytest fixtures for table-browser tests."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from table_browser.types import CatalogItem, ResourceRef

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_item():
    """Factory for catalog items with sensible defaults."""

    def _make(
        stem: str,
        name: str | None = None,
        age: timedelta = timedelta(days=1),
        rom: str | None = None,
        backglass: str | None = None,
        **kwargs,
    ) -> CatalogItem:
        return CatalogItem(
            path=Path("/tables") / f"{stem}.vpx",
            last_modified=NOW - age,
            metadata_name=name,
            primary_resource=ResourceRef("ROM", rom) if rom else None,
            secondary_resource=ResourceRef("Backglass", backglass) if backglass else None,
            **kwargs,
        )

    return _make


@pytest.fixture
def sample_items(make_item):
    """Three tables with distinct names and ages.

    Alphabetical: Attack, Medieval, Twilight.
    Newest first: Twilight (1h), Attack (2d), Medieval (10d).
    """
    return [
        make_item("mm_v1.2", name="medieval madness", age=timedelta(days=10), rom="mm_109c"),
        make_item("afm", name="attack from mars", age=timedelta(days=2)),
        make_item("tz_94h", name="twilight zone", age=timedelta(hours=1), rom="tz_94h"),
    ]


@pytest.fixture
def table_dir(tmp_path):
    """Create a tables/ and roms/ directory layout on disk.

    Builder returns the created table path.
    """
    tables = tmp_path / "tables"
    roms = tmp_path / "roms"
    tables.mkdir()
    roms.mkdir()

    def _add(stem: str, sidecar: str | None = None, backglass: bool = False, subdir: str = "") -> Path:
        folder = tables / subdir if subdir else tables
        folder.mkdir(parents=True, exist_ok=True)
        table = folder / f"{stem}.vpx"
        table.write_bytes(b"\0")
        if sidecar is not None:
            (folder / f"{stem}.yaml").write_text(sidecar)
        if backglass:
            (folder / f"{stem}.directb2s").write_text("<b2s/>")
        return table

    _add.tables = tables
    _add.roms = roms
    return _add
