"""Type definitions for table-browser.

Shared dataclasses and enums for catalog items and sort modes. Items are
produced by the scanner and treated as read-only by everything else.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class SortMode(str, Enum):
    """Ordering applied to the item list."""

    NAME = "name"
    LAST_MODIFIED = "last_modified"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Human-readable name shown in the list title."""
        if self == SortMode.NAME:
            return "Alphabetical"
        return "Last Modified"

    def toggled(self) -> "SortMode":
        """Return the other sort mode."""
        if self == SortMode.NAME:
            return SortMode.LAST_MODIFIED
        return SortMode.NAME

    @classmethod
    def parse(cls, value: str | SortMode | None, default: SortMode | None = None) -> SortMode:
        """Parse a config or CLI spelling ("name", "modified", "last-modified", ...)."""
        if isinstance(value, SortMode):
            return value
        fallback = default if default is not None else cls.NAME
        if not value:
            return fallback
        key = str(value).strip().lower().replace("-", "_")
        if key in ("modified", "mtime", "recent"):
            return cls.LAST_MODIFIED
        try:
            return cls(key)
        except ValueError:
            return fallback


@dataclass(frozen=True)
class ResourceRef:
    """An external resource a catalog item depends on.

    Attributes:
        kind: Human name of the resource type ("ROM", "Backglass").
        identifier: Name checked against the availability set.
        path: Where the resource lives, when known.
    """

    kind: str
    identifier: str
    path: Path | None = None


@dataclass(frozen=True)
class CatalogItem:
    """One browsable table file and its metadata.

    Attributes:
        path: Location of the table file (required).
        last_modified: Modification time of the file (timezone-aware).
        metadata_name: Name declared in the table metadata. Empty means absent.
        game_name: Name of the game the table emulates.
        primary_resource: First declared dependency (usually the ROM).
        secondary_resource: Second declared dependency (usually the backglass).
        description: Free text from the table metadata.
    """

    path: Path
    last_modified: datetime
    metadata_name: str | None = None
    game_name: str | None = None
    primary_resource: ResourceRef | None = None
    secondary_resource: ResourceRef | None = None
    description: str | None = None

    @property
    def stem(self) -> str:
        """File name without its extension."""
        return self.path.stem

    def resources(self) -> Iterator[ResourceRef]:
        """Yield declared resource refs, primary before secondary."""
        for ref in (self.primary_resource, self.secondary_resource):
            if ref is not None:
                yield ref
