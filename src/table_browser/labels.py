"""List labels for catalog items."""

from __future__ import annotations

import logging

from rich.text import Text

from .themes import DEFAULT_THEME, Theme
from .types import CatalogItem

logger = logging.getLogger(__name__)


def capitalize_first(value: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return value[:1].upper() + value[1:]


def _label_parts(item: CatalogItem) -> tuple[str | None, str]:
    """Return (capitalized metadata name or None, file stem)."""
    stem = item.stem
    if item.metadata_name:
        return capitalize_first(item.metadata_name), stem
    return None, stem


def display_name(item: CatalogItem) -> str:
    """Plain-text label, used for sorting and non-interactive output."""
    name, stem = _label_parts(item)
    if name is None:
        return stem
    return f"{name} {stem}"


def compose_label(item: CatalogItem, theme: Theme = DEFAULT_THEME) -> Text:
    """Build the list label for one item.

    With a metadata name the label is the capitalized name followed by the
    dimmed file stem; without one it is just the stem.
    """
    name, stem = _label_parts(item)
    if not stem:
        logger.warning("Catalog item without a file stem: %s", item.path)
        return Text("")
    if name is None:
        return Text(stem)
    return Text.assemble(name, " ", (stem, theme.dim_style))
