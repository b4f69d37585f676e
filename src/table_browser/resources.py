"""Cross-checks an item's declared resources against what is available."""

from __future__ import annotations

from collections.abc import Set

from .types import CatalogItem


def evaluate_warnings(item: CatalogItem, availability: Set[str]) -> list[str]:
    """Return one warning per declared resource missing from `availability`.

    Warnings follow field order (primary, then secondary). Items that declare
    no resources never warn.
    """
    return [
        f"{ref.kind} not found: {ref.identifier}"
        for ref in item.resources()
        if ref.identifier not in availability
    ]
