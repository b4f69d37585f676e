"""Selection, scroll and sort state for the item list.

SelectionState is the only mutable object in the browser. Input handlers
call its operations between frames; rendering only reads it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from .labels import display_name
from .types import CatalogItem, SortMode

# (key function, reverse) per sort mode. Python's sort is stable, so ties
# keep the order the items were supplied in, in both directions.
_SORT_KEYS: dict[SortMode, tuple[Callable[[CatalogItem], Any], bool]] = {
    SortMode.NAME: (lambda item: display_name(item).casefold(), False),
    SortMode.LAST_MODIFIED: (lambda item: item.last_modified, True),
}


def sort_items(items: Iterable[CatalogItem], mode: SortMode) -> list[CatalogItem]:
    """Return `items` ordered for `mode`."""
    key, reverse = _SORT_KEYS[mode]
    return sorted(items, key=key, reverse=reverse)


class SelectionState:
    """Cursor, scroll offset and sort mode over an ordered list of items.

    Items are identified by path: after a re-sort or a wholesale refresh the
    cursor follows the previously selected item to its new index.

    Invariants:
        - cursor is None iff items is empty, otherwise 0 <= cursor < len(items)
        - scroll_offset <= cursor whenever a cursor exists

    Args:
        items: Initial items, in the order the scanner produced them.
        sort_mode: Initial ordering, applied immediately.
    """

    def __init__(
        self,
        items: Iterable[CatalogItem] = (),
        sort_mode: SortMode = SortMode.NAME,
    ):
        self.sort_mode = sort_mode
        # Order as supplied; every sort starts from here so ties stay stable.
        self._source: list[CatalogItem] = list(items)
        self.items: list[CatalogItem] = sort_items(self._source, sort_mode)
        self.cursor: int | None = 0 if self.items else None
        self.scroll_offset = 0

    @property
    def selected(self) -> CatalogItem | None:
        """Currently selected item, or None when the list is empty."""
        if self.cursor is None:
            return None
        return self.items[self.cursor]

    def _index_of(self, path: Path) -> int | None:
        for i, item in enumerate(self.items):
            if item.path == path:
                return i
        return None

    def _resolve_cursor(self, previous: CatalogItem | None) -> None:
        """Point the cursor at `previous` again, or fall back to the top."""
        if not self.items:
            self.cursor = None
            self.scroll_offset = 0
            return
        index = self._index_of(previous.path) if previous is not None else None
        self.cursor = index if index is not None else 0
        self.scroll_offset = min(self.scroll_offset, self.cursor)

    def _move_cursor(self, delta: int) -> None:
        """Move cursor by `delta`, wrapping around both ends."""
        if self.cursor is None:
            return
        self.cursor = (self.cursor + delta) % len(self.items)
        self.scroll_offset = min(self.scroll_offset, self.cursor)

    def select_next(self) -> None:
        self._move_cursor(+1)

    def select_previous(self) -> None:
        self._move_cursor(-1)

    def select_first(self) -> None:
        if self.items:
            self.cursor = 0
            self.scroll_offset = 0

    def select_last(self) -> None:
        if self.items:
            self.cursor = len(self.items) - 1

    def set_sort_mode(self, mode: SortMode) -> None:
        """Re-sort the items for `mode`, keeping the same item selected."""
        previous = self.selected
        self.sort_mode = mode
        self.items = sort_items(self._source, mode)
        self._resolve_cursor(previous)

    def toggle_sort_mode(self) -> None:
        """Switch between alphabetical and last-modified ordering."""
        self.set_sort_mode(self.sort_mode.toggled())

    def replace_items(self, items: Iterable[CatalogItem]) -> None:
        """Swap in a freshly scanned item list.

        The selection follows the same path when it still exists, otherwise
        it falls back to the first item (or None for an empty list).
        """
        previous = self.selected
        self._source = list(items)
        self.items = sort_items(self._source, self.sort_mode)
        self._resolve_cursor(previous)

    def visible_range(self, viewport_height: int) -> range:
        """Indices of the items shown in a viewport of `viewport_height` rows.

        Pure: computes the minimal offset that keeps the cursor visible
        without storing it.
        """
        height = max(1, viewport_height)
        offset = 0 if self.cursor is None else max(0, self.cursor - height + 1)
        return range(offset, min(offset + height, len(self.items)))

    def scroll_sync(self, viewport_height: int) -> None:
        """Store the minimal scroll offset that keeps the cursor visible."""
        self.scroll_offset = self.visible_range(viewport_height).start
