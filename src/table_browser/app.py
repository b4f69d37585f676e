"""Interactive browser loop using Rich.Live.

Keys are read one at a time with readchar, applied to the SelectionState,
and the screen is redrawn after each key. Rescans swap in a whole new item
list and availability snapshot between frames.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Set
from enum import Enum

import readchar
from rich.console import Console
from rich.live import Live

from .keys import is_down, is_exit, is_first, is_last, is_rescan, is_sort, is_up
from .render import list_viewport_height, render
from .state import SelectionState
from .themes import DEFAULT_THEME, Theme
from .types import CatalogItem

logger = logging.getLogger(__name__)


class KeyResult(str, Enum):
    """What the loop should do after a key was handled."""

    CONTINUE = "continue"
    RESCAN = "rescan"
    QUIT = "quit"


def handle_key(state: SelectionState, key: str) -> KeyResult:
    """Apply one key press to `state`."""
    if is_exit(key):
        return KeyResult.QUIT
    if is_rescan(key):
        return KeyResult.RESCAN
    if is_down(key):
        state.select_next()
    elif is_up(key):
        state.select_previous()
    elif is_first(key):
        state.select_first()
    elif is_last(key):
        state.select_last()
    elif is_sort(key):
        state.toggle_sort_mode()
    return KeyResult.CONTINUE


class Browser:
    """Full-screen table browser.

    Args:
        state: Selection state to drive.
        availability: Initial resource availability snapshot.
        rescan: Callback returning fresh (items, availability); None disables rescans.
        console: Rich Console for output (auto-created if not provided).
        theme: Visual theme.
        read_key: Key reader, readchar.readkey by default.
    """

    def __init__(
        self,
        state: SelectionState,
        availability: Set[str],
        rescan: Callable[[], tuple[Iterable[CatalogItem], Set[str]]] | None = None,
        console: Console | None = None,
        theme: Theme | None = None,
        read_key: Callable[[], str] = readchar.readkey,
    ):
        self.state = state
        self.availability = frozenset(availability)
        self.console = console or Console()
        self.theme = theme or DEFAULT_THEME
        self._rescan = rescan
        self._read_key = read_key
        self.should_exit = False

    def rescan(self) -> None:
        """Replace items and availability with a fresh scan."""
        if self._rescan is None:
            return
        items, availability = self._rescan()
        self.state.replace_items(items)
        self.availability = frozenset(availability)
        logger.debug(f"Rescanned: {len(self.state.items)} tables, {len(self.availability)} resources")

    def frame(self):
        """Sync scrolling to the current screen size and build the next frame."""
        width, height = self.console.size
        self.state.scroll_sync(list_viewport_height(height))
        return render(self.state, self.availability, (width, height), theme=self.theme)

    def process_key(self, key: str) -> None:
        result = handle_key(self.state, key)
        if result is KeyResult.QUIT:
            self.should_exit = True
        elif result is KeyResult.RESCAN:
            self.rescan()

    def run(self) -> None:
        """Show the browser and block until the user quits."""
        with Live(
            self.frame(),
            console=self.console,
            screen=True,
            auto_refresh=False,
        ) as live:
            while not self.should_exit:
                try:
                    key = self._read_key()
                except KeyboardInterrupt:
                    break
                self.process_key(key)
                live.update(self.frame(), refresh=True)
