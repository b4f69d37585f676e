"""Key bindings shown in the footer."""

from __future__ import annotations

from enum import Enum

from rich.text import Text

from .state import SelectionState
from .themes import DEFAULT_THEME, Theme


class BindingContext(str, Enum):
    """Screen context the footer describes."""

    BROWSE = "browse"
    EMPTY = "empty"


_BINDINGS: dict[BindingContext, list[tuple[str, str]]] = {
    BindingContext.BROWSE: [
        ("↑↓/jk", "Navigate"),
        ("g/G", "First/Last"),
        ("s", "Sort"),
        ("r", "Rescan"),
        ("q", "Quit"),
    ],
    BindingContext.EMPTY: [
        ("r", "Rescan"),
        ("q", "Quit"),
    ],
}


def bindings(context: BindingContext) -> list[tuple[str, str]]:
    """Ordered (key label, description) pairs for `context`."""
    return list(_BINDINGS[context])


def context_for(state: SelectionState) -> BindingContext:
    """Pick the binding context matching the current state."""
    return BindingContext.BROWSE if state.items else BindingContext.EMPTY


def format_footer(pairs: list[tuple[str, str]], theme: Theme = DEFAULT_THEME) -> Text:
    """Join bindings as "[key → desc]" entries separated by single spaces."""
    line = Text(justify="center", no_wrap=True, overflow="ellipsis")
    for i, (keys, desc) in enumerate(pairs):
        if i:
            line.append(" ")
        line.append("[", style=theme.muted_style)
        line.append(keys, style=theme.key_style)
        line.append(" → ", style=theme.muted_style)
        line.append(desc)
        line.append("]", style=theme.muted_style)
    return line
