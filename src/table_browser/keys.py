"""Keyboard input helpers for the browser loop.

Readable predicates instead of repeated inline key comparisons.
"""

from __future__ import annotations

import readchar


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations)."""
    return key in (readchar.key.ESC, "\x1b", "\x1b\x1b")


def is_exit(key: str) -> bool:
    """Check if key quits the browser (q, Esc or Ctrl+C)."""
    return key.lower() == "q" or is_escape(key) or key == readchar.key.CTRL_C


def is_up(key: str) -> bool:
    """Check if key is up arrow or vim 'k'."""
    return key == "k" or key == readchar.key.UP


def is_down(key: str) -> bool:
    """Check if key is down arrow or vim 'j'."""
    return key == "j" or key == readchar.key.DOWN


def is_first(key: str) -> bool:
    """Check if key jumps to the first item (Home or 'g')."""
    return key == "g" or key == readchar.key.HOME


def is_last(key: str) -> bool:
    """Check if key jumps to the last item (End or 'G')."""
    return key == "G" or key == readchar.key.END


def is_sort(key: str) -> bool:
    """Check if key toggles the sort mode."""
    return key.lower() == "s"


def is_rescan(key: str) -> bool:
    """Check if key requests a rescan of the tables directory."""
    return key.lower() == "r"
