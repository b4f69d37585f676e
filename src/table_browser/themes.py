"""Configurable themes for table-browser screens.

The Theme dataclass holds every visual token the composers use, so the
list, detail and footer code never hard-code colors.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Visual theme for the browser.

    All values are Rich style strings (e.g. "bold cyan", "dim").

    Attributes:
        name: Palette name used for lookup.
        selected_style: Style of the highlighted list row.
        header_style: Style of the field headers in the detail pane.
        key_style: Style of key labels in the footer.
        muted_style: Style of footer brackets and arrows.
        warning_style: Style of warning lines.
        title_style: Style of the item title in the detail pane.
        dim_style: Style of the file stem next to a metadata name.
        placeholder_style: Style of the "No table selected" line.
        border_style: Style of panel borders.

        highlight_symbol: Prefix for the selected list row.
        warning_icon: Prefix for warning lines.
        scrollbar_thumb: Character for the visible part of the scrollbar.
        scrollbar_track: Character for the rest of the scrollbar.
    """

    name: str = "default"

    # Styles
    selected_style: str = "bold color(44) on color(236)"
    header_style: str = "color(44)"
    key_style: str = "color(214)"
    muted_style: str = "rgb(100,100,100)"
    warning_style: str = "color(214)"
    title_style: str = "bold color(214)"
    dim_style: str = "dim"
    placeholder_style: str = "italic"
    border_style: str = "default"

    # Icons
    highlight_symbol: str = "> "
    warning_icon: str = "⚠️"
    scrollbar_thumb: str = "█"
    scrollbar_track: str = "│"


DEFAULT_THEME = Theme()

_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "amber": Theme(
        name="amber",
        selected_style="bold black on color(214)",
        header_style="color(214)",
        key_style="bold color(214)",
        warning_style="color(208)",
        title_style="bold color(220)",
        border_style="color(136)",
    ),
    "mono": Theme(
        name="mono",
        selected_style="reverse",
        header_style="bold",
        key_style="bold",
        muted_style="dim",
        warning_style="bold",
        title_style="bold underline",
        border_style="default",
        warning_icon="!",
        scrollbar_thumb="#",
        scrollbar_track="|",
    ),
}


def _normalize_theme_key(value: str) -> str:
    return value.strip().lower().replace("_", "-")


def available_themes() -> list[str]:
    """Names of the bundled palettes."""
    return sorted(_THEMES)


def get_theme(name: str | None = None) -> Theme:
    """Resolve a theme by name. Unknown names fall back to the default theme."""
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(_normalize_theme_key(name), DEFAULT_THEME)
