"""Frame rendering for the browser screen.

render() turns the current SelectionState into a Rich renderable: the item
list on the left, the detail pane on the right and the key-binding footer
along the bottom. Rendering only reads state; scrolling is synced by the
host before each frame.
"""

from __future__ import annotations

from collections.abc import Callable, Set
from dataclasses import dataclass
from datetime import datetime, timedelta

from rich import box
from rich.console import RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from . import timefmt
from .bindings import bindings, context_for, format_footer
from .detail import compose_detail, compose_placeholder
from .labels import compose_label
from .state import SelectionState
from .themes import DEFAULT_THEME, Theme

MARGIN = 1
FOOTER_HEIGHT = 1
LIST_PERCENT = 40
PANEL_BORDER = 2

LIST_TITLE = "Tables"
DETAIL_TITLE = "Table Info"


@dataclass(frozen=True)
class Region:
    """Rectangle in terminal cells."""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class FrameRegions:
    """The three areas of the browser screen."""

    list: Region
    detail: Region
    footer: Region


def split_regions(width: int, height: int) -> FrameRegions:
    """Partition a width x height screen into list, detail and footer areas.

    A margin surrounds everything; the footer takes the last row inside the
    margin and the rest is split 40/60 between list and detail.
    """
    inner_w = max(0, width - 2 * MARGIN)
    inner_h = max(0, height - 2 * MARGIN)
    footer_h = min(FOOTER_HEIGHT, inner_h)
    body_h = inner_h - footer_h
    list_w = inner_w * LIST_PERCENT // 100

    return FrameRegions(
        list=Region(MARGIN, MARGIN, list_w, body_h),
        detail=Region(MARGIN + list_w, MARGIN, inner_w - list_w, body_h),
        footer=Region(MARGIN, MARGIN + body_h, inner_w, footer_h),
    )


def list_viewport_height(height: int) -> int:
    """Number of list rows visible on a screen `height` cells tall."""
    body_h = split_regions(0, height).list.height
    return max(0, body_h - PANEL_BORDER)


def _scrollbar(total: int, visible: range, height: int, theme: Theme) -> Text:
    """Vertical scrollbar column; blank when everything fits."""
    if height <= 0 or total <= len(visible):
        return Text("")
    thumb = max(1, height * len(visible) // total)
    start = min(height - thumb, visible.start * height // total)
    cells = [
        theme.scrollbar_thumb if start <= row < start + thumb else theme.scrollbar_track
        for row in range(height)
    ]
    return Text("\n".join(cells), style=theme.muted_style)


def _list_title(state: SelectionState, theme: Theme) -> Text:
    return Text.assemble(LIST_TITLE, (f" ({state.sort_mode.label}) ", theme.dim_style))


def _list_lines(state: SelectionState, visible: range, theme: Theme) -> list[Text]:
    """One label per visible item; the selected row is styled end to end."""
    blank_symbol = " " * len(theme.highlight_symbol)

    lines: list[Text] = []
    for index in visible:
        is_selected = index == state.cursor
        line = Text(theme.highlight_symbol if is_selected else blank_symbol)
        line.append_text(compose_label(state.items[index], theme))
        if is_selected:
            line.stylize(theme.selected_style)
        lines.append(line)
    return lines


def _list_panel(state: SelectionState, viewport: int, theme: Theme) -> Panel:
    visible = state.visible_range(viewport)
    rows = Text("\n").join(_list_lines(state, visible, theme))
    rows.no_wrap = True
    rows.overflow = "ellipsis"

    grid = Table.grid(expand=True)
    grid.add_column(ratio=1, no_wrap=True)
    grid.add_column(width=1)
    grid.add_row(rows, _scrollbar(len(state.items), visible, viewport, theme))

    return Panel(
        grid,
        title=_list_title(state, theme),
        title_align="left",
        box=box.ROUNDED,
        border_style=theme.border_style,
    )


def _detail_panel(
    state: SelectionState,
    availability: Set[str],
    theme: Theme,
    now: datetime | None,
    humanize: Callable[[timedelta], str],
) -> Panel:
    item = state.selected
    if item is None:
        body = compose_placeholder(theme)
    else:
        body = compose_detail(item, availability, theme=theme, now=now, humanize=humanize)
    return Panel(
        body,
        title=DETAIL_TITLE,
        title_align="left",
        box=box.ROUNDED,
        border_style=theme.border_style,
    )


def render_footer(state: SelectionState, theme: Theme = DEFAULT_THEME) -> Text:
    """Footer line listing the key bindings for the current context."""
    return format_footer(bindings(context_for(state)), theme)


def _margin() -> Layout:
    return Layout(Text(""), size=MARGIN)


def render(
    state: SelectionState,
    availability: Set[str],
    size: tuple[int, int],
    theme: Theme | None = None,
    now: datetime | None = None,
    humanize: Callable[[timedelta], str] = timefmt.humanize,
) -> RenderableType:
    """Build the full screen for `state`.

    Args:
        state: Current selection state (read only).
        availability: Snapshot of resource identifiers known to exist.
        size: Screen (width, height) in cells.
        theme: Visual theme (default theme when None).
        now: Reference time for relative timestamps.
        humanize: Formats elapsed durations in the detail pane.

    Returns:
        A Rich Layout sized to fill the screen.
    """
    theme = theme or DEFAULT_THEME
    width, height = size
    regions = split_regions(width, height)
    viewport = list_viewport_height(height)

    frame = Layout(name="frame")
    frame.split_column(
        Layout(name="body", ratio=1),
        Layout(name="footer", size=FOOTER_HEIGHT),
    )
    frame["body"].split_row(
        Layout(name="list", size=regions.list.width),
        Layout(name="detail", ratio=1),
    )
    frame["list"].update(_list_panel(state, viewport, theme))
    frame["detail"].update(_detail_panel(state, availability, theme, now, humanize))
    frame["footer"].update(render_footer(state, theme))

    middle = Layout(name="middle")
    middle.split_row(_margin(), frame, _margin())

    root = Layout(name="root")
    root.split_column(_margin(), middle, _margin())
    return root
