"""Detail pane text for the selected catalog item.

The block is assembled top to bottom in a fixed order. Optional fields
that are absent are left out entirely rather than shown empty.
"""

from __future__ import annotations

from collections.abc import Callable, Set
from datetime import datetime, timedelta

from rich.text import Text

from . import timefmt
from .labels import compose_label
from .resources import evaluate_warnings
from .themes import DEFAULT_THEME, Theme
from .types import CatalogItem, ResourceRef

HEADER_WIDTH = 16
PLACEHOLDER = "No table selected"


def _field_line(header: str, value: str, theme: Theme) -> Text:
    line = Text(f"{header}:".ljust(HEADER_WIDTH), style=theme.header_style)
    line.append(value)
    return line


def _resource_value(ref: ResourceRef) -> str:
    return str(ref.path) if ref.path is not None else ref.identifier


def compose_detail(
    item: CatalogItem,
    availability: Set[str],
    theme: Theme = DEFAULT_THEME,
    now: datetime | None = None,
    humanize: Callable[[timedelta], str] = timefmt.humanize,
) -> Text:
    """Build the detail block for `item`.

    Args:
        item: The selected catalog item.
        availability: Resource identifiers known to exist.
        theme: Styles for headers, title and warnings.
        now: Reference time for the "Last Modified" line (defaults to the
            current time in the timezone of `item.last_modified`).
        humanize: Formats the elapsed time; its output is embedded verbatim.

    Returns:
        Rich Text with one line per present field.
    """
    if now is None:
        now = datetime.now(item.last_modified.tzinfo)

    lines: list[Text] = []

    title = compose_label(item, theme)
    title.stylize(theme.title_style)
    lines.append(title)
    lines.append(Text(""))

    for warning in evaluate_warnings(item, availability):
        lines.append(Text(f"{theme.warning_icon} {warning}", style=theme.warning_style))

    lines.append(_field_line("Path", str(item.path), theme))
    if item.game_name:
        lines.append(_field_line("Game Name", item.game_name, theme))
    for ref in item.resources():
        lines.append(_field_line(f"{ref.kind} Path", _resource_value(ref), theme))
    lines.append(_field_line("Last Modified", humanize(now - item.last_modified), theme))

    lines.append(Text(""))
    if item.description:
        lines.append(Text(item.description))

    return Text("\n").join(lines)


def compose_placeholder(theme: Theme = DEFAULT_THEME) -> Text:
    """De-emphasized single line shown when nothing is selected."""
    return Text(PLACEHOLDER, style=theme.placeholder_style)
