"""Command line entry point for table-browser."""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from . import __version__, config
from .labels import compose_label
from .resources import evaluate_warnings
from .scanner import scan_resources, scan_tables
from .state import SelectionState
from .themes import available_themes, get_theme
from .types import SortMode

logger = logging.getLogger(__name__)

console = Console(highlight=False)


def setup_logging(debug: bool) -> None:
    """Send debug logs to the config dir; the live screen owns the terminal.

    Replaces any handler installed by an earlier call.
    """
    root = logging.getLogger("table_browser")
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()
    if not debug:
        root.addHandler(logging.NullHandler())
        return
    log_path = config.get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="table-browser",
        description="table-browser: browse a library of table files in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"table-browser {__version__}")
    parser.add_argument("--tables", dest="tables_dir", help="Directory containing table files")
    parser.add_argument("--roms", dest="roms_dir", help="Directory containing ROM zips")
    parser.add_argument(
        "--sort",
        choices=[mode.value for mode in SortMode],
        help="Initial sort order (default from config)",
    )
    parser.add_argument("--theme", choices=available_themes(), help="Color theme")
    parser.add_argument("--list", action="store_true", help="Print tables and warnings, then exit")
    parser.add_argument("--debug", action="store_true", help="Write debug log to the config dir")
    return parser


def print_listing(state: SelectionState, availability, theme) -> None:
    """Non-interactive listing: one label per table, warnings indented below."""
    if not state.items:
        console.print("[dim]No tables found[/dim]")
        return
    for item in state.items:
        console.print(compose_label(item, theme))
        for warning in evaluate_warnings(item, availability):
            console.print(f"  {theme.warning_icon} {warning}", style=theme.warning_style)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = config.load_config()
    if args.tables_dir:
        cfg["tables_dir"] = args.tables_dir
    if args.roms_dir:
        cfg["roms_dir"] = args.roms_dir
    if args.sort:
        cfg["sort"] = args.sort
    if args.theme:
        cfg["theme"] = args.theme

    setup_logging(args.debug or bool(cfg.get("debug")))

    tables_dir = config.get_tables_dir(cfg)
    roms_dir = config.get_roms_dir(cfg)
    extensions = config.get_extensions(cfg)
    theme = get_theme(cfg.get("theme"))

    if not tables_dir.is_dir():
        console.print(f"[red]Error:[/red] tables directory not found: {tables_dir}")
        sys.exit(1)

    def rescan():
        return (
            scan_tables(tables_dir, extensions, roms_dir),
            scan_resources(roms_dir, tables_dir),
        )

    items, availability = rescan()
    state = SelectionState(items, sort_mode=config.get_sort_mode(cfg))
    logger.debug(f"Loaded {len(state.items)} tables from {tables_dir}")

    if args.list:
        print_listing(state, availability, theme)
        return

    from .app import Browser

    try:
        Browser(state, availability, rescan=rescan, console=console, theme=theme).run()
    except KeyboardInterrupt:
        print()
        sys.exit(130)


if __name__ == "__main__":
    main()
