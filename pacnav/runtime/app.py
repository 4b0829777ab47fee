"""Interactive explorer bootstrap.

Builds the navigator for an already-loaded package index and either runs the
full-screen loop or, when not attached to a terminal, prints the center list.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..config import save_show_help
from ..input import DEFAULT_PAGE_SIZE, KeyMap
from ..navigator import Navigator
from ..package_model import PackageIndex
from ..render import build_frame, search_cursor
from ..ui_theme import resolve_theme
from .loop import RuntimeLoopCallbacks, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def print_package_list(navigator: Navigator, out: TextIO) -> None:
    """Write the center pane as ``name version`` lines."""
    for record in navigator.center.items:
        out.write(f"{record.name} {record.version}\n")


def run_explorer(
    index: PackageIndex,
    *,
    theme_name: str | None = None,
    no_color: bool = False,
    show_help: bool = True,
    page_size: int = DEFAULT_PAGE_SIZE,
    nopager: bool = False,
) -> None:
    """Explore ``index`` interactively until the user quits."""
    navigator = Navigator(index, show_help=show_help)
    if nopager or not sys.stdin.isatty() or not sys.stdout.isatty():
        print_package_list(navigator, sys.stdout)
        return

    theme = resolve_theme(theme_name, no_color=no_color)
    list_starts = [0, 0, 0]
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())

    def render(snapshot, width: int, height: int) -> None:
        frame = build_frame(snapshot, width, height, theme, list_starts)
        terminal.write_frame(frame, search_cursor(snapshot, width, height))

    logger.info("starting explorer with %d packages (theme %s)", len(index), theme.name)
    run_main_loop(
        navigator,
        KeyMap(navigator, page_size=page_size),
        terminal,
        stdin_fd,
        RuntimeLoopCallbacks(render=render, on_help_toggled=save_show_help),
    )
