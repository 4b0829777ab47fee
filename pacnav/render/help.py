"""Help panel content: the key binding table shown above the panes."""

from __future__ import annotations

from ..ansi import clip_ansi_line
from ..ui_theme import UITheme

HELP_ROWS: tuple[tuple[str, str], ...] = (
    ("left, right", "move between lists"),
    ("up, down, PgUp, PgDown", "move in list"),
    ("1, 0", "move to start/end of list"),
    ("Enter", "focus center list on selected entry"),
    ("s", "toggle sorting between alphabetical-asc and size-desc in active view"),
    ("e", "toggle showing only explicitly installed packages in main view"),
    ("/", "start entering search term, enter to search, esc to cancel"),
    ("n", "go to next search match downwards"),
    ("N", "go to next search match upwards"),
    ("?", "toggle help"),
    ("q", "quit"),
)


def help_panel_row_count(max_lines: int, show_help: bool) -> int:
    """Rows taken by the help panel, always leaving room for panes and status."""
    if not show_help:
        return 0
    available = max_lines - 4
    if available <= 1:
        return 0
    return min(len(HELP_ROWS) + 1, available)


def help_panel_lines(theme: UITheme, width: int, rows: int) -> list[str]:
    """Return ``rows`` styled help lines clipped to ``width``."""
    if rows <= 0:
        return []
    key_width = max(len(key) for key, _action in HELP_ROWS)
    lines = [f"{theme.help_heading}{'Key'.ljust(key_width)}  Action{theme.reset}"]
    for key, action in HELP_ROWS:
        lines.append(f"{theme.help_key}{key.ljust(key_width)}{theme.reset}  {theme.help_dim}{action}{theme.reset}")
    return [clip_ansi_line(line, width) for line in lines[:rows]]
