"""Full-screen frame composition for the three-pane navigator.

``build_frame`` is pure and returns the escape-coded screen; the runtime hands it
to ``TerminalController.write_frame`` as one write.
"""

from __future__ import annotations

from ..ansi import clip_ansi_line, pad_ansi_line
from ..navigator import NavigatorSnapshot, PaneSnapshot, SortMode
from ..package_model import PackageRecord
from ..ui_theme import UITheme
from .details import detail_lines
from .help import help_panel_lines, help_panel_row_count

DIVIDER = "│"
STATUS_HINT = "│ ? Help"


def build_status_line(left_text: str, width: int, right_text: str = STATUS_HINT) -> str:
    """Left-align ``left_text`` and right-align ``right_text`` within ``width - 1``."""
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def selected_with_ansi(text: str) -> str:
    """Apply reverse video without discarding existing ANSI colors."""
    if not text:
        return text
    return "\033[7m" + text.replace("\033[0m", "\033[0;7m") + "\033[0m"


def column_widths(width: int) -> tuple[int, int, int]:
    """Split ``width`` into three columns around two single-cell dividers."""
    usable = max(3, width - 1 - 2)
    base = usable // 3
    extra = usable - base * 3
    return base, base + (1 if extra > 1 else 0), base + (1 if extra > 0 else 0)


def list_rows_for(body_rows: int) -> int:
    """Rows of package names per column; the rest goes to the details block."""
    return max(1, (body_rows - 2) // 2)


def clamp_list_start(start: int, selection: int | None, rows: int, count: int) -> int:
    """Scroll ``start`` just enough to keep ``selection`` visible."""
    rows = max(1, rows)
    if selection is not None:
        if selection < start:
            start = selection
        elif selection >= start + rows:
            start = selection - rows + 1
    return max(0, min(start, max(0, count - rows)))


def _sort_label(mode: SortMode) -> str:
    return "name" if mode is SortMode.NAME_ASCENDING else "size"


def _title_line(pane: PaneSnapshot, theme: UITheme) -> str:
    style = theme.title_active if pane.is_active else theme.title_inactive
    marker = "▶ " if pane.is_active else ""
    return f"{style}{marker}{pane.title} {pane.counter_label} [{_sort_label(pane.sort_mode)}]{theme.reset}"


def _row_text(record: PackageRecord, theme: UITheme) -> str:
    style = theme.row_explicit if record.is_explicit else theme.row_dependency
    return f"{style}{record.name}{theme.reset}"


def pane_column_lines(
    pane: PaneSnapshot,
    width: int,
    body_rows: int,
    list_start: int,
    theme: UITheme,
) -> list[str]:
    """Return ``body_rows`` padded lines for one pane column."""
    rows = list_rows_for(body_rows)
    lines = [clip_ansi_line(_title_line(pane, theme), width) + theme.reset]
    for offset in range(rows):
        idx = list_start + offset
        if idx >= len(pane.items):
            lines.append("")
            continue
        text = clip_ansi_line(_row_text(pane.items[idx], theme), width) + theme.reset
        if idx == pane.selection:
            text = selected_with_ansi(pad_ansi_line(text, width))
        lines.append(text)
    lines.append(f"{theme.divider}{'─' * width}{theme.reset}")
    lines.extend(detail_lines(pane.selected, width, theme))
    lines = lines[:body_rows]
    lines.extend([""] * (body_rows - len(lines)))
    return [pad_ansi_line(line, width) for line in lines]


def status_text(snapshot: NavigatorSnapshot) -> str:
    if snapshot.is_search_entry_mode:
        return f"/{snapshot.search_term}_"
    center = snapshot.panes[1]
    parts = [f"{snapshot.total_packages} installed", f"showing {center.title.lower()}"]
    if snapshot.search_term:
        parts.append(f"search: {snapshot.search_term}")
    if snapshot.last_outcome_message:
        parts.append(snapshot.last_outcome_message)
    return " · ".join(parts)


def build_frame(
    snapshot: NavigatorSnapshot,
    width: int,
    height: int,
    theme: UITheme,
    list_starts: list[int],
) -> str:
    """Compose one screen for ``snapshot``.

    ``list_starts`` holds the first visible row of each pane and is updated in
    place so scrolling persists between frames.
    """
    out: list[str] = ["\033[H\033[J"]
    help_rows = help_panel_row_count(height, snapshot.show_help)
    body_rows = max(1, height - help_rows - 1)
    usable_width = max(1, width - 1)

    for line in help_panel_lines(theme, usable_width, help_rows):
        out.append(line)
        out.append(theme.reset)
        out.append("\r\n")

    widths = column_widths(width)
    list_rows = list_rows_for(body_rows)
    columns: list[list[str]] = []
    for idx, pane in enumerate(snapshot.panes):
        list_starts[idx] = clamp_list_start(list_starts[idx], pane.selection, list_rows, len(pane.items))
        columns.append(pane_column_lines(pane, widths[idx], body_rows, list_starts[idx], theme))

    divider = f"{theme.divider}{DIVIDER}{theme.reset}"
    for row in range(body_rows):
        out.append(divider.join(column[row] for column in columns))
        out.append(theme.reset)
        out.append("\r\n")

    status = build_status_line(status_text(snapshot), width)
    if snapshot.is_search_entry_mode:
        out.append(theme.search_prompt)
    else:
        out.append(theme.reverse)
    out.append(status)
    out.append(theme.reset)
    return "".join(out)


def search_cursor(snapshot: NavigatorSnapshot, width: int, height: int) -> tuple[int, int] | None:
    """1-based screen position of the search-entry cursor, or ``None`` when browsing.

    The cursor sits on the ``_`` that ends ``/<term>_`` on the status line.
    """
    if not snapshot.is_search_entry_mode:
        return None
    usable = max(1, width - 1)
    left_limit = max(0, usable - len(STATUS_HINT) - 1)
    return height, min(len(f"/{snapshot.search_term}"), left_limit) + 1
