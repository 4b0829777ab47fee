"""Presentation layer: turns navigator snapshots into terminal frames."""

from __future__ import annotations

from .details import detail_lines, format_size, reason_label
from .frame import (
    build_frame,
    build_status_line,
    clamp_list_start,
    column_widths,
    pane_column_lines,
    search_cursor,
    status_text,
)
from .help import HELP_ROWS, help_panel_lines, help_panel_row_count

__all__ = [
    "HELP_ROWS",
    "build_frame",
    "build_status_line",
    "clamp_list_start",
    "column_widths",
    "detail_lines",
    "format_size",
    "help_panel_lines",
    "help_panel_row_count",
    "pane_column_lines",
    "reason_label",
    "search_cursor",
    "status_text",
]
