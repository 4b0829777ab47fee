"""Details block for the selected package of a pane."""

from __future__ import annotations

from ..ansi import clip_ansi_line, wrap_text
from ..package_model import InstallReason, PackageRecord
from ..ui_theme import UITheme

_DECIMAL_UNITS: tuple[str, ...] = ("kB", "MB", "GB", "TB", "PB")


def format_size(size: int | None) -> str:
    """Format a byte count with decimal (1000-based) units.

    A missing size is shown like zero.
    """
    value = float(size or 0)
    if value < 1000:
        return f"{int(value)} B"
    unit = _DECIMAL_UNITS[0]
    for unit in _DECIMAL_UNITS:
        value /= 1000.0
        if value < 1000:
            break
    return f"{value:.2f} {unit}"


def reason_label(reason: InstallReason) -> str:
    return "Explicit" if reason is InstallReason.EXPLICIT else "Dependency"


def detail_lines(record: PackageRecord | None, width: int, theme: UITheme) -> list[str]:
    """Build the styled details rows for ``record`` fitted to ``width``."""
    if record is None or width <= 0:
        return []

    def label(name: str) -> str:
        return f"{theme.detail_label}{name}{theme.reset}"

    lines = [
        f"{label('name')}:    {record.name}",
        f"{label('version')}: {record.version}",
        f"{label('reason')}:  {reason_label(record.install_reason)}",
        f"{label('size')}:    {format_size(record.size)}",
        "",
        f"{label('description')}:",
        *wrap_text(record.description, width),
        "",
        f"{label('url')}:",
        record.url,
    ]
    reasons = [optional for optional in record.optional_dependencies if optional.reason]
    if reasons:
        lines.append("")
        lines.append(f"{label('optional')}:")
        for optional in reasons:
            lines.extend(wrap_text(f"{optional.name}: {optional.reason}", width))
    return [clip_ansi_line(line, width) for line in lines]
