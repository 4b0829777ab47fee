"""ANSI-aware width measurement, clipping, padding, and wrapping.

Escape sequences never count toward width, so styled column text can be
aligned next to the pane dividers.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks take no columns,
    and East Asian wide/fullwidth characters take two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the visible width of ``text`` with escapes stripped."""
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
        i += 1

    # Zero-width escapes right at the cut still apply to what was kept.
    while i < n and text[i] == "\x1b":
        match = ANSI_ESCAPE_RE.match(text, i)
        if not match:
            break
        out.append(match.group(0))
        i = match.end()

    return "".join(out)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns and right-pad it with spaces."""
    clipped = clip_ansi_line(text, width)
    used = display_width(clipped)
    if used < width:
        clipped += " " * (width - used)
    return clipped


def wrap_text(text: str, width: int) -> list[str]:
    """Break plain ``text`` into rows of at most ``width`` columns.

    Words are kept whole when they fit; longer words are split.
    """
    if width <= 0:
        return []
    rows: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if display_width(candidate) <= width:
            current = candidate
            continue
        if current:
            rows.append(current)
        while display_width(word) > width:
            head = clip_ansi_line(word, width) or word[0]
            rows.append(head)
            word = word[len(head):]
        current = word
    if current:
        rows.append(current)
    return rows
