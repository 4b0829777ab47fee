"""Terminal session for the explorer.

Owns the raw-mode lifecycle, the alternate screen, and frame output. The
cursor stays hidden except while a search term is typed.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ENTER_SCREEN = b"\x1b[?1049h\x1b[?25l"
LEAVE_SCREEN = b"\x1b[?25h\x1b[?1049l"
SHOW_CURSOR = "\x1b[?25h"
HIDE_CURSOR = "\x1b[?25l"


class TerminalController:
    """Raw-mode terminal plus single-write frame output for one session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._cursor_visible = False

    def enable_tui_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_SCREEN)
        self._cursor_visible = False

    def disable_tui_mode(self) -> None:
        """Leave the alternate screen and restore the saved tty attributes."""
        os.write(self.stdout_fd, LEAVE_SCREEN)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()

    def write_frame(self, frame: str, cursor: tuple[int, int] | None = None) -> None:
        """Write ``frame`` in one ``os.write``.

        ``cursor`` is a 1-based ``(row, column)`` where the cursor is shown;
        ``None`` keeps it hidden.
        """
        parts = [frame]
        if cursor is not None:
            row, col = cursor
            parts.append(f"\x1b[{row};{col}H{SHOW_CURSOR}")
        elif self._cursor_visible:
            parts.insert(0, HIDE_CURSOR)
        self._cursor_visible = cursor is not None
        os.write(self.stdout_fd, "".join(parts).encode("utf-8", errors="replace"))
