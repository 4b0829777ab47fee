"""Main interactive event loop for the terminal UI.

One key is read, mapped to an intent and applied in full before the next key
is read. Rendering happens only when something changed or the terminal was
resized.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import KeyMap, read_key
from ..navigator import IntentOutcome, Navigator, NavigatorSnapshot, ToggleHelp
from .terminal import TerminalController

logger = logging.getLogger(__name__)

KEY_POLL_TIMEOUT_MS = 120


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Operations injected into ``run_main_loop``."""

    render: Callable[[NavigatorSnapshot, int, int], None]
    on_help_toggled: Callable[[bool], None] | None = None


def run_main_loop(
    navigator: Navigator,
    keymap: KeyMap,
    terminal: TerminalController,
    stdin_fd: int,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run until a ``Quit`` intent is applied."""
    dirty = True
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                dirty = True

            if dirty:
                callbacks.render(navigator.snapshot(), term.columns, term.lines)
                dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            intent = keymap.intent_for(key)
            if intent is None:
                continue
            outcome = navigator.apply(intent)
            if outcome is IntentOutcome.QUIT:
                logger.debug("quit requested")
                break
            if outcome is IntentOutcome.UNCHANGED:
                continue
            if isinstance(intent, ToggleHelp) and callbacks.on_help_toggled is not None:
                callbacks.on_help_toggled(navigator.show_help)
            dirty = True
