"""Translate key tokens into navigator intents for the current input mode."""

from __future__ import annotations

from collections.abc import Callable

from ..navigator import (
    AppendSearchChar,
    BackspaceSearch,
    BeginSearchEntry,
    CancelSearchEntry,
    ChangeActivePane,
    CommitSearch,
    Intent,
    JumpEnd,
    JumpStart,
    MoveSelection,
    PANE_COUNT,
    Navigator,
    PromoteToCenter,
    Quit,
    RepeatSearch,
    SearchDirection,
    ToggleFilter,
    ToggleHelp,
    ToggleSort,
)

DEFAULT_PAGE_SIZE = 10

IntentFactory = Callable[[], Intent]


def _bind(*bindings: tuple[tuple[str, ...], IntentFactory]) -> dict[str, IntentFactory]:
    """Flatten ``(keys, factory)`` pairs into a key-token lookup table."""
    table: dict[str, IntentFactory] = {}
    for keys, factory in bindings:
        for key in keys:
            table[key] = factory
    return table


class KeyMap:
    """Key bindings bound to one navigator.

    Browsing keys follow the help table; while a search term is being typed
    printable keys edit the term instead.
    """

    def __init__(self, navigator: Navigator, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.navigator = navigator
        self.page_size = max(1, page_size)
        self._browse = _bind(
            (("q", "c", "CTRL_C"), Quit),
            (("LEFT", "h"), lambda: ChangeActivePane(self._neighbour_pane(-1))),
            (("RIGHT", "l"), lambda: ChangeActivePane(self._neighbour_pane(1))),
            (("UP", "k"), lambda: MoveSelection(-1)),
            (("DOWN", "j"), lambda: MoveSelection(1)),
            (("PAGE_UP",), lambda: MoveSelection(-self.page_size)),
            (("PAGE_DOWN",), lambda: MoveSelection(self.page_size)),
            (("1", "HOME"), JumpStart),
            (("0", "END"), JumpEnd),
            (("ENTER",), PromoteToCenter),
            (("s",), ToggleSort),
            (("e",), ToggleFilter),
            (("/",), BeginSearchEntry),
            (("n",), lambda: RepeatSearch(SearchDirection.FORWARD)),
            (("N",), lambda: RepeatSearch(SearchDirection.BACKWARD)),
            (("?",), ToggleHelp),
        )
        self._search_entry = _bind(
            (("CTRL_C",), Quit),
            (("ESC",), CancelSearchEntry),
            (("ENTER",), CommitSearch),
            (("BACKSPACE",), BackspaceSearch),
        )

    def _neighbour_pane(self, step: int) -> int:
        # Stops at the outer panes; the navigator rejects indexes past them.
        return max(0, min(PANE_COUNT - 1, self.navigator.active_pane + step))

    def intent_for(self, key: str) -> Intent | None:
        """Return the intent for ``key`` or ``None`` when the key is unbound."""
        if not key:
            return None
        if self.navigator.is_search_entry_mode:
            factory = self._search_entry.get(key)
            if factory is not None:
                return factory()
            if len(key) == 1 and key.isprintable():
                return AppendSearchChar(key)
            return None
        factory = self._browse.get(key)
        return factory() if factory is not None else None
