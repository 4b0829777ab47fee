"""Three-pane package navigator.

The center pane lists installed packages (filtered by ``FilterMode``); the
left pane shows what depends on the center selection and the right pane what
the center selection depends on. Side panes are fully derived and are
recomputed whenever the center selection changes.

Every intent is total: intents that make no sense in the current state are
no-ops reported as ``IntentOutcome.UNCHANGED``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..package_model import InstallReason, PackageIndex
from .intents import (
    SEARCH_ENTRY_INTENTS,
    AppendSearchChar,
    BackspaceSearch,
    BeginSearchEntry,
    CancelSearchEntry,
    ChangeActivePane,
    CommitSearch,
    Intent,
    IntentOutcome,
    JumpEnd,
    JumpStart,
    MoveSelection,
    PromoteToCenter,
    Quit,
    RepeatSearch,
    SearchDirection,
    ToggleFilter,
    ToggleHelp,
    ToggleSort,
)
from .modes import FilterMode, InputMode
from .pane import Pane, sort_packages
from .snapshot import NavigatorSnapshot, PaneSnapshot

logger = logging.getLogger(__name__)

DEPENDANTS_PANE = 0
CENTER_PANE = 1
DEPENDENCIES_PANE = 2
PANE_COUNT = 3

CHANGED = IntentOutcome.CHANGED
UNCHANGED = IntentOutcome.UNCHANGED


def _outcome(changed: bool) -> IntentOutcome:
    return CHANGED if changed else UNCHANGED


class Navigator:
    """Owns the package index and keeps the three panes in sync."""

    def __init__(
        self,
        index: PackageIndex,
        *,
        initial_filter: FilterMode = FilterMode.EXPLICIT_ONLY,
        show_help: bool = True,
    ) -> None:
        self.index = index
        self.panes: tuple[Pane, Pane, Pane] = (
            Pane("Dependants"),
            Pane(FilterMode.ALL.center_title, is_active=True),
            Pane("Dependencies"),
        )
        self.active_pane = CENTER_PANE
        self.filter_mode = FilterMode.ALL
        self.input_mode = InputMode.BROWSING
        self.search_term = ""
        self.show_help = show_help
        self.status_message = ""

        self._handlers: dict[type, Callable[..., IntentOutcome]] = {
            MoveSelection: lambda intent: self.move_selection(intent.delta, intent.pane),
            JumpStart: lambda intent: self.jump_to_start(intent.pane),
            JumpEnd: lambda intent: self.jump_to_end(intent.pane),
            ChangeActivePane: lambda intent: self.change_active_pane(intent.index),
            ToggleSort: lambda intent: self.toggle_sort(intent.pane),
            ToggleFilter: lambda _intent: self.toggle_filter(),
            PromoteToCenter: lambda _intent: self.promote_to_center(),
            BeginSearchEntry: lambda _intent: self.begin_search_entry(),
            AppendSearchChar: lambda intent: self.append_search_char(intent.char),
            BackspaceSearch: lambda _intent: self.backspace_search(),
            CancelSearchEntry: lambda _intent: self.cancel_search_entry(),
            CommitSearch: lambda _intent: self.commit_search(),
            RepeatSearch: lambda intent: self.repeat_search(intent.direction),
            ToggleHelp: lambda _intent: self.toggle_help(),
            Quit: lambda _intent: IntentOutcome.QUIT,
        }

        center = self.center
        center.replace_items(sort_packages(center.sort_mode, index.records()))
        self.set_filter(initial_filter)

    @property
    def dependants(self) -> Pane:
        return self.panes[DEPENDANTS_PANE]

    @property
    def center(self) -> Pane:
        return self.panes[CENTER_PANE]

    @property
    def dependencies(self) -> Pane:
        return self.panes[DEPENDENCIES_PANE]

    @property
    def is_search_entry_mode(self) -> bool:
        return self.input_mode is InputMode.SEARCH_ENTRY

    def apply(self, intent: Intent) -> IntentOutcome:
        """Apply one intent, including any cascading side-pane updates."""
        if self.is_search_entry_mode and not isinstance(intent, SEARCH_ENTRY_INTENTS):
            return UNCHANGED
        handler = self._handlers.get(type(intent))
        if handler is None:
            return UNCHANGED
        outcome = handler(intent)
        if outcome is CHANGED:
            logger.debug("applied %r", intent)
        return outcome

    def snapshot(self) -> NavigatorSnapshot:
        return NavigatorSnapshot(
            panes=(
                PaneSnapshot.of(self.dependants),
                PaneSnapshot.of(self.center),
                PaneSnapshot.of(self.dependencies),
            ),
            active_pane=self.active_pane,
            filter_mode=self.filter_mode,
            search_term=self.search_term,
            is_search_entry_mode=self.is_search_entry_mode,
            show_help=self.show_help,
            last_outcome_message=self.status_message,
            total_packages=len(self.index),
        )

    def _pane_index(self, pane: int | None) -> int | None:
        """Resolve ``pane`` (``None`` means active); out-of-range gives ``None``."""
        if pane is None:
            return self.active_pane
        if 0 <= pane < PANE_COUNT:
            return pane
        return None

    def change_active_pane(self, index: int) -> IntentOutcome:
        target = self._pane_index(index)
        if target is None or target == self.active_pane:
            return UNCHANGED
        self.panes[self.active_pane].is_active = False
        self.panes[target].is_active = True
        self.active_pane = target
        return CHANGED

    def _after_selection_move(self, pane_index: int, changed: bool) -> IntentOutcome:
        if changed and pane_index == CENTER_PANE:
            self.update_side_panes()
        return _outcome(changed)

    def move_selection(self, delta: int, pane: int | None = None) -> IntentOutcome:
        pane_index = self._pane_index(pane)
        if pane_index is None:
            return UNCHANGED
        changed = self.panes[pane_index].move_selection(delta)
        return self._after_selection_move(pane_index, changed)

    def jump_to_start(self, pane: int | None = None) -> IntentOutcome:
        pane_index = self._pane_index(pane)
        if pane_index is None:
            return UNCHANGED
        changed = self.panes[pane_index].jump_to_start()
        return self._after_selection_move(pane_index, changed)

    def jump_to_end(self, pane: int | None = None) -> IntentOutcome:
        pane_index = self._pane_index(pane)
        if pane_index is None:
            return UNCHANGED
        changed = self.panes[pane_index].jump_to_end()
        return self._after_selection_move(pane_index, changed)

    def toggle_sort(self, pane: int | None = None) -> IntentOutcome:
        pane_index = self._pane_index(pane)
        if pane_index is None:
            return UNCHANGED
        # Re-anchoring keeps the selected record, so side panes stay valid.
        self.panes[pane_index].toggle_sort()
        return CHANGED

    def toggle_filter(self) -> IntentOutcome:
        self.set_filter(self.filter_mode.toggled())
        return CHANGED

    def set_filter(self, mode: FilterMode) -> None:
        """Rebuild the center pane for ``mode`` and refresh the side panes."""
        center = self.center
        previous = center.selected()
        self.filter_mode = mode
        center.title = mode.center_title
        visible = [record for record in self.index if mode.accepts(record)]
        center.replace_items(sort_packages(center.sort_mode, visible), previous)
        self.update_side_panes()

    def promote_to_center(self) -> IntentOutcome:
        """Center the navigator on the active side pane's selection."""
        if self.active_pane == CENTER_PANE:
            return UNCHANGED
        target = self.panes[self.active_pane].selected()
        if target is None:
            return UNCHANGED
        if (
            target.install_reason is InstallReason.DEPENDENCY
            and self.filter_mode is FilterMode.EXPLICIT_ONLY
        ):
            self.set_filter(FilterMode.ALL)
        self.center.reanchor(target)
        self.update_side_panes()
        return CHANGED

    def update_side_panes(self) -> None:
        """Recompute dependants and dependencies of the center selection."""
        selected = self.center.selected()
        if selected is None:
            self.dependants.replace_items([])
            self.dependencies.replace_items([])
            return
        for pane, records in (
            (self.dependants, self.index.dependant_records(selected.name)),
            (self.dependencies, self.index.installed_dependencies_of(selected)),
        ):
            pane.replace_items(sort_packages(pane.sort_mode, records))

    def search(self, direction: SearchDirection) -> IntentOutcome:
        """Select the next center entry whose name contains ``search_term``.

        The scan wraps around the list and never matches the current
        selection itself.
        """
        term = self.search_term
        center = self.center
        current = center.selection
        if not term or current is None:
            return UNCHANGED
        items = center.items
        count = len(items)
        step = 1 if direction is SearchDirection.FORWARD else -1
        for offset in range(1, count):
            idx = (current + step * offset) % count
            if term in items[idx].name:
                center.reanchor(items[idx])
                self.status_message = ""
                self.update_side_panes()
                return CHANGED
        self.status_message = f"no match for {term!r}"
        return IntentOutcome.NO_MATCH

    def begin_search_entry(self) -> IntentOutcome:
        self.input_mode = InputMode.SEARCH_ENTRY
        self.search_term = ""
        self.status_message = ""
        return CHANGED

    def append_search_char(self, char: str) -> IntentOutcome:
        if not self.is_search_entry_mode or not char:
            return UNCHANGED
        self.search_term += char
        return CHANGED

    def backspace_search(self) -> IntentOutcome:
        if not self.is_search_entry_mode or not self.search_term:
            return UNCHANGED
        self.search_term = self.search_term[:-1]
        return CHANGED

    def cancel_search_entry(self) -> IntentOutcome:
        if not self.is_search_entry_mode:
            return UNCHANGED
        self.input_mode = InputMode.BROWSING
        self.search_term = ""
        return CHANGED

    def commit_search(self) -> IntentOutcome:
        if not self.is_search_entry_mode:
            return UNCHANGED
        self.input_mode = InputMode.BROWSING
        self.change_active_pane(CENTER_PANE)
        outcome = self.search(SearchDirection.FORWARD)
        return CHANGED if outcome is UNCHANGED else outcome

    def repeat_search(self, direction: SearchDirection) -> IntentOutcome:
        activated = self.change_active_pane(CENTER_PANE) is CHANGED
        outcome = self.search(direction)
        if outcome is UNCHANGED and activated:
            return CHANGED
        return outcome

    def toggle_help(self) -> IntentOutcome:
        self.show_help = not self.show_help
        return CHANGED
