"""Navigation state machine: panes, intents, and the three-pane navigator.

Exposes ``Navigator`` plus the intent vocabulary and read-only snapshots
consumed by the presentation layer.
"""

from __future__ import annotations

from .intents import (
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
from .navigator import CENTER_PANE, DEPENDANTS_PANE, DEPENDENCIES_PANE, PANE_COUNT, Navigator
from .pane import Pane, SortMode, sort_packages
from .snapshot import NavigatorSnapshot, PaneSnapshot

__all__ = [
    "AppendSearchChar",
    "BackspaceSearch",
    "BeginSearchEntry",
    "CENTER_PANE",
    "CancelSearchEntry",
    "ChangeActivePane",
    "CommitSearch",
    "DEPENDANTS_PANE",
    "DEPENDENCIES_PANE",
    "FilterMode",
    "InputMode",
    "Intent",
    "IntentOutcome",
    "JumpEnd",
    "JumpStart",
    "MoveSelection",
    "Navigator",
    "NavigatorSnapshot",
    "PANE_COUNT",
    "Pane",
    "PaneSnapshot",
    "PromoteToCenter",
    "Quit",
    "RepeatSearch",
    "SearchDirection",
    "SortMode",
    "ToggleFilter",
    "ToggleHelp",
    "ToggleSort",
    "sort_packages",
]
