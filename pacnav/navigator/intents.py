"""User intents accepted by ``Navigator.apply``.

``pane=None`` targets whichever pane is active when the intent is applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SearchDirection(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class IntentOutcome(Enum):
    """Result of applying one intent."""

    CHANGED = "changed"
    UNCHANGED = "unchanged"
    NO_MATCH = "no_match"
    QUIT = "quit"


@dataclass(frozen=True)
class MoveSelection:
    delta: int
    pane: int | None = None


@dataclass(frozen=True)
class JumpStart:
    pane: int | None = None


@dataclass(frozen=True)
class JumpEnd:
    pane: int | None = None


@dataclass(frozen=True)
class ChangeActivePane:
    index: int


@dataclass(frozen=True)
class ToggleSort:
    pane: int | None = None


@dataclass(frozen=True)
class ToggleFilter:
    pass


@dataclass(frozen=True)
class PromoteToCenter:
    pass


@dataclass(frozen=True)
class BeginSearchEntry:
    pass


@dataclass(frozen=True)
class AppendSearchChar:
    char: str


@dataclass(frozen=True)
class BackspaceSearch:
    pass


@dataclass(frozen=True)
class CancelSearchEntry:
    pass


@dataclass(frozen=True)
class CommitSearch:
    pass


@dataclass(frozen=True)
class RepeatSearch:
    direction: SearchDirection = SearchDirection.FORWARD


@dataclass(frozen=True)
class ToggleHelp:
    pass


@dataclass(frozen=True)
class Quit:
    pass


Intent = (
    MoveSelection
    | JumpStart
    | JumpEnd
    | ChangeActivePane
    | ToggleSort
    | ToggleFilter
    | PromoteToCenter
    | BeginSearchEntry
    | AppendSearchChar
    | BackspaceSearch
    | CancelSearchEntry
    | CommitSearch
    | RepeatSearch
    | ToggleHelp
    | Quit
)

# Intents that still apply while the search term is being typed.
SEARCH_ENTRY_INTENTS: tuple[type, ...] = (
    AppendSearchChar,
    BackspaceSearch,
    CancelSearchEntry,
    CommitSearch,
    Quit,
)

__all__ = [
    "AppendSearchChar",
    "BackspaceSearch",
    "BeginSearchEntry",
    "CancelSearchEntry",
    "ChangeActivePane",
    "CommitSearch",
    "Intent",
    "IntentOutcome",
    "JumpEnd",
    "JumpStart",
    "MoveSelection",
    "PromoteToCenter",
    "Quit",
    "RepeatSearch",
    "SEARCH_ENTRY_INTENTS",
    "SearchDirection",
    "ToggleFilter",
    "ToggleHelp",
    "ToggleSort",
]
