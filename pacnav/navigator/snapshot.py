"""Read-only views of navigator state handed to the renderer."""

from __future__ import annotations

from dataclasses import dataclass

from ..package_model import PackageRecord
from .modes import FilterMode
from .pane import Pane, SortMode


@dataclass(frozen=True)
class PaneSnapshot:
    title: str
    items: tuple[PackageRecord, ...]
    selection: int | None
    sort_mode: SortMode
    is_active: bool

    @classmethod
    def of(cls, pane: Pane) -> PaneSnapshot:
        return cls(
            title=pane.title,
            items=pane.items,
            selection=pane.selection,
            sort_mode=pane.sort_mode,
            is_active=pane.is_active,
        )

    @property
    def selected(self) -> PackageRecord | None:
        if self.selection is None:
            return None
        return self.items[self.selection]

    @property
    def counter_label(self) -> str:
        """``"<selected>/<count>"`` with 1-based selection, ``0`` when empty."""
        position = self.selection + 1 if self.selection is not None else 0
        return f"{position}/{len(self.items)}"


@dataclass(frozen=True)
class NavigatorSnapshot:
    panes: tuple[PaneSnapshot, PaneSnapshot, PaneSnapshot]
    active_pane: int
    filter_mode: FilterMode
    search_term: str
    is_search_entry_mode: bool
    show_help: bool
    last_outcome_message: str = ""
    total_packages: int = 0
