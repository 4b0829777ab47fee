"""One selectable, sortable list of packages.

A pane never owns records; ``items`` holds references into the shared
``PackageIndex``. Invariant after every mutation: ``selection`` is ``None``
exactly when ``items`` is empty, otherwise it is a valid index.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from ..package_model import PackageRecord


class SortMode(Enum):
    NAME_ASCENDING = "name"
    SIZE_DESCENDING = "size"

    def toggled(self) -> SortMode:
        if self is SortMode.NAME_ASCENDING:
            return SortMode.SIZE_DESCENDING
        return SortMode.NAME_ASCENDING


def sort_packages(mode: SortMode, items: Sequence[PackageRecord]) -> list[PackageRecord]:
    """Return ``items`` ordered by ``mode``.

    Size ordering is descending with missing sizes treated as zero; ties keep
    their incoming relative order.
    """
    if mode is SortMode.SIZE_DESCENDING:
        return sorted(items, key=lambda record: record.sort_size, reverse=True)
    return sorted(items, key=lambda record: record.name)


class Pane:
    """Ordered package list with a single optional selection."""

    def __init__(
        self,
        title: str,
        *,
        sort_mode: SortMode = SortMode.NAME_ASCENDING,
        is_active: bool = False,
    ) -> None:
        self.title = title
        self.sort_mode = sort_mode
        self.is_active = is_active
        self._items: list[PackageRecord] = []
        self._selection: int | None = None

    @property
    def items(self) -> tuple[PackageRecord, ...]:
        return tuple(self._items)

    @property
    def selection(self) -> int | None:
        return self._selection

    def __len__(self) -> int:
        return len(self._items)

    def selected(self) -> PackageRecord | None:
        if self._selection is None:
            return None
        return self._items[self._selection]

    def move_selection(self, delta: int) -> bool:
        """Shift the selection by ``delta``, clamped to the list bounds.

        Returns whether the selected index changed.
        """
        if self._selection is None:
            return False
        target = max(0, min(len(self._items) - 1, self._selection + delta))
        return self._select(target)

    def jump_to_start(self) -> bool:
        if not self._items:
            return False
        return self._select(0)

    def jump_to_end(self) -> bool:
        if not self._items:
            return False
        return self._select(len(self._items) - 1)

    def replace_items(
        self,
        new_items: Sequence[PackageRecord],
        previous: PackageRecord | None = None,
    ) -> None:
        """Swap in ``new_items`` and re-anchor the selection.

        ``previous`` keeps its place when the very same record object is in
        ``new_items``; otherwise the first row is selected (or nothing, when
        the list is empty).
        """
        self._items = list(new_items)
        self._selection = self._anchor_index(previous)

    def reanchor(self, target: PackageRecord | None) -> None:
        """Re-anchor on ``target`` without changing ``items``."""
        self._selection = self._anchor_index(target)

    def toggle_sort(self) -> None:
        """Flip the sort mode and keep the selected record selected."""
        previous = self.selected()
        self.sort_mode = self.sort_mode.toggled()
        self.replace_items(sort_packages(self.sort_mode, self._items), previous)

    def index_of(self, target: PackageRecord) -> int | None:
        for idx, record in enumerate(self._items):
            if record is target:
                return idx
        return None

    def _anchor_index(self, previous: PackageRecord | None) -> int | None:
        if previous is not None:
            idx = self.index_of(previous)
            if idx is not None:
                return idx
        return 0 if self._items else None

    def _select(self, idx: int) -> bool:
        if idx == self._selection:
            return False
        self._selection = idx
        return True
