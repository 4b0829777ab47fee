"""Navigator-wide modes: center filter and input handling."""

from __future__ import annotations

from enum import Enum

from ..package_model import PackageRecord


class FilterMode(Enum):
    ALL = "all"
    EXPLICIT_ONLY = "explicit"

    def toggled(self) -> FilterMode:
        if self is FilterMode.ALL:
            return FilterMode.EXPLICIT_ONLY
        return FilterMode.ALL

    def accepts(self, record: PackageRecord) -> bool:
        if self is FilterMode.EXPLICIT_ONLY:
            return record.is_explicit
        return True

    @property
    def center_title(self) -> str:
        return "Explicit" if self is FilterMode.EXPLICIT_ONLY else "All"


class InputMode(Enum):
    BROWSING = "browsing"
    SEARCH_ENTRY = "search_entry"
