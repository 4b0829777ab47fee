"""In-memory package index plus the derived dependant graph.

The index is built once at startup and never mutated afterwards; panes hold
references to its records for the rest of the process lifetime.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .types import PackageRecord

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS: tuple[str, ...] = ("name", "version", "description", "url")


class PackageIndexError(ValueError):
    """Raised when a package index cannot be built from the supplied records."""


def _check_required_fields(record: PackageRecord) -> None:
    for field_name in _REQUIRED_FIELDS:
        value = getattr(record, field_name)
        if not isinstance(value, str) or not value:
            label = record.name or "<unnamed>"
            raise PackageIndexError(f"package {label!r} has empty required field {field_name!r}")


class PackageIndex:
    """Name-ordered mapping of installed packages with dependant lookups."""

    def __init__(self, records: Iterable[PackageRecord]) -> None:
        by_name: dict[str, PackageRecord] = {}
        for record in records:
            _check_required_fields(record)
            if record.name in by_name:
                raise PackageIndexError(f"duplicate package name {record.name!r}")
            by_name[record.name] = record

        self._records: dict[str, PackageRecord] = {name: by_name[name] for name in sorted(by_name)}
        self._dependants = self._build_dependants(self._records)
        logger.debug(
            "indexed %d packages, %d with installed dependants",
            len(self._records),
            len(self._dependants),
        )

    @staticmethod
    def _build_dependants(records: dict[str, PackageRecord]) -> dict[str, frozenset[str]]:
        dependants: dict[str, set[str]] = {}
        for name, record in records.items():
            for dependency in record.all_dependency_names():
                if dependency not in records:
                    logger.debug("%s depends on %s which is not installed", name, dependency)
                    continue
                dependants.setdefault(dependency, set()).add(name)
        return {name: frozenset(names) for name, names in dependants.items()}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __iter__(self) -> Iterator[PackageRecord]:
        return iter(self._records.values())

    def get(self, name: str) -> PackageRecord | None:
        return self._records.get(name)

    def __getitem__(self, name: str) -> PackageRecord:
        return self._records[name]

    def records(self) -> list[PackageRecord]:
        """Return all records in name order."""
        return list(self._records.values())

    def dependants_of(self, name: str) -> frozenset[str]:
        """Return names of installed packages that depend on ``name``."""
        return self._dependants.get(name, frozenset())

    def dependant_records(self, name: str) -> list[PackageRecord]:
        """Resolve ``dependants_of(name)`` to records, in name order."""
        return [self._records[dependant] for dependant in sorted(self.dependants_of(name))]

    def installed_dependencies_of(self, record: PackageRecord) -> list[PackageRecord]:
        """Resolve required and optional dependencies, skipping missing names.

        A name listed twice (for example as both required and optional) is
        returned once, at its first position.
        """
        resolved: list[PackageRecord] = []
        seen: set[str] = set()
        for dependency in record.all_dependency_names():
            if dependency in seen:
                continue
            seen.add(dependency)
            target = self._records.get(dependency)
            if target is not None:
                resolved.append(target)
        return resolved
