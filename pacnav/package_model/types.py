"""Package record datatypes shared by the index, navigator, and renderers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class InstallReason(Enum):
    """Why a package is installed."""

    EXPLICIT = "explicit"
    DEPENDENCY = "dependency"


@dataclass(frozen=True)
class OptionalDependency:
    """One ``%OPTDEPENDS%`` entry: a package name plus an optional reason."""

    name: str
    reason: str | None = None


@dataclass(frozen=True, eq=False)
class PackageRecord:
    """Metadata for one installed package.

    Records compare by identity. The index owns exactly one object per name,
    so panes can re-anchor their selection with ``is`` checks.
    """

    name: str
    version: str
    description: str
    url: str
    install_reason: InstallReason = InstallReason.EXPLICIT
    size: int | None = None
    dependencies: tuple[str, ...] = field(default_factory=tuple)
    optional_dependencies: tuple[OptionalDependency, ...] = field(default_factory=tuple)

    @property
    def is_explicit(self) -> bool:
        return self.install_reason is InstallReason.EXPLICIT

    @property
    def sort_size(self) -> int:
        """Size used for ordering; a missing size sorts like zero."""
        return self.size if self.size is not None else 0

    def all_dependency_names(self) -> Iterator[str]:
        """Yield required then optional dependency names in declaration order."""
        yield from self.dependencies
        for optional in self.optional_dependencies:
            yield optional.name
