"""Package records, the local-database reader, and the dependency index.

Defines ``PackageRecord`` and the immutable ``PackageIndex`` built from it.
Also parses pacman ``desc`` files into records.
"""

from __future__ import annotations

from .index import PackageIndex, PackageIndexError
from .local_db import (
    DEFAULT_DB_PATH,
    PackageParseError,
    load_package_index,
    load_packages,
    parse_desc,
    parse_optional_dependency,
)
from .types import InstallReason, OptionalDependency, PackageRecord

__all__ = [
    "DEFAULT_DB_PATH",
    "InstallReason",
    "OptionalDependency",
    "PackageIndex",
    "PackageIndexError",
    "PackageParseError",
    "PackageRecord",
    "load_package_index",
    "load_packages",
    "parse_desc",
    "parse_optional_dependency",
]
