"""Reader for the pacman local database (``/var/lib/pacman/local``).

Every installed package has its own directory holding a ``desc`` file made of
blank-line separated sections such as::

    %NAME%
    zlib

    %DEPENDS%
    glibc
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from .index import PackageIndex
from .types import InstallReason, OptionalDependency, PackageRecord

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("/var/lib/pacman/local")
DESC_FILENAME = "desc"


class PackageParseError(ValueError):
    """Raised when a ``desc`` file cannot be turned into a package record."""


def parse_optional_dependency(line: str) -> OptionalDependency:
    """Split an optdepends line of the form ``name`` or ``name: reason``."""
    parts = line.split(": ")
    reason = parts[1] if len(parts) > 1 else None
    return OptionalDependency(name=parts[0], reason=reason)


def parse_desc(text: str) -> PackageRecord:
    """Parse the contents of one ``desc`` file."""
    fields: dict[str, str] = {}
    reason = InstallReason.EXPLICIT
    size: int | None = None
    dependencies: list[str] = []
    optional_dependencies: list[OptionalDependency] = []

    for section in text.split("\n\n"):
        if not section.strip():
            continue
        lines = section.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        header = lines[0]
        body = lines[1:]
        if not body:
            raise PackageParseError(f"section {header!r} has no content")
        first = body[0]

        if header == "%NAME%":
            fields["name"] = first
        elif header == "%VERSION%":
            fields["version"] = first
        elif header == "%DESC%":
            fields["description"] = first
        elif header == "%URL%":
            fields["url"] = first
        elif header == "%REASON%":
            if first != "1":
                raise PackageParseError(f"unexpected reason {first!r}")
            reason = InstallReason.DEPENDENCY
        elif header == "%SIZE%":
            try:
                size = int(first)
            except ValueError as exc:
                raise PackageParseError(f"parse size {first!r}") from exc
            if size < 0:
                raise PackageParseError(f"parse size {first!r}")
        elif header == "%DEPENDS%":
            dependencies.extend(body)
        elif header == "%OPTDEPENDS%":
            optional_dependencies.extend(parse_optional_dependency(line) for line in body)

    for required in ("name", "version", "description", "url"):
        if not fields.get(required):
            raise PackageParseError(f"missing {required}")

    return PackageRecord(
        name=fields["name"],
        version=fields["version"],
        description=fields["description"],
        url=fields["url"],
        install_reason=reason,
        size=size,
        dependencies=tuple(dependencies),
        optional_dependencies=tuple(optional_dependencies),
    )


def load_packages(db_path: Path) -> Iterator[PackageRecord]:
    """Yield one record per package directory under ``db_path``.

    Plain files in the database directory (pacman keeps an ``ALPM_DB_VERSION``
    there) are skipped.
    """
    try:
        entries = sorted(db_path.iterdir())
    except OSError as exc:
        raise PackageParseError(f"read_dir {db_path}: {exc}") from exc

    for entry in entries:
        if not entry.is_dir():
            continue
        desc_path = entry / DESC_FILENAME
        try:
            text = desc_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PackageParseError(f"read {desc_path}: {exc}") from exc
        try:
            yield parse_desc(text)
        except PackageParseError as exc:
            raise PackageParseError(f"parse {desc_path}: {exc}") from exc


def load_package_index(db_path: Path = DEFAULT_DB_PATH) -> PackageIndex:
    """Load every package under ``db_path`` into a ``PackageIndex``."""
    index = PackageIndex(load_packages(db_path))
    logger.info("loaded %d installed packages from %s", len(index), db_path)
    return index
