"""Command-line front door for pacnav.

Parses CLI options, merges them with the persisted config, loads the local
package database, and dispatches into the interactive explorer.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import config
from .package_model import DEFAULT_DB_PATH, PackageIndexError, PackageParseError, load_package_index
from .runtime import run_explorer
from .ui_theme import available_theme_names

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def configure_logging(log_file: Path | None, verbose: bool) -> None:
    """Route log records to ``log_file``; the screen belongs to the UI.

    Without a log file a ``NullHandler`` keeps records from reaching stderr.
    """
    root = logging.getLogger("pacnav")
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    if log_file is None:
        root.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Explore installed pacman packages and their dependency graph."
    )
    parser.add_argument(
        "--db",
        default=None,
        help=f"Local package database directory (default: {DEFAULT_DB_PATH}).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print explicitly installed packages and exit without the interactive view.",
    )
    parser.add_argument(
        "--page-size",
        type=_positive_int,
        default=None,
        help="Rows moved by PgUp/PgDown (default: 10).",
    )
    parser.add_argument("--log-file", default=None, help="Write log records to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the explorer."""
    args = build_parser().parse_args(argv)
    configure_logging(Path(args.log_file) if args.log_file else None, args.verbose)

    db_path = Path(args.db) if args.db else (config.load_db_path() or DEFAULT_DB_PATH)
    if not db_path.is_dir():
        raise SystemExit(f"Package database not found: {db_path}")

    try:
        index = load_package_index(db_path)
    except (PackageParseError, PackageIndexError) as exc:
        raise SystemExit(f"failed to load installed packages from {db_path}: {exc}") from exc

    run_explorer(
        index,
        theme_name=args.theme or config.load_theme_name(),
        no_color=args.no_color,
        show_help=config.load_show_help(),
        page_size=args.page_size or config.load_page_size(),
        nopager=args.list,
    )


if __name__ == "__main__":
    main()
