"""Persistent JSON config helpers.

Stores the database path override, UI theme, help-panel visibility, and page
size. Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "pacnav"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON; write failures are ignored."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError) as exc:
        logger.debug("could not write config %s: %s", CONFIG_PATH, exc)


def load_db_path() -> Path | None:
    """Return the configured local database directory, if any."""
    value = load_config().get("db_path")
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value.strip()).expanduser()


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_show_help() -> bool:
    """Return persisted help-panel visibility; shown unless explicitly disabled."""
    value = load_config().get("show_help")
    return value if isinstance(value, bool) else True


def save_show_help(show_help: bool) -> None:
    config = load_config()
    config["show_help"] = bool(show_help)
    save_config(config)


def load_page_size(default: int = 10) -> int:
    """Return the PgUp/PgDown step; booleans and non-positive values are ignored."""
    value = load_config().get("page_size")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value
