"""Read-only JSON config helpers.

Supplies default theme and color mode. All access is defensive: malformed or
missing config falls back safely and the file is never written.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lscol"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the JSON config object.

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
    if not isinstance(data, dict):
        logger.debug("ignoring config %s: top level is not an object", CONFIG_PATH)
        return {}
    return data


def load_theme_name(config: dict[str, object] | None = None) -> str | None:
    """Return configured theme name, or ``None`` when unset/invalid."""
    if config is None:
        config = load_config()
    value = config.get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_no_color(config: dict[str, object] | None = None) -> bool:
    """Return configured color mode.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    if config is None:
        config = load_config()
    value = config.get("no_color")
    return bool(value) if isinstance(value, bool) else False
