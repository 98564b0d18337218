"""Store location and environment-driven settings.

The bookmark store lives under the platform config directory by default.
``GOTO_STORE`` and the ``--store`` CLI option override it.
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "goto"
STORE_FILENAME = "config.txt"
STORE_ENV_VAR = "GOTO_STORE"
DEFAULT_STORE_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / STORE_FILENAME


def resolve_store_path(override: str | os.PathLike[str] | None = None) -> Path:
    """Return the store path, preferring ``override`` then ``$GOTO_STORE``.

    Empty or whitespace-only values are treated as unset so a blank
    environment variable falls through to the platform default.
    """
    if override is not None and str(override).strip():
        return Path(override).expanduser()
    env_value = os.environ.get(STORE_ENV_VAR, "").strip()
    if env_value:
        return Path(env_value).expanduser()
    return DEFAULT_STORE_PATH
