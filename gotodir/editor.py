"""``$EDITOR`` support for the Tab key.

The picker hands the terminal to the user's editor so the bookmark store can be
fixed by hand, then takes the screen back. Problems never end the session:
they come back as a one-line message for the status row.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from collections.abc import Mapping
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)


class EditorError(Exception):
    """``$EDITOR`` does not name a command that can be run."""


def editor_command(store_path: Path, environ: Mapping[str, str] | None = None) -> list[str]:
    """Build the argv that opens ``store_path`` in ``$EDITOR``.

    ``$EDITOR`` may carry arguments (``"code --wait"``) and is split with
    shell quoting rules.
    """
    env = os.environ if environ is None else environ
    raw = env.get("EDITOR", "").strip()
    if not raw:
        raise EditorError("$EDITOR is not set")
    try:
        words = shlex.split(raw)
    except ValueError as exc:
        raise EditorError(f"$EDITOR is malformed ({exc})") from exc
    if not words or not words[0]:
        raise EditorError("$EDITOR is empty")
    return [*words, os.fspath(store_path)]


def launch_editor(
    store_path: Path,
    disable_tui_mode: Callable[[], None],
    enable_tui_mode: Callable[[], None],
) -> str | None:
    """Edit the store with the TUI suspended; return a status message or ``None``."""
    try:
        argv = editor_command(store_path)
    except EditorError as exc:
        return f"Cannot edit: {exc}."

    logger.debug("running editor: %s", argv)
    disable_tui_mode()
    try:
        completed = subprocess.run(argv, check=False)
    except (OSError, ValueError) as exc:
        logger.warning("editor %r could not be started: %s", argv[0], exc)
        return f"Failed to launch editor: {exc}"
    finally:
        enable_tui_mode()

    if completed.returncode != 0:
        logger.info("editor %r exited with status %d", argv[0], completed.returncode)
        return f"Editor exited with status {completed.returncode}."
    return None
