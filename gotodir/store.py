"""Append-only bookmark store.

One path per line, UTF-8, no header and no escaping. Reading drops blank
lines; appending never merges the new entry into an unterminated last line.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the bookmark store cannot be created, read, or written."""

    def __init__(self, action: str, path: Path, cause: BaseException) -> None:
        super().__init__(f"cannot {action} store {path}: {cause}")
        self.action = action
        self.path = path
        self.__cause__ = cause


def ensure_store(store_path: Path) -> Path:
    """Create the store file (and its parent directory) when missing."""
    try:
        store_path.parent.mkdir(parents=True, exist_ok=True)
        if not store_path.exists():
            store_path.touch()
            logger.info("created empty store at %s", store_path)
    except OSError as exc:
        raise StoreError("create", store_path, exc) from exc
    return store_path


def parse_store_text(text: str) -> list[str]:
    """Split store contents into paths, keeping order and duplicates.

    Only ``\\n`` ends an entry; a ``\\r`` right before it is dropped. Form
    feeds, ``\\u2028`` and the other characters ``str.splitlines`` treats as
    breaks are legal in paths and stay part of the entry.
    """
    lines = (line[:-1] if line.endswith("\r") else line for line in text.split("\n"))
    return [line for line in lines if line.strip()]


def load_paths(store_path: Path) -> list[str]:
    """Read every bookmarked path in file order."""
    ensure_store(store_path)
    try:
        text = store_path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StoreError("read", store_path, exc) from exc
    paths = parse_store_text(text)
    logger.debug("loaded %d path(s) from %s", len(paths), store_path)
    return paths


class PathError(ValueError):
    """Raised when a path given to ``add`` cannot be made absolute."""


def canonical_path(raw: str) -> str:
    """Expand ``~`` and resolve ``raw`` to an absolute path string."""
    try:
        return str(Path(raw).expanduser().resolve())
    except (RuntimeError, OSError, ValueError) as exc:
        # Unknown ``~user`` raises RuntimeError; symlink loops raise on 3.13+.
        raise PathError(f"cannot resolve path {raw!r}: {exc}") from exc


def add_path(path: str, store_path: Path) -> None:
    """Append ``path`` as a new line at the end of the store."""
    ensure_store(store_path)
    try:
        with store_path.open("rb+") as handle:
            handle.seek(0, 2)
            needs_separator = False
            if handle.tell() > 0:
                handle.seek(-1, 2)
                needs_separator = handle.read(1) != b"\n"
            payload = ("\n" if needs_separator else "") + path + "\n"
            handle.write(payload.encode("utf-8"))
    except OSError as exc:
        raise StoreError("write", store_path, exc) from exc
    logger.info("added %s to %s", path, store_path)
