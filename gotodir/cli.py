"""Command-line front door for gotodir.

Without a subcommand, runs the interactive picker and prints the chosen path
for the calling shell. ``add PATH`` appends a bookmark to the store.
"""

from __future__ import annotations

import argparse
import os
import sys

from . import __version__
from .app import run_selector
from .config import resolve_store_path
from .logger import setup_logging
from .render import DEFAULT_THEME, PLAIN_THEME
from .store import PathError, StoreError, add_path, canonical_path
from .terminal import TerminalError

MISSING_ADD_PATH_MESSAGE = "missing path to add."
INTERRUPTED_EXIT_CODE = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gotodir",
        description="Pick a bookmarked directory and print it, e.g. cd \"$(gotodir)\".",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--store",
        metavar="PATH",
        default=None,
        help="Bookmark file to use (default: $GOTO_STORE or the platform config dir).",
    )
    parser.add_argument("--no-color", action="store_true", help="Draw the picker without colors.")
    subparsers = parser.add_subparsers(dest="command")
    add_parser = subparsers.add_parser("add", help="Append a path to the bookmark store.")
    add_parser.add_argument("path", nargs="?", default=None, help="Path to bookmark.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the requested mode.

    Fatal store or terminal failures exit non-zero with a message on stderr;
    a missing ``add`` argument is reported but still exits 0.
    """
    args = build_parser().parse_args(argv)
    setup_logging()
    store_path = resolve_store_path(args.store)

    if args.command == "add":
        if not args.path:
            print(MISSING_ADD_PATH_MESSAGE, file=sys.stderr)
            return
        try:
            add_path(canonical_path(args.path), store_path)
        except (PathError, StoreError) as exc:
            raise SystemExit(f"gotodir: {exc}") from exc
        return

    no_color = args.no_color or bool(os.environ.get("NO_COLOR"))
    theme = PLAIN_THEME if no_color else DEFAULT_THEME
    try:
        result = run_selector(store_path, theme)
    except (StoreError, TerminalError) as exc:
        raise SystemExit(f"gotodir: {exc}") from exc
    except KeyboardInterrupt:
        raise SystemExit(INTERRUPTED_EXIT_CODE) from None

    if result.output is not None:
        sys.stdout.write(result.output + "\n")
        sys.stdout.flush()


if __name__ == "__main__":
    main()
