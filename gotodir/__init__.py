"""gotodir: fuzzy terminal picker for bookmarked directories.

``gotodir add PATH`` bookmarks a directory; running ``gotodir`` alone opens the
picker and prints the chosen path, so ``cd "$(gotodir)"`` jumps there.
The selection engine lives in ``gotodir.state`` and ``gotodir.keys``.
"""

from __future__ import annotations

__version__ = "0.1.0"


def main(argv=None):
    """Run the command line; the import is deferred until first call."""
    from .cli import main as _main

    return _main(argv)

__all__ = ["main", "__version__"]
