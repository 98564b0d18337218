"""Selector session bootstrap and interactive loop.

Loads the bookmark store, builds the initial ``SelectorState`` and drives the
render → read key → dispatch cycle until Enter or Escape ends the session.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .editor import launch_editor
from .input import read_key
from .keys import handle_key
from .render import DEFAULT_THEME, FrameTheme, build_frame, clamp_list_start, list_view_rows
from .state import SelectorState
from .store import load_paths
from .terminal import TerminalController, open_terminal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of a session: ``output`` is ``None`` when the user cancelled."""

    output: str | None

    @property
    def cancelled(self) -> bool:
        return self.output is None


def run_main_loop(
    state: SelectorState,
    terminal: TerminalController,
    store_path: Path,
    theme: FrameTheme = DEFAULT_THEME,
    read_key_fn: Callable[[int], str] = read_key,
) -> SelectionResult:
    """Run the picker loop on an already opened terminal.

    End of input (an empty key token) is treated as a cancel so a closed
    terminal cannot spin the loop forever.

    A frame is written only when the last key changed the state, a status
    message appeared or went away, the editor handed the screen back, or
    the terminal was resized.
    """
    list_start = 0
    status_message = ""
    output: str | None = None
    needs_redraw = True
    drawn_size: os.terminal_size | None = None

    with terminal.raw_mode():
        while not state.exit:
            term = terminal.size()
            if needs_redraw or term != drawn_size:
                rows = list_view_rows(term.lines)
                list_start = clamp_list_start(state.selected, list_start, rows, len(state.paths))
                terminal.write(build_frame(state, term.columns, term.lines, list_start, status_message, theme))
                drawn_size = term

            key = read_key_fn(terminal.stdin_fd)
            if key == "":
                logger.debug("input closed, cancelling session")
                state.cancel()
                break
            outcome = handle_key(key, state)
            if state.exit:
                output = outcome.result
                break
            needs_redraw = outcome.changed or bool(status_message)
            status_message = ""
            if outcome.edit_requested:
                error = launch_editor(store_path, terminal.disable_tui_mode, terminal.enable_tui_mode)
                status_message = error or ""
                needs_redraw = True

    return SelectionResult(output=output)


def run_selector(store_path: Path, theme: FrameTheme = DEFAULT_THEME) -> SelectionResult:
    """Load bookmarks from ``store_path`` and run an interactive session.

    Store errors surface before the terminal is touched.
    """
    paths = load_paths(store_path)
    state = SelectorState.from_paths(paths)
    logger.debug("starting selector with %d candidate(s)", len(paths))
    with open_terminal() as terminal:
        return run_main_loop(state, terminal, store_path, theme)
