"""Terminal control helpers for the picker session.

Owns raw-mode lifecycle and alternate-screen switching on the controlling
terminal. Teardown is idempotent and also runs from termination signal
handlers so an interrupted session never leaves the shell in raw mode.
"""

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import signal
import termios
import tty
from collections.abc import Iterator

logger = logging.getLogger(__name__)

TTY_PATH = "/dev/tty"
TEARDOWN_SIGNALS = (signal.SIGTERM, signal.SIGHUP, signal.SIGINT, signal.SIGQUIT)


class TerminalError(Exception):
    """Raised when the controlling terminal cannot be opened or configured."""


class TerminalController:
    """Manage terminal mode transitions for one picker session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind input/output file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalError(f"cannot read terminal attributes: {exc}") from exc
        self._tui_active = False
        self._previous_handlers: dict[int, object] = {}

    @property
    def tui_active(self) -> bool:
        return self._tui_active

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        if self._tui_active:
            return
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise TerminalError(f"cannot enter raw mode: {exc}") from exc
        self._tui_active = True
        # Enter alternate screen and hide cursor.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Restore the main screen buffer and the saved tty attributes."""
        if not self._tui_active:
            return
        self._tui_active = False
        try:
            # Show cursor and restore the main screen buffer.
            os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def write(self, text: str) -> None:
        os.write(self.stdout_fd, text.encode("utf-8", errors="replace"))

    def size(self) -> os.terminal_size:
        """Return the terminal size, falling back to 80x24."""
        try:
            return os.get_terminal_size(self.stdout_fd)
        except OSError:
            return shutil.get_terminal_size((80, 24))

    def _handle_teardown_signal(self, signum: int, _frame) -> None:
        logger.debug("restoring terminal on signal %d", signum)
        self.disable_tui_mode()
        self.restore_signal_handlers()
        os.kill(os.getpid(), signum)

    def install_signal_handlers(self) -> None:
        """Route termination signals through terminal teardown.

        Signals the parent process asked us to ignore stay ignored.
        """
        for signum in TEARDOWN_SIGNALS:
            previous = signal.getsignal(signum)
            if previous == signal.SIG_IGN:
                continue
            self._previous_handlers[signum] = previous
            signal.signal(signum, self._handle_teardown_signal)

    def restore_signal_handlers(self) -> None:
        while self._previous_handlers:
            signum, previous = self._previous_handlers.popitem()
            signal.signal(signum, previous if previous is not None else signal.SIG_DFL)

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[TerminalController]:
        """Context manager that brackets code with TUI enter/exit calls."""
        self.install_signal_handlers()
        try:
            self.enable_tui_mode()
            yield self
        finally:
            try:
                self.disable_tui_mode()
            finally:
                self.restore_signal_handlers()


@contextlib.contextmanager
def open_terminal(path: str = TTY_PATH) -> Iterator[TerminalController]:
    """Open the controlling terminal for both reading keys and drawing."""
    try:
        fd = os.open(path, os.O_RDWR | os.O_NOCTTY)
    except OSError as exc:
        raise TerminalError(f"cannot open {path}: {exc}") from exc
    try:
        yield TerminalController(stdin_fd=fd, stdout_fd=fd)
    finally:
        os.close(fd)
