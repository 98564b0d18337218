"""Keyboard dispatch for the path picker.

Each key token maps to at most one ``SelectorState`` transition. Side effects
(printing the result, launching an editor) are left to the caller and only
described by the returned ``KeyOutcome``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .state import DOWN, UP, SelectorState

CANCEL_KEYS = frozenset({"ESC", "CTRL_C"})


@dataclass(frozen=True)
class KeyOutcome:
    """What one key did to the session.

    ``result`` is only meaningful once ``state.exit`` is set: the confirmed
    path (or ``"."``) for Enter, ``None`` for a cancel.
    """

    changed: bool = False
    edit_requested: bool = False
    result: str | None = None


def is_text_key(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def handle_key(key: str, state: SelectorState) -> KeyOutcome:
    """Apply ``key`` to ``state`` and describe the outcome."""
    if state.exit:
        return KeyOutcome()

    if key == "ENTER":
        return KeyOutcome(changed=True, result=state.confirm())
    if key in CANCEL_KEYS:
        state.cancel()
        return KeyOutcome(changed=True)
    if key == "TAB":
        return KeyOutcome(edit_requested=True)
    if key == "UP":
        previous = state.selected
        state.move_selection(UP)
        return KeyOutcome(changed=state.selected != previous)
    if key == "DOWN":
        previous = state.selected
        state.move_selection(DOWN)
        return KeyOutcome(changed=state.selected != previous)
    if key == "BACKSPACE":
        state.remove_last_char()
        return KeyOutcome(changed=True)
    if is_text_key(key):
        state.append_char(key)
        return KeyOutcome(changed=True)
    return KeyOutcome()
