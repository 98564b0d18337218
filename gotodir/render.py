"""Full-screen frame rendering for the path picker.

The frame is a rounded search box on top, a bordered candidate list below it
and a one-row status line at the bottom. ``build_frame`` is pure: it returns
the escape-sequence string and leaves writing it to the caller.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

from .state import SelectorState

SEARCH_BOX_ROWS = 3
LIST_BORDER_ROWS = 2
STATUS_ROWS = 1
HIGHLIGHT_SYMBOL = ">>"
SEARCH_TITLE = "Search"
LIST_TITLE = "GOTO"
DEFAULT_HINT = "type to filter · ↑/↓ move · enter select · tab edit · esc quit"


@dataclass(frozen=True)
class FrameTheme:
    """ANSI styling used by the frame renderer."""

    border: str
    title: str
    query: str
    selected: str
    status: str
    reset: str


DEFAULT_THEME = FrameTheme(
    border="\033[38;5;244m",
    title="\033[1;38;5;81m",
    query="\033[1;38;5;229m",
    selected="\033[7m",
    status="\033[2;38;5;250m",
    reset="\033[0m",
)

PLAIN_THEME = FrameTheme(border="", title="", query="", selected="\033[7m", status="", reset="\033[0m")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one printable character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def clip_text(text: str, max_cols: int) -> str:
    """Trim ``text`` to ``max_cols`` display columns, masking control chars."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        if not ch.isprintable():
            ch = "?"
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def _pad(text: str, width: int) -> str:
    clipped = clip_text(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


def list_view_rows(height: int) -> int:
    """Return how many candidate rows fit in a terminal of ``height`` lines."""
    return max(1, height - SEARCH_BOX_ROWS - LIST_BORDER_ROWS - STATUS_ROWS)


def clamp_list_start(selected: int | None, list_start: int, rows: int, count: int) -> int:
    """Scroll the list window so the highlighted row stays visible."""
    if selected is not None:
        if selected < list_start:
            list_start = selected
        elif selected >= list_start + rows:
            list_start = selected - rows + 1
    return max(0, min(list_start, max(0, count - rows)))


def _box_top(width: int, title: str, left: str, right: str, theme: FrameTheme) -> str:
    inner = max(0, width - 2)
    label = clip_text(f" {title} ", inner)
    fill = "─" * max(0, inner - display_width(label))
    return f"{theme.border}{left}{theme.reset}{theme.title}{label}{theme.reset}{theme.border}{fill}{right}{theme.reset}"


def _box_bottom(width: int, left: str, right: str, theme: FrameTheme) -> str:
    return f"{theme.border}{left}{'─' * max(0, width - 2)}{right}{theme.reset}"


def _box_row(content: str, theme: FrameTheme) -> str:
    return f"{theme.border}│{theme.reset}{content}{theme.border}│{theme.reset}"


def build_frame(
    state: SelectorState,
    width: int,
    height: int,
    list_start: int = 0,
    status_message: str = "",
    theme: FrameTheme = DEFAULT_THEME,
) -> str:
    width = max(4, width)
    inner = width - 2
    out: list[str] = ["\033[H\033[J"]

    # Search box, with a reverse-video cell standing in for the cursor.
    query_text = clip_text(state.query, max(0, inner - 2))
    query_cell = f" {theme.query}{query_text}{theme.reset}{theme.selected} {theme.reset}"
    query_pad = " " * max(0, inner - 2 - display_width(query_text))
    out.append(_box_top(width, SEARCH_TITLE, "╭", "╮", theme))
    out.append("\r\n")
    out.append(_box_row(query_cell + query_pad, theme))
    out.append("\r\n")
    out.append(_box_bottom(width, "╰", "╯", theme))
    out.append("\r\n")

    rows = list_view_rows(height)
    out.append(_box_top(width, f"{LIST_TITLE} ({len(state.paths)})", "┌", "┐", theme))
    out.append("\r\n")
    symbol_blank = " " * len(HIGHLIGHT_SYMBOL)
    for row in range(rows):
        idx = list_start + row
        if idx < len(state.paths):
            if idx == state.selected:
                cell = theme.selected + _pad(HIGHLIGHT_SYMBOL + state.paths[idx], inner) + theme.reset
            else:
                cell = _pad(symbol_blank + state.paths[idx], inner)
        else:
            cell = " " * inner
        out.append(_box_row(cell, theme))
        out.append("\r\n")
    out.append(_box_bottom(width, "└", "┘", theme))
    out.append("\r\n")

    status = status_message or DEFAULT_HINT
    out.append(f"{theme.status}{clip_text(status, width - 1)}{theme.reset}")
    return "".join(out)
