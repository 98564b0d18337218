from __future__ import annotations

import re
import unittest

from gotodir.render import (
    DEFAULT_HINT,
    PLAIN_THEME,
    build_frame,
    clamp_list_start,
    clip_text,
    display_width,
    list_view_rows,
)
from gotodir.state import SelectorState

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def _plain_rows(frame: str) -> list[str]:
    return ANSI_ESCAPE_RE.sub("", frame).split("\r\n")


class FrameLayoutTests(unittest.TestCase):
    def test_frame_has_search_box_list_box_and_status_row(self) -> None:
        state = SelectorState.from_paths(["/a", "/b"])
        state.append_char("a")

        rows = _plain_rows(build_frame(state, width=30, height=10, theme=PLAIN_THEME))

        self.assertEqual(len(rows), 10)
        self.assertTrue(rows[0].startswith("╭ Search "))
        self.assertEqual(rows[1].rstrip(), "│ a" + " " * 26 + "│")
        self.assertTrue(rows[2].startswith("╰"))
        self.assertTrue(rows[3].startswith("┌ GOTO (2) "))
        self.assertEqual(rows[-1], DEFAULT_HINT[:29])
        for row in rows[:-1]:
            self.assertEqual(display_width(row), 30)

    def test_selected_row_carries_highlight_symbol(self) -> None:
        state = SelectorState.from_paths(["/a", "/b", "/c"])
        state.move_selection(1)

        rows = _plain_rows(build_frame(state, width=20, height=10, theme=PLAIN_THEME))

        self.assertTrue(rows[4].startswith("│  /a"))
        self.assertTrue(rows[5].startswith("│>>/b"))
        self.assertTrue(rows[6].startswith("│  /c"))

    def test_list_start_scrolls_visible_window(self) -> None:
        state = SelectorState.from_paths([f"/p{i}" for i in range(10)])

        rows = _plain_rows(build_frame(state, width=20, height=8, list_start=5, theme=PLAIN_THEME))

        self.assertTrue(rows[4].startswith("│  /p5"))
        self.assertEqual(len(rows), 8)

    def test_empty_list_renders_blank_rows(self) -> None:
        state = SelectorState.from_paths([])

        rows = _plain_rows(build_frame(state, width=20, height=8, theme=PLAIN_THEME))

        self.assertTrue(rows[3].startswith("┌ GOTO (0) "))
        self.assertEqual(rows[4], "│" + " " * 18 + "│")

    def test_status_message_replaces_hint(self) -> None:
        state = SelectorState.from_paths(["/a"])

        rows = _plain_rows(build_frame(state, 40, 8, status_message="Cannot edit: $EDITOR is not set."))

        self.assertEqual(rows[-1], "Cannot edit: $EDITOR is not set.")

    def test_frame_starts_by_clearing_screen(self) -> None:
        state = SelectorState.from_paths(["/a"])

        self.assertTrue(build_frame(state, 20, 8).startswith("\033[H\033[J"))


class TextMeasureTests(unittest.TestCase):
    def test_clip_text_respects_wide_characters(self) -> None:
        self.assertEqual(clip_text("文档abc", 3), "文")
        self.assertEqual(clip_text("abc", 0), "")
        self.assertEqual(display_width("文a"), 3)

    def test_clip_text_masks_control_characters(self) -> None:
        self.assertEqual(clip_text("/a\tb", 10), "/a?b")


class ListWindowTests(unittest.TestCase):
    def test_list_view_rows_reserves_chrome_rows(self) -> None:
        self.assertEqual(list_view_rows(24), 18)
        self.assertEqual(list_view_rows(3), 1)

    def test_clamp_list_start_follows_selection(self) -> None:
        self.assertEqual(clamp_list_start(0, 0, 5, 20), 0)
        self.assertEqual(clamp_list_start(7, 0, 5, 20), 3)
        self.assertEqual(clamp_list_start(2, 3, 5, 20), 2)
        self.assertEqual(clamp_list_start(19, 0, 5, 20), 15)

    def test_clamp_list_start_after_wrap_to_top(self) -> None:
        self.assertEqual(clamp_list_start(0, 15, 5, 20), 0)

    def test_clamp_list_start_without_selection(self) -> None:
        self.assertEqual(clamp_list_start(None, 4, 5, 0), 0)


if __name__ == "__main__":
    unittest.main()
