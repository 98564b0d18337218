"""Regression tests for raw-key decoding.

Covers ESC timing, arrow sequences, control keys and UTF-8 characters.
These tests protect interactive input handling in raw terminal mode.
"""

import os
import time
import unittest

from gotodir import input as input_mod


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        started = time.monotonic()
        keys = self._read_all(b"\x1b", 1)
        elapsed = time.monotonic() - started

        self.assertEqual(keys, ["ESC"])
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[A\x1b[B", 2), ["UP", "DOWN"])

    def test_application_mode_arrows_are_recognized(self) -> None:
        self.assertEqual(self._read_all(b"\x1bOA\x1bOB", 2), ["UP", "DOWN"])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1ba", 2), ["ESC", "a"])

    def test_control_keys_map_to_tokens(self) -> None:
        self.assertEqual(
            self._read_all(b"\r\n\t\x7f\x08\x03", 6),
            ["ENTER", "ENTER", "TAB", "BACKSPACE", "BACKSPACE", "CTRL_C"],
        )

    def test_tilde_sequences_are_consumed_as_unknown(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[3~x", 2), ["UNKNOWN", "x"])

    def test_multibyte_utf8_character_is_one_key(self) -> None:
        self.assertEqual(self._read_all("é文".encode("utf-8"), 2), ["é", "文"])

    def test_timeout_without_input_returns_empty_token(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            key = input_mod.read_key(read_fd, timeout_ms=10)
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "")

    def test_closed_input_returns_empty_token(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            key = input_mod.read_key(read_fd)
        finally:
            os.close(read_fd)

        self.assertEqual(key, "")


if __name__ == "__main__":
    unittest.main()
