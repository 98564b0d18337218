"""Selector state for the interactive path picker.

Holds the query text, the ranked candidate paths, the highlighted index and
the exit flag. Every operation is total: nothing here performs I/O or raises
on well-formed state.

Selection invariant: ``selected`` is ``None`` exactly when ``paths`` is empty,
otherwise an index in ``range(len(paths))``. Query edits re-rank the whole
candidate list and move the highlight back to the top entry.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .fuzzy import fuzzy_sort_in_place

UP = -1
DOWN = 1
CURRENT_DIRECTORY = "."

RankFunction = Callable[[list[str], str], None]


def _initial_selection(paths: list[str]) -> int | None:
    return 0 if paths else None


@dataclass
class SelectorState:
    paths: list[str]
    query: str = ""
    selected: int | None = None
    exit: bool = False
    rank: RankFunction = field(default=fuzzy_sort_in_place, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.paths:
            self.selected = None
        elif self.selected is None or not (0 <= self.selected < len(self.paths)):
            self.selected = 0

    @classmethod
    def from_paths(cls, paths: Iterable[str], rank: RankFunction | None = None) -> SelectorState:
        """Build a session state in store order with the top entry highlighted."""
        ordered = list(paths)
        return cls(paths=ordered, selected=_initial_selection(ordered), rank=rank or fuzzy_sort_in_place)

    @property
    def selected_path(self) -> str | None:
        """Return the highlighted path, or ``None`` for an empty list."""
        if self.selected is None:
            return None
        return self.paths[self.selected]

    def append_char(self, ch: str) -> None:
        self.query += ch
        self._rerank()

    def remove_last_char(self) -> None:
        self.query = self.query[:-1]
        self._rerank()

    def move_selection(self, direction: int) -> None:
        """Move the highlight one row, wrapping at either end."""
        if self.selected is None or not self.paths:
            return
        count = len(self.paths)
        if direction == DOWN:
            self.selected = (self.selected + 1) % count
        elif direction == UP:
            self.selected = count - 1 if self.selected == 0 else self.selected - 1

    def confirm(self) -> str:
        """Finish the session and return the highlighted path or ``"."``."""
        self.exit = True
        path = self.selected_path
        return CURRENT_DIRECTORY if path is None else path

    def cancel(self) -> None:
        self.exit = True

    def _rerank(self) -> None:
        # Ranking reorders the full set; the old index may now point anywhere.
        self.rank(self.paths, self.query)
        self.selected = _initial_selection(self.paths)
