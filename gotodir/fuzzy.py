"""Fuzzy ranking of bookmarked paths.

``fuzzy_sort_in_place`` reorders a list of paths by relevance to a query.
It never drops entries: non-matching paths sink to the back in their prior
relative order, so every bookmark stays selectable.
"""

from __future__ import annotations

BOUNDARY_CHARS = "/_- ."
SUBSTRING_BASE_SCORE = 10_000


def fuzzy_score(query: str, candidate: str) -> int | None:
    """Score ``candidate`` as an in-order subsequence match of ``query``.

    Contiguous runs and matches right after a path separator or word
    boundary score higher; gaps and long candidates cost a little. Returns
    ``None`` when some query character cannot be matched.
    """
    if not query:
        return 0
    query_folded = query.casefold()
    candidate_folded = candidate.casefold()

    score = 0
    prev_idx = -1
    run = 0
    for needle in query_folded:
        idx = candidate_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            gap = idx - prev_idx - 1
            run = 0
            score -= min(40, gap * 2)
        if idx == 0 or candidate_folded[idx - 1] in BOUNDARY_CHARS:
            score += 35
        prev_idx = idx

    score -= len(candidate_folded) // 5
    return score


def substring_index(query: str, candidate: str) -> int | None:
    """Return the case-insensitive position of ``query`` in ``candidate``."""
    if not query:
        return 0
    idx = candidate.casefold().find(query.casefold())
    if idx < 0:
        return None
    return idx


def rank_key(query: str, candidate: str) -> int | None:
    """Return a relevance score where higher is better, ``None`` for no match.

    Plain substring hits always outrank scattered subsequence hits; among
    substring hits earlier and shorter candidates win.
    """
    idx = substring_index(query, candidate)
    if idx is not None:
        return SUBSTRING_BASE_SCORE - (idx * 50) - len(candidate)
    return fuzzy_score(query, candidate)


def fuzzy_sort_in_place(paths: list[str], query: str) -> None:
    """Reorder ``paths`` descending by relevance to ``query``.

    The sort is stable, so ties (and the whole list for an empty query) keep
    their current order. Elements are never added or removed.
    """
    if not query or len(paths) < 2:
        return
    scores = {path: rank_key(query, path) for path in set(paths)}

    def sort_key(path: str) -> tuple[int, int]:
        score = scores[path]
        if score is None:
            return (1, 0)
        return (0, -score)

    paths.sort(key=sort_key)
