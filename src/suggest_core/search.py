from __future__ import annotations
from typing import Callable, List, Sequence

from .models import Fragment
from .overlap import get_matcher


def update_overlaps(fragments: Sequence[Fragment], buffer: Sequence[str],
                    matcher: Callable[[Sequence[str], Sequence[str]], int] | None = None) -> None:
    """Recompute `overlap` for every fragment against the current buffer."""
    match = matcher or get_matcher()
    for f in fragments:
        f.overlap = match(buffer, f.data)


def rank_key(f: Fragment) -> tuple[int, int, int]:
    # /* ~~~ ascending key: larger overlap, then larger count, then earlier seq sorts later ~~~ */
    return (f.overlap, f.count, -f.seq)


def rank(fragments: Sequence[Fragment], buffer: Sequence[str],
         matcher: Callable[[Sequence[str], Sequence[str]], int] | None = None) -> List[Fragment]:
    """
    Return fragments best-first for the given buffer.

    Ordering is by (overlap, count) descending. Equal pairs keep first-seen
    order (`seq`), so the result does not depend on the order of the input.
    """
    update_overlaps(fragments, buffer, matcher)
    return sorted(fragments, key=rank_key, reverse=True)
