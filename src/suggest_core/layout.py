"""
Screen layout for one frame.

Row 0 holds the tail of the edit buffer. Rows 1.. hold the ranked fragments,
each shifted left by its overlap so the overlapping characters sit directly
under the end of the typed text:

    col:     0123456789
    row 0:   say hel
    row 1:       hello world (02)
    row 2:       help me (01)

The buffer line is shortened from the left when the widest suggestion would
otherwise be pushed past the right edge.
"""
from __future__ import annotations
from typing import List, Sequence

from .models import Fragment, Frame, Placement
from . import config as CFG

OVERFLOW_POLICIES = ("clip", "suppress")


def format_count_suffix(count: int) -> str:
    """' (NN)' with the count capped at COUNT_CAP, never wrapped."""
    return f" ({min(count, CFG.COUNT_CAP):02d})"


def suggestion_width(f: Fragment) -> int:
    """Columns a suggestion needs to the right of the cursor."""
    return len(f.data) - f.overlap + CFG.SUFFIX_WIDTH


def _clip_right(p: Placement, cols: int) -> Placement | None:
    room = cols - p.col
    if room <= 0 or not p.text:
        return None
    if len(p.text) > room:
        return Placement(p.row, p.col, p.text[:room])
    return p


def layout(cols: int, rows: int, buffer: Sequence[str], ranked: Sequence[Fragment],
           overflow: str | None = None) -> Frame:
    """
    Compute the frame for terminal size (cols, rows).

    `ranked` is best-first with overlaps already computed for `buffer`.
    `overflow` (default config.OVERFLOW_POLICY) decides what happens to a
    fragment whose overlap is longer than the visible part of the buffer:
    "clip" draws it from column 0 without its off-screen head, "suppress"
    leaves it out.
    """
    overflow = overflow or CFG.OVERFLOW_POLICY
    if overflow not in OVERFLOW_POLICIES:
        raise ValueError(f"Unknown overflow policy: {overflow!r} (expected one of {list(OVERFLOW_POLICIES)})")

    if cols <= 0 or rows <= 0:
        return Frame()

    max_width = max((suggestion_width(f) for f in ranked), default=0)
    visible_cols = max(0, cols - max_width)
    window_start = max(0, len(buffer) - visible_cols)
    cursor_col = min(visible_cols, len(buffer))

    buffer_line = _clip_right(Placement(0, 0, "".join(buffer[window_start:])), cols)

    suggestions: List[Placement] = []
    row = 1
    for f in ranked:
        if row >= rows:
            break
        text = f.data + format_count_suffix(f.count)
        col = cursor_col - f.overlap
        if col < 0:
            if overflow == "suppress":
                continue
            text = text[-col:]
            col = 0
        placed = _clip_right(Placement(row, col, text), cols)
        if placed is not None:
            suggestions.append(placed)
        row += 1

    return Frame(buffer_line=buffer_line, suggestions=suggestions, cursor_col=cursor_col)
