# suggest_core/models.py
"""
Data models for the suggestion engine.

- Fragment: one distinct line of the source plus how often it occurred.
- Placement: a piece of text drawn at a screen position.
- Frame: everything drawn for one keystroke.

No business logic lives here; loading, matching, ranking and layout operate
on these containers.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class Fragment:
    """
    A candidate text snippet.

    Attributes
    ----------
    data : str
        The fragment text exactly as read (line terminator removed).
    count : int
        Number of source lines with exactly this content.
    overlap : int
        Length of the longest buffer suffix equal to a prefix of `data`.
        Recomputed on every keystroke; never persisted.
    seq : int
        Position of the first occurrence among distinct lines. Used as the
        final tie-break so ranking is deterministic.

    Only `data` takes part in equality and hashing.
    """
    data: str
    count: int = field(default=1, compare=False)
    overlap: int = field(default=0, compare=False)
    seq: int = field(default=0, compare=False)

    def __hash__(self) -> int:
        return hash(self.data)


@dataclass(frozen=True, slots=True)
class Placement:
    row: int
    col: int
    text: str


@dataclass(frozen=True, slots=True)
class Frame:
    """
    One full redraw.

    Attributes
    ----------
    buffer_line : Placement | None
        The visible tail of the edit buffer on row 0 (None when the screen has
        no room at all).
    suggestions : List[Placement]
        One placement per drawn fragment, rows 1 and up.
    cursor_col : int
        Column on row 0 where the typed text ends.
    """
    buffer_line: Placement | None = None
    suggestions: List[Placement] = field(default_factory=list)
    cursor_col: int = 0

    def placements(self) -> List[Placement]:
        out = [self.buffer_line] if self.buffer_line is not None else []
        out.extend(self.suggestions)
        return out
