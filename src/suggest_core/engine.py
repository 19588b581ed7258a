# suggest_core/engine.py
from __future__ import annotations

import os
import logging
from typing import Iterable, List, Optional, Sequence

from . import config as CFG
from .models import Fragment, Frame
from .loader import load_fragments, load_fragments_from_path
from .overlap import get_matcher
from .search import rank
from .layout import layout, OVERFLOW_POLICIES

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - fragment loading (loader.load_fragments*),
      - overlap + ranking (search.rank),
      - screen layout (layout.layout).

    Public API (used by the terminal frontend):
      * build(source, ...): load and deduplicate fragments
      * complete(buffer):   rank fragments for the current buffer
      * render(buffer, cols, rows): rank + layout in one step
      * shutdown():         drop loaded state
    """

    # ------------- lifecycle -------------

    def __init__(self, *, matcher: Optional[str] = None, overflow: Optional[str] = None) -> None:
        self.fragments: Optional[List[Fragment]] = None
        self._match = get_matcher(matcher)
        self.overflow = overflow or CFG.OVERFLOW_POLICY
        if self.overflow not in OVERFLOW_POLICIES:
            raise ValueError(f"Unknown overflow policy: {self.overflow!r}")

    # /* ~~~ Load fragments from a file path or an iterable of lines ~~~ */
    def build(self, source: str | os.PathLike | Iterable[str]) -> None:
        if isinstance(source, (str, os.PathLike)):
            log.info("Loading fragments from %s", source)
            fragments = load_fragments_from_path(source)
        else:
            fragments = load_fragments(source)

        self.fragments = fragments
        log.info("Engine build() complete: fragments=%d", len(fragments))

    # ------------- query -------------

    # /* ~~~ Rank all fragments for the buffer, best first ~~~ */
    def complete(self, buffer: Sequence[str], *, top_k: Optional[int] = None) -> List[Fragment]:
        if self.fragments is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        ranked = rank(self.fragments, buffer, self._match)
        return ranked if top_k is None else ranked[:top_k]

    # /* ~~~ Rank and lay out one frame for a terminal of size (cols, rows) ~~~ */
    def render(self, buffer: Sequence[str], cols: int, rows: int) -> Frame:
        ranked = self.complete(buffer)
        return layout(cols, rows, buffer, ranked, overflow=self.overflow)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.fragments = None
        log.info("Engine shutdown complete")
