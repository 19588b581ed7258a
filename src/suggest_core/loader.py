from __future__ import annotations
import logging
import os
from typing import Dict, Iterable, List

from .models import Fragment
from . import config as CFG

log = logging.getLogger(__name__)


class FragmentSourceError(OSError):
    """The fragment source was opened but its bytes are not valid text."""


def _strip_eol(line: str) -> str:
    # only "\n" ends a line; a "\r" right before it belongs to the terminator
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_lines(path: str | os.PathLike, encoding: str | None = None) -> List[str]:
    """
    Read a fragments file: one entry per line, terminator stripped.

    A final newline does not add an empty entry; blank lines in the middle do.
    Raises OSError when the file cannot be opened or read.
    """
    encoding = encoding or CFG.ENCODING
    try:
        with open(path, "r", encoding=encoding, newline="\n") as f:
            return [_strip_eol(ln) for ln in f]
    except UnicodeDecodeError as e:
        raise FragmentSourceError(f"{path}: not valid {encoding} text ({e.reason} at byte {e.start})") from e


def load_fragments(lines: Iterable[str]) -> List[Fragment]:
    """
    Group lines by exact content and return one Fragment per distinct line.

    Order is first-seen: the first line's fragment comes first, and `seq`
    records that position.
    """
    counts: Dict[str, int] = {}
    for line in lines:
        counts[line] = counts.get(line, 0) + 1
    return [Fragment(data=data, count=n, overlap=0, seq=i) for i, (data, n) in enumerate(counts.items())]


def load_fragments_from_path(path: str | os.PathLike, encoding: str | None = None) -> List[Fragment]:
    lines = read_lines(path, encoding=encoding)
    fragments = load_fragments(lines)
    log.info("Loaded %d lines (%d distinct) from %s", len(lines), len(fragments), path)
    return fragments
