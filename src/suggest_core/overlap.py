"""
Suffix/prefix overlap between the edit buffer and a fragment.

The overlap is the length k of the longest suffix of the buffer that equals
the prefix of the fragment of the same length. It is used both for ranking
and for lining a suggestion up under the text it continues:

    buffer   = "say hel"
    fragment = "hello world"   -> overlap 3 ("hel")

Two implementations are provided. They return identical results for every
input; the prefix-function one runs in O(len(buffer) + len(fragment)).
"""
from __future__ import annotations
from typing import List, Sequence

from . import config as CFG

# Never equal to a character, so no match can run across the boundary
_SENTINEL = object()


def shared_suffix_prefix_naive(buffer: Sequence[str], fragment: Sequence[str]) -> int:
    """Try every length, longest first. 0 always matches."""
    buffer = list(buffer)
    fragment = list(fragment)
    for k in range(min(len(buffer), len(fragment)), 0, -1):
        if buffer[len(buffer) - k:] == fragment[:k]:
            return k
    return 0


def _prefix_function(seq: Sequence[object]) -> List[int]:
    """pi[i] = length of the longest proper border of seq[:i + 1]."""
    pi = [0] * len(seq)
    for i in range(1, len(seq)):
        k = pi[i - 1]
        while k > 0 and seq[i] != seq[k]:
            k = pi[k - 1]
        if seq[i] == seq[k]:
            k += 1
        pi[i] = k
    return pi


def shared_suffix_prefix_kmp(buffer: Sequence[str], fragment: Sequence[str]) -> int:
    """
    Prefix function over fragment + [sentinel] + buffer.

    The last value is the longest border of the whole sequence: a prefix of
    the fragment that is also a suffix of the buffer. The sentinel keeps that
    border from growing past len(fragment), and it cannot exceed len(buffer)
    because it ends at the buffer's last character.
    """
    if not buffer or not fragment:
        return 0
    seq: List[object] = [*fragment, _SENTINEL, *buffer]
    return _prefix_function(seq)[-1]


_MATCHERS = {
    "naive": shared_suffix_prefix_naive,
    "prefix-function": shared_suffix_prefix_kmp,
}


def get_matcher(name: str | None = None):
    name = name or CFG.OVERLAP_ALGORITHM
    try:
        return _MATCHERS[name]
    except KeyError:
        raise ValueError(f"Unknown overlap algorithm: {name!r} (expected one of {sorted(_MATCHERS)})")


def shared_suffix_prefix(buffer: Sequence[str], fragment: Sequence[str]) -> int:
    """Overlap using the configured algorithm (config.OVERLAP_ALGORITHM)."""
    return get_matcher()(buffer, fragment)
