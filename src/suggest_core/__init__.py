"""
Suggestion core: fragments, overlap matching, ranking and screen layout.

Nothing in this package touches the terminal; the frontend feeds it an edit
buffer and a terminal size and draws the Frame it gets back.

Example Usage:
    from suggest_core import Engine

    eng = Engine()
    eng.build(["hello world", "hello world", "help me"])
    best = eng.complete("say hel")[0]      # Fragment('hello world', count=2, overlap=3)
"""
import logging

from .engine import Engine  # re-export
from .models import Fragment, Frame, Placement
from .loader import FragmentSourceError, load_fragments, load_fragments_from_path
from .overlap import shared_suffix_prefix

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    "Engine",
    "Fragment",
    "Frame",
    "Placement",
    "FragmentSourceError",
    "load_fragments",
    "load_fragments_from_path",
    "shared_suffix_prefix",
]
