"""Terminal frontend: curses screen, input loop and the `tailsuggest` command."""
from __future__ import annotations
import logging
from .events import Key, KeyEvent, ResizeEvent, OtherEvent, Terminal, session
from .loop import InputLoop, LoopState

# stay quiet unless the CLI configures logging (--verbose)
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["Key", "KeyEvent", "ResizeEvent", "OtherEvent", "Terminal", "session", "InputLoop", "LoopState"]
