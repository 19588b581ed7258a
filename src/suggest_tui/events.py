# suggest_tui/events.py
"""
Terminal events and the Terminal capability the input loop drives.

The loop never talks to curses directly; anything implementing `Terminal`
(the curses screen, or a scripted fake in tests) can host it.
"""
from __future__ import annotations
import enum
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Protocol, Tuple, Union


class Key(enum.Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    INTERRUPT = "interrupt"     # Ctrl-C
    OTHER = "other"             # arrows, function keys, Enter, Tab, ...


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: str = ""

    @classmethod
    def of(cls, char: str) -> "KeyEvent":
        return cls(Key.CHAR, char)


@dataclass(frozen=True)
class ResizeEvent:
    cols: int
    rows: int


@dataclass(frozen=True)
class OtherEvent:
    """Pointer and anything else that is not a key or a resize."""
    detail: str = ""


Event = Union[KeyEvent, ResizeEvent, OtherEvent]


class Terminal(Protocol):
    # exclusive control: raw keystrokes + isolated screen
    def enter(self) -> None: ...
    def leave(self) -> None: ...
    # (cols, rows)
    def size(self) -> Tuple[int, int]: ...
    # drawing
    def clear(self) -> None: ...
    def move_cursor(self, col: int, row: int) -> None: ...
    def write(self, text: str) -> None: ...
    def flush(self) -> None: ...
    # blocks until the next event
    def poll_event(self) -> Event: ...


@contextmanager
def session(terminal: Terminal) -> Iterator[Terminal]:
    """Hold the terminal for the duration of the block; always hand it back."""
    terminal.enter()
    try:
        yield terminal
    finally:
        terminal.leave()
