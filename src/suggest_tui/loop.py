# suggest_tui/loop.py
from __future__ import annotations
import enum
import logging
from typing import List, Tuple

from suggest_core import Engine, Frame
from .events import Event, Key, KeyEvent, ResizeEvent, Terminal, session

log = logging.getLogger(__name__)


class LoopState(enum.Enum):
    INIT = "init"
    RUNNING = "running"
    TERMINATED = "terminated"


class InputLoop:
    """
    Read one terminal event at a time, edit the buffer, redraw everything.

    INIT -> RUNNING when run() has the terminal; RUNNING -> TERMINATED on
    Ctrl-C. The terminal is handed back on every way out of run(), errors
    included.
    """

    def __init__(self, terminal: Terminal, engine: Engine) -> None:
        self.terminal = terminal
        self.engine = engine
        self.state = LoopState.INIT
        self.buffer: List[str] = []
        self.size: Tuple[int, int] = (0, 0)
        self.last_frame: Frame | None = None

    @property
    def text(self) -> str:
        return "".join(self.buffer)

    def run(self) -> str:
        """Drive the terminal until Ctrl-C; return the final buffer text."""
        with session(self.terminal):
            self.size = self.terminal.size()
            self.state = LoopState.RUNNING
            log.info("Input loop running at %sx%s", *self.size)
            self.redraw()
            while self.state is LoopState.RUNNING:
                if self.handle(self.terminal.poll_event()):
                    self.redraw()
        log.info("Input loop terminated, buffer=%d chars", len(self.buffer))
        return self.text

    # /* ~~~ apply one event; True when the screen needs a redraw ~~~ */
    def handle(self, event: Event) -> bool:
        if isinstance(event, KeyEvent):
            if event.key is Key.INTERRUPT:
                self.state = LoopState.TERMINATED
                return False
            if event.key is Key.CHAR:
                self.buffer.append(event.char)
            elif event.key is Key.BACKSPACE:
                if self.buffer:
                    self.buffer.pop()
        elif isinstance(event, ResizeEvent):
            self.size = (event.cols, event.rows)
            log.debug("Resized to %sx%s", event.cols, event.rows)
        return True

    def redraw(self) -> None:
        cols, rows = self.size
        frame = self.engine.render(self.buffer, cols, rows)
        t = self.terminal
        t.clear()
        for p in frame.placements():
            t.move_cursor(p.col, p.row)
            t.write(p.text)
        if cols > 0 and rows > 0:
            t.move_cursor(min(frame.cursor_col, cols - 1), 0)
        t.flush()
        self.last_frame = frame
