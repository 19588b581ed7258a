# suggest_tui/screen.py
from __future__ import annotations
import curses
import logging
from typing import Optional, Tuple

from .events import Event, Key, KeyEvent, OtherEvent, ResizeEvent

log = logging.getLogger(__name__)

# /* ~~~ raw mode delivers these as plain characters ~~~ */
_CTRL_C = "\x03"
_BACKSPACE_CHARS = ("\x7f", "\x08")

# one column per character: anything curses would expand or act on
# (tabs, carriage returns, other controls) is drawn as this instead
PLACEHOLDER = "?"


def printable(text: str) -> str:
    return "".join(ch if ch.isprintable() else PLACEHOLDER for ch in text)


def translate_key(ch: str | int, size: Tuple[int, int]) -> Event:
    """
    Map a curses get_wch() result to an Event.

    `size` is the (cols, rows) reported after a KEY_RESIZE.
    """
    if isinstance(ch, int):
        if ch == curses.KEY_RESIZE:
            return ResizeEvent(*size)
        if ch == curses.KEY_BACKSPACE:
            return KeyEvent(Key.BACKSPACE)
        if ch == curses.KEY_MOUSE:
            return OtherEvent("mouse")
        return KeyEvent(Key.OTHER)

    if ch == _CTRL_C:
        return KeyEvent(Key.INTERRUPT)
    if ch in _BACKSPACE_CHARS:
        return KeyEvent(Key.BACKSPACE)
    if ch.isprintable():
        return KeyEvent.of(ch)
    return KeyEvent(Key.OTHER)


class CursesTerminal:
    """
    Terminal capability backed by curses.

    enter() switches to the alternate screen with raw, unechoed input and
    keypad translation; leave() undoes all of it, the same steps
    curses.wrapper takes around its callback.
    """

    def __init__(self) -> None:
        self._scr: Optional["curses.window"] = None

    @property
    def screen(self) -> "curses.window":
        if self._scr is None:
            raise RuntimeError("Terminal not entered. Call enter() first.")
        return self._scr

    # ------------- lifecycle -------------

    def enter(self) -> None:
        self._scr = curses.initscr()
        try:
            curses.noecho()
            curses.raw()
            self._scr.keypad(True)
        except curses.error:
            self.leave()
            raise
        log.info("Entered curses screen %sx%s", *self.size())

    def leave(self) -> None:
        if self._scr is None:
            return
        try:
            self._scr.keypad(False)
            curses.noraw()
            curses.echo()
        finally:
            self._scr = None
            curses.endwin()
            log.info("Left curses screen")

    # ------------- drawing -------------

    def size(self) -> Tuple[int, int]:
        rows, cols = self.screen.getmaxyx()
        return cols, rows

    def clear(self) -> None:
        # clear() (not erase()) forces a complete repaint on the next refresh
        self.screen.clear()

    def move_cursor(self, col: int, row: int) -> None:
        self.screen.move(row, col)

    def write(self, text: str) -> None:
        # insstr does not advance the cursor, so filling the bottom-right cell
        # is not an error; the row was just cleared so nothing gets shifted
        self.screen.insstr(printable(text))

    def flush(self) -> None:
        self.screen.refresh()

    # ------------- input -------------

    def poll_event(self) -> Event:
        ch = self.screen.get_wch()
        if ch == curses.KEY_RESIZE:
            curses.update_lines_cols()
        return translate_key(ch, self.size())
