import pytest

from suggest_tui.events import Key, KeyEvent, OtherEvent, ResizeEvent


class FakeTerminal:
    """
    Scripted Terminal double:
      - events: replayed by poll_event(); running out raises EOFError (an OSError
        would be indistinguishable from a real read failure in tests)
      - ops: every drawing call, in order
      - screens: what each flush() would have shown, as {(row, col): text}
    """
    def __init__(self, events, size=(40, 10), fail_on=None):
        self._events = list(events)
        self._size = size
        self.fail_on = fail_on
        self.entered = 0
        self.left = 0
        self.ops = []
        self.screens = []
        self._pending = {}
        self._cursor = (0, 0)

    def enter(self):
        self.entered += 1

    def leave(self):
        self.left += 1

    def size(self):
        return self._size

    def clear(self):
        self.ops.append(("clear",))
        self._pending = {}

    def move_cursor(self, col, row):
        self.ops.append(("move", col, row))
        self._cursor = (row, col)

    def write(self, text):
        self.ops.append(("write", text))
        self._pending[self._cursor] = text

    def flush(self):
        self.ops.append(("flush",))
        self.screens.append(dict(self._pending))

    def poll_event(self):
        if self.fail_on is not None and not self._events:
            raise self.fail_on
        if not self._events:
            raise EOFError("script exhausted")
        return self._events.pop(0)


def type_text(text):
    return [KeyEvent.of(ch) for ch in text]


CTRL_C = KeyEvent(Key.INTERRUPT)
BACKSPACE = KeyEvent(Key.BACKSPACE)


@pytest.fixture
def make_terminal():
    return FakeTerminal


@pytest.fixture
def keys():
    """Helpers for building event scripts."""
    class _Keys:
        CTRL_C = CTRL_C
        BACKSPACE = BACKSPACE
        type = staticmethod(type_text)
        resize = staticmethod(lambda cols, rows: ResizeEvent(cols, rows))
        mouse = OtherEvent("mouse")
    return _Keys
