"""Keyboard input with arrow keys folded into single codes."""

import sys
from collections import deque
from enum import IntEnum

EXTENDED_PREFIX = 224


class Key(IntEnum):
    """Key codes the game reacts to."""

    TAB = 9
    ENTER = 13
    UP = 772
    LEFT = 775
    RIGHT = 777
    DOWN = 800


_ARROW_KEYS = {72: Key.UP, 75: Key.LEFT, 77: Key.RIGHT, 80: Key.DOWN}


class _PosixGetch:
    """Reads single keys from a POSIX terminal, reporting arrows as prefixed scan codes."""

    _ARROWS = {"A": 72, "D": 75, "C": 77, "B": 80}

    def __init__(self):
        self._pending = deque()

    def __call__(self):
        if self._pending:
            return self._pending.popleft()
        char = self._read()
        if char == "\x1b":
            if self._read() == "[":
                code = self._ARROWS.get(self._read())
                if code is not None:
                    self._pending.append(code)
                    return EXTENDED_PREFIX
            return 27
        if char == "\n":
            return Key.ENTER.value
        return ord(char)

    @staticmethod
    def _read():
        import termios
        import tty

        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            return sys.stdin.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _default_getch():
    try:
        import msvcrt
    except ImportError:
        return _PosixGetch()
    return lambda: msvcrt.getch()[0]


class Keyboard:
    """Reads keys through a getch callable returning integer codes."""

    def __init__(self, getch=None):
        self._getch = getch if getch is not None else _default_getch()

    def wait_any_key(self):
        """Block until a key is pressed and discard it."""
        self._getch()

    def read_key(self):
        """Return the next key, with arrow keys mapped to Key members."""
        code = self._getch()
        if code != EXTENDED_PREFIX:
            return code
        code = self._getch()
        return _ARROW_KEYS.get(code, code)