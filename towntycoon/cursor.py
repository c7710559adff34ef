"""Cursor positioning on an ANSI terminal."""

import sys

DEFAULT_ROW = 47


class Cursor:
    """Moves the terminal cursor and writes text at its position."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def goto_xy(self, x, y):
        """Move the cursor to column x, row y (both zero based)."""
        if x < 0 or y < 0:
            raise ValueError(f"cursor position out of range: ({x}, {y})")
        self.stream.write(f"\x1b[{y + 1};{x + 1}H")

    def default_xy(self):
        """Park the cursor below the play area."""
        self.goto_xy(0, DEFAULT_ROW)

    def write(self, text):
        """Write text at the current cursor position."""
        self.stream.write(text)
        self.stream.flush()