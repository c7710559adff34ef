"""Text placed on screen that can be erased again."""

SCREEN_CENTER = 80


def _read_lines(path):
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read().splitlines()
    except OSError:
        return []


class TextBox:
    """A message or the contents of a text file drawn at a screen position.

    An unreadable file is drawn as a single empty line.
    """

    def __init__(self, cursor, x, y, message, center, path):
        self._cursor = cursor
        self.start_x = x
        self.start_y = y
        self.end_y = y
        if message:
            if center:
                self.start_x = SCREEN_CENTER - len(message) // 2
            self.end_x = self.start_x + len(message)
            cursor.goto_xy(self.start_x, self.start_y)
            cursor.write(message)
        else:
            lines = _read_lines(path) or [""]
            if center:
                self.start_x = SCREEN_CENTER - len(lines[0]) // 2
            self.end_x = self.start_x + max(len(line) for line in lines)
            for line in lines:
                cursor.goto_xy(self.start_x, self.end_y)
                self.end_y += 1
                cursor.write(line)
        cursor.default_xy()

    def erase(self):
        """Blank out the area the box covers."""
        blank = " " * (self.end_x - self.start_x + 1)
        for row in range(self.start_y, self.end_y + 1):
            self._cursor.goto_xy(self.start_x, row)
            self._cursor.write(blank)
        self._cursor.default_xy()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.erase()
        return False