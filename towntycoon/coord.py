"""Choosing a vacant lot with the arrow keys."""

from enum import Enum

from .keyboard import Key

X_COLUMN = 20
Y_COLUMN = 25
LABEL_ROW = 29
UP_ROW = 30
VALUE_ROW = 31
DOWN_ROW = 32


class _Axis(Enum):
    X = 0
    Y = 1


def _draw_arrows(cursor, column, up, down):
    cursor.goto_xy(column, UP_ROW)
    cursor.write("▲" if up is not None else "  ")
    cursor.goto_xy(column, DOWN_ROW)
    cursor.write("▼" if down is not None else "  ")


def select_coordinate(vacant, keyboard, cursor):
    """Let the player pick a lot from vacant (per row, its free x values).

    Up/down change the value on the active axis, Tab switches axis and
    Enter confirms. Returns the chosen (x, y).
    """
    rows = [list(row) for row in vacant]
    cur_y = next((y for y, row in enumerate(rows) if row), None)
    if cur_y is None:
        raise ValueError("no vacant lot to choose from")
    cur_x = 0
    axis = _Axis.X

    cursor.goto_xy(X_COLUMN, LABEL_ROW)
    cursor.write("X")
    cursor.goto_xy(Y_COLUMN, LABEL_ROW)
    cursor.write("Y")

    while True:
        row = rows[cur_y]
        up_y = next((y for y in range(cur_y + 1, len(rows)) if rows[y]), None)
        down_y = next((y for y in range(cur_y - 1, -1, -1) if rows[y]), None)
        up_x = cur_x + 1 if cur_x < len(row) - 1 else None
        down_x = cur_x - 1 if cur_x > 0 else None

        if axis is _Axis.X:
            _draw_arrows(cursor, X_COLUMN, up_x, down_x)
            _draw_arrows(cursor, Y_COLUMN, None, None)
        else:
            _draw_arrows(cursor, Y_COLUMN, up_y, down_y)
            _draw_arrows(cursor, X_COLUMN, None, None)

        cursor.goto_xy(Y_COLUMN, VALUE_ROW)
        cursor.write(str(cur_y))
        cursor.goto_xy(X_COLUMN, VALUE_ROW)
        cursor.write(str(row[cur_x]))
        cursor.default_xy()

        key = keyboard.read_key()
        if key == Key.ENTER:
            return row[cur_x], cur_y
        if key == Key.TAB:
            axis = _Axis.Y if axis is _Axis.X else _Axis.X
            continue

        if axis is _Axis.X:
            if key == Key.UP and up_x is not None:
                cur_x = up_x
            elif key == Key.DOWN and down_x is not None:
                cur_x = down_x
        else:
            target = up_y if key == Key.UP else down_y if key == Key.DOWN else None
            if target is not None:
                cur_y = target
                cur_x = min(cur_x, len(rows[cur_y]) - 1)