"""Buying buildings for the city."""

from .coord import select_coordinate
from .textbox import TextBox


def construct(city, name, keyboard, cursor):
    """Let the player choose a vacant lot and build the structure in file name there.

    Returns the chosen (x, y).
    """
    TextBox(cursor, 1, 3, "건설 위치 선택", True, "")
    city.draw_map(cursor)
    x, y = select_coordinate(city.vacant(), keyboard, cursor)
    city.purchase(name, x, y)
    return x, y