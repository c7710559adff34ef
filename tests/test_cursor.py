import io

import pytest

from towntycoon.cursor import DEFAULT_ROW, Cursor


def test_goto_origin_emits_one_based_escape():
    stream = io.StringIO()
    Cursor(stream).goto_xy(0, 0)
    assert stream.getvalue() == "\x1b[1;1H"


def test_goto_puts_row_before_column():
    stream = io.StringIO()
    Cursor(stream).goto_xy(4, 9)
    assert stream.getvalue() == "\x1b[10;5H"


def test_default_xy_goes_to_parking_row():
    stream = io.StringIO()
    Cursor(stream).default_xy()
    assert stream.getvalue() == f"\x1b[{DEFAULT_ROW + 1};1H"


def test_write_passes_text_through():
    stream = io.StringIO()
    cursor = Cursor(stream)
    cursor.write("재산")
    assert stream.getvalue() == "재산"


def test_negative_position_is_rejected():
    with pytest.raises(ValueError):
        Cursor(io.StringIO()).goto_xy(-1, 3)