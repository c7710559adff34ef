"""The city: its map, statistics and turn counter."""

from .structure import Structure
from .textbox import SCREEN_CENTER, TextBox

CELL_WIDTH = 20
CELL_HEIGHT = 6
ART_LINES = 5
MAP_TOP = 5
LAST_TURN = 52
MISSING_ART = "파일 없음!"
ENDING_FILES = ("badending.txt", "normalending.txt", "happyending.txt")


def _read_art(path):
    with open(path, encoding="utf-8") as handle:
        lines = handle.read().splitlines()
    return (lines + [""] * ART_LINES)[:ART_LINES]


class City:
    """The player's city."""

    def __init__(self, map_size=3):
        self.pop = 0
        self.money = 0
        self.happy = 0
        self.rep = 0
        self.date = 1
        self.map_size = map_size
        self.map = [[Structure() for _ in range(map_size)] for _ in range(map_size)]
        self.vacant_map = []

    def draw_map(self, cursor):
        """Draw the grid and the art of every lot."""
        width = CELL_WIDTH * self.map_size + self.map_size - 1
        height = CELL_HEIGHT * self.map_size + self.map_size - 1
        left = SCREEN_CENTER - (width + 2) // 2
        top = MAP_TOP
        bottom = top + height + 1

        cursor.goto_xy(left, top)
        cursor.write("┌" + "─" * width + "┐")
        for row in range(top + 1, bottom):
            cursor.goto_xy(left, row)
            cursor.write("│")
            cursor.goto_xy(left + width + 1, row)
            cursor.write("│")
        cursor.goto_xy(left, bottom)
        cursor.write("└" + "─" * width + "┘")

        for offset in range(CELL_HEIGHT + 1, height + 1, CELL_HEIGHT + 1):
            cursor.goto_xy(left, top + offset)
            cursor.write("├" + "─" * width + "┤")

        for offset in range(CELL_WIDTH + 1, width + 1, CELL_WIDTH + 1):
            cursor.goto_xy(left + offset, top)
            cursor.write("┬")
            for row in range(top + 1, bottom):
                cursor.goto_xy(left + offset, row)
                cursor.write("┼" if (row - top) % (CELL_HEIGHT + 1) == 0 else "│")
            cursor.goto_xy(left + offset, bottom)
            cursor.write("┴")
        cursor.default_xy()

        for y, row in enumerate(self.map):
            for x, lot in enumerate(row):
                cell_x = left + 1 + (CELL_WIDTH + 1) * x
                cell_y = top + 1 + (CELL_HEIGHT + 1) * y
                try:
                    art = _read_art(lot.path)
                except OSError:
                    cursor.goto_xy(cell_x, cell_y)
                    cursor.write(MISSING_ART)
                    continue
                for k, line in enumerate(art):
                    cursor.goto_xy(cell_x, cell_y + k)
                    cursor.write(line)

    def status_bar(self, cursor):
        """Draw money, reputation, population, happiness and the turn."""
        gap = " " * 15
        cursor.goto_xy(25, 1)
        cursor.write(
            f"재산 | {self.money}{gap}명성 | {self.rep}{gap}"
            f"인구수 | {self.pop}{gap}행복도 | {self.happy}{gap}"
            f"({self.date}/{LAST_TURN}) 턴"
        )
        cursor.default_xy()

    def skip_date(self):
        """Advance one turn; return True when the last turn is reached."""
        self.date += 1
        return self.date == LAST_TURN

    def purchase(self, path, x, y):
        """Build the structure described by the file at path on lot (x, y)."""
        with open(path, encoding="utf-8") as handle:
            lines = iter(handle.read().splitlines())
        art = next(lines, "")
        upgrade, expense, happy, rep, pop, money = (int(next(lines, "")) for _ in range(6))
        self.map[y][x] = Structure(
            path=art,
            upgrade=bool(upgrade),
            expense=expense,
            happy_per_day=happy,
            rep_per_day=rep,
            pop_per_day=pop,
            money_per_day=money,
        )

    def vacant(self):
        """Recompute and return, per row, the x positions of empty lots."""
        self.vacant_map = [
            [x for x, lot in enumerate(row) if lot.is_vacant()] for row in self.map
        ]
        return self.vacant_map

    def ending_file(self):
        """Return the file holding the ending that matches the happiness."""
        index = abs(self.happy) // 40
        if self.happy < 0:
            index = -index
        if not 0 <= index < len(ENDING_FILES):
            raise ValueError(f"no ending for happiness {self.happy}")
        return ENDING_FILES[index]

    def ending(self, cursor):
        """Show the ending story."""
        return TextBox(cursor, 1, 31, "", False, self.ending_file())