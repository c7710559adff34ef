# towntycoon

Building blocks for a small turn-based town-building game played on a text
terminal. The town is a square grid of lots; gold is earned through a side
job (a round of rock–scissors–paper) and spent on buildings described by
small data files. A year lasts 52 turns, and the town's happiness picks the
ending story.

Every piece draws through a `Cursor` onto a text stream (ANSI cursor
positioning) and reads keys through a `Keyboard`, which takes any `getch`
callable returning integer key codes. That makes each piece usable from a
real terminal or from a test.

## Modules

- `towntycoon.structure.Structure` – a dataclass for one lot: `path` (the
  ASCII-art file it shows), `upgrade`, `expense`, `happy_per_day`,
  `rep_per_day`, `pop_per_day` and `money_per_day`. `is_vacant()` is true
  while `path` is empty.
- `towntycoon.cursor.Cursor(stream=None)` – writes to `stream` (standard
  output by default). `goto_xy(x, y)` moves to a zero-based column and row
  and raises `ValueError` for negative positions; `default_xy()` parks the
  cursor on row 47; `write(text)` writes and flushes.
- `towntycoon.keyboard.Keyboard(getch=None)` and `Key` – `read_key()`
  returns the next key code, folding the two-code arrow sequences (224
  followed by a scan code) into `Key.UP`, `Key.DOWN`, `Key.LEFT` and
  `Key.RIGHT`; `Key.TAB` and `Key.ENTER` are 9 and 13. `wait_any_key()`
  reads one key and discards it. Without a `getch`, keys come from the
  console on Windows or from the terminal in raw mode elsewhere.
- `towntycoon.textbox.TextBox(cursor, x, y, message, center, path)` – draws
  `message`, or, when it is empty, the lines of the file at `path` (an
  unreadable file counts as one empty line). With `center` the box is
  centred on column 80. `erase()` blanks the area again, as does leaving a
  `with` block.
- `towntycoon.city.City(map_size=3)` – the town: `money`, `rep`, `pop`,
  `happy`, `date` (starting at 1) and `map`, a grid of `Structure`s.
  - `draw_map(cursor)` draws the grid and the first five lines of each
    lot's art file, or `파일 없음!` when the file cannot be opened.
  - `status_bar(cursor)` draws money, reputation, population, happiness
    and the turn as `(date/52)`.
  - `skip_date()` advances the turn and returns `True` once turn 52 is
    reached.
  - `purchase(path, x, y)` builds on lot `(x, y)` from a building data file
    (see below).
  - `vacant()` returns, for each row, the x positions of its empty lots
    and keeps the result in `vacant_map`.
  - `ending_file()` picks `badending.txt`, `normalending.txt` or
    `happyending.txt` in steps of 40 happiness; happiness outside -39 to
    119 raises `ValueError`. `ending(cursor)` shows that file in a
    `TextBox`.
- `towntycoon.coord.select_coordinate(vacant, keyboard, cursor)` – lets the
  player walk through the free lots: up and down change the active axis,
  Tab switches between X and Y, Enter returns the chosen `(x, y)`. Raises
  `ValueError` when no lot is free.
- `towntycoon.minigame` – `judge(user, computer)` scores a round (weapons
  0 = paper, 1 = scissors, 2 = rock) as an `Outcome` (`DRAW`, `LOSE`,
  `WIN`, each with a `message` and a `reward` of 500, 0 or 1000 gold);
  unknown weapons raise `ValueError`. `rock_scissor_paper(city, keyboard,
  cursor, rng=None)` reads the player's choice from keys `1`–`3`, draws
  the computer's with `rng`, adds the reward to `city.money`, waits for a
  key and returns the outcome.
- `towntycoon.shop.construct(city, name, keyboard, cursor)` – draws the
  map, asks for a free lot with `select_coordinate`, builds the building
  from data file `name` there and returns the chosen `(x, y)`.

## Example

```python
import io
import random

from towntycoon.city import City
from towntycoon.cursor import Cursor
from towntycoon.keyboard import Keyboard
from towntycoon.minigame import rock_scissor_paper

screen = io.StringIO()
cursor = Cursor(screen)

town = City(3)
town.status_bar(cursor)
town.draw_map(cursor)

keys = iter([ord("3"), ord(" ")])  # choose rock, then any key to return
outcome = rock_scissor_paper(town, Keyboard(keys.__next__), cursor, random.Random(1))
print(outcome.name, town.money)

print(town.skip_date(), town.vacant())
```

## Building data files

A building is a plain text file of seven lines: the path of its ASCII-art
file, then whether it can be upgraded (0 or 1), its expense, and its
happiness, reputation, population and money per turn, each a whole number.
A missing or non-numeric value raises `ValueError`.

## What is not included

There is no command that starts a game. The package has no title screen,
no menus for choosing between the side job and the shop or between
buildings, and no loop that runs the 52 turns. Nothing applies a building's
expense or per-turn yields to the town; `skip_date()` only advances the
counter. Those parts are left to the program that uses these pieces.