"""A single lot on the city map."""

from dataclasses import dataclass


@dataclass
class Structure:
    """A building (or an empty lot) on the city map."""

    path: str = ""
    upgrade: bool = False
    expense: int = 0
    happy_per_day: int = 0
    rep_per_day: int = 0
    pop_per_day: int = 0
    money_per_day: int = 0

    def is_vacant(self):
        """Return True when nothing has been built on this lot."""
        return self.path == ""