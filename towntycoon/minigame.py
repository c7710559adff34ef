"""The rock-scissors-paper part-time job."""

import random
from enum import Enum

from .textbox import TextBox

WEAPONS = ("보", "가위", "주먹")


class Outcome(Enum):
    """Result of a round with its message and gold reward."""

    DRAW = ("비겼습니다. 500골드를 얻었습니다.", 500)
    LOSE = ("당신이 졌습니다.", 0)
    WIN = ("당신이 이겼습니다. 1000골드를 얻었습니다.", 1000)

    def __init__(self, message, reward):
        self.message = message
        self.reward = reward


def judge(user, computer):
    """Decide a round; weapons are 0 = paper, 1 = scissors, 2 = rock."""
    for weapon in (user, computer):
        if weapon not in range(len(WEAPONS)):
            raise ValueError(f"unknown weapon: {weapon}")
    if user == computer:
        return Outcome.DRAW
    if user < computer and user + 2 != computer:
        return Outcome.LOSE
    return Outcome.WIN


def rock_scissor_paper(city, keyboard, cursor, rng=None):
    """Play one round, pay the reward into the city and return the outcome."""
    rng = rng if rng is not None else random.Random()
    boxes = [
        TextBox(cursor, 1, 5, "가위바위보!", True, ""),
        TextBox(cursor, 1, 6, "1 = 보 | 2 = 가위 | 3 = 주먹", True, ""),
    ]
    try:
        user = keyboard.read_key() - ord("1")
        computer = rng.randrange(len(WEAPONS))
        outcome = judge(user, computer)
        boxes.append(TextBox(
            cursor, 1, 10,
            f"당신은 {WEAPONS[user]}, 상대는 {WEAPONS[computer]}를 냈습니다.",
            True, "",
        ))
        city.money += outcome.reward
        boxes.append(TextBox(cursor, 1, 15, outcome.message, True, ""))
        boxes.append(TextBox(cursor, 1, 30, "아무 키나 눌러 돌아가기", True, ""))
        keyboard.wait_any_key()
    finally:
        for box in boxes:
            box.erase()
    return outcome