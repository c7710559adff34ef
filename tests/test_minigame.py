import pytest

from towntycoon.city import City
from towntycoon.keyboard import Keyboard
from towntycoon.minigame import WEAPONS, Outcome, judge, rock_scissor_paper


class FakeCursor:
    def __init__(self):
        self.pos = (0, 0)
        self.writes = []

    def goto_xy(self, x, y):
        self.pos = (x, y)

    def default_xy(self):
        self.pos = (0, 47)

    def write(self, text):
        self.writes.append((self.pos[0], self.pos[1], text))


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        assert stop == len(WEAPONS)
        return self.value


@pytest.mark.parametrize("weapon", [0, 1, 2])
def test_same_weapon_is_draw(weapon):
    assert judge(weapon, weapon) is Outcome.DRAW


@pytest.mark.parametrize(
    "user, computer, expected",
    [
        (0, 1, Outcome.LOSE),
        (1, 2, Outcome.LOSE),
        (0, 2, Outcome.WIN),
        (1, 0, Outcome.WIN),
        (2, 1, Outcome.WIN),
    ],
)
def test_judge(user, computer, expected):
    assert judge(user, computer) is expected


def test_judge_rejects_unknown_weapon():
    with pytest.raises(ValueError):
        judge(3, 0)


def play(key, computer):
    city = City()
    keyboard = Keyboard(getch=iter([key, ord(" ")]).__next__)
    cursor = FakeCursor()
    outcome = rock_scissor_paper(city, keyboard, cursor, FixedRng(computer))
    return city, cursor, outcome


@pytest.mark.parametrize(
    "key, computer, money",
    [
        (ord("1"), 0, 500),
        (ord("1"), 2, 1000),
        (ord("1"), 1, 0),
    ],
)
def test_rewards(key, computer, money):
    city, _, _ = play(key, computer)
    assert city.money == money


def test_draw_pays_into_city():
    city, _, outcome = play(ord("2"), 1)
    assert outcome is Outcome.DRAW
    assert city.money == Outcome.DRAW.reward


@pytest.mark.parametrize("key", [ord("1"), ord("2"), ord("3")])
@pytest.mark.parametrize("computer", [0, 1, 2])
def test_money_grows_by_reward(key, computer):
    city, _, outcome = play(key, computer)
    assert city.money == outcome.reward
    assert outcome is judge(key - ord("1"), computer)


def test_round_is_announced_and_erased():
    _, cursor, outcome = play(ord("3"), 1)
    texts = [text for _, _, text in cursor.writes]
    assert "당신은 주먹, 상대는 가위를 냈습니다." in texts
    assert outcome.message in texts
    assert texts[-1].strip() == ""


def test_invalid_key_raises():
    city = City()
    keyboard = Keyboard(getch=iter([ord("9")]).__next__)
    with pytest.raises(ValueError):
        rock_scissor_paper(city, keyboard, FakeCursor(), FixedRng(0))
    assert city.money == 0