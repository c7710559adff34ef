from towntycoon.structure import Structure


def test_default_structure_is_vacant():
    assert Structure().is_vacant() is True


def test_structure_with_art_path_is_not_vacant():
    assert Structure(path="zoo_art.txt").is_vacant() is False


def test_defaults_are_zero_and_false():
    lot = Structure()
    assert (lot.expense, lot.happy_per_day, lot.rep_per_day,
            lot.pop_per_day, lot.money_per_day) == (0, 0, 0, 0, 0)
    assert lot.upgrade is False
    assert lot.path == ""


def test_separate_instances_do_not_share_state():
    first = Structure()
    second = Structure()
    first.path = "built.txt"
    assert second.is_vacant()
    assert not first.is_vacant()