import pytest

from hanabi_knowledge import BLUE, COLORS, GREEN, RED, VALUES, YELLOW, ColorInfo, HanabiGame, Info, ValueInfo


@pytest.mark.parametrize("info_cls", [ColorInfo, ValueInfo])
def test_fresh_info_has_whole_domain(info_cls):
    info = info_cls()
    assert info.possibilities() == info.all_possibilities()
    assert len(set(info.possibilities())) == len(info.all_possibilities())
    assert info.initialize() == set(info.all_possibilities())


def test_domains_come_from_catalog():
    assert ColorInfo().all_possibilities() == list(COLORS)
    assert ValueInfo().all_possibilities() == list(VALUES)
    game = HanabiGame({"colors": "3", "ranks": "4"})
    assert ColorInfo(game).all_possibilities() == [0, 1, 2]
    assert ValueInfo(game).all_possibilities() == [1, 2, 3, 4]


def test_mark_false_never_reinserts():
    info = ValueInfo()
    removed = []
    for value in (2, 4, 2, 5):
        info.mark_false(value)
        removed.append(value)
        for gone in removed:
            assert not info.is_possible(gone)
    assert info.possibilities() == [1, 3]


def test_mark_false_is_idempotent():
    once = ColorInfo()
    twice = ColorInfo()
    once.mark_false(GREEN)
    twice.mark_false(GREEN)
    twice.mark_false(GREEN)
    assert once == twice
    assert once.num_possibilities() == 4


def test_mark_true_collapses_to_single_value():
    info = ColorInfo()
    info.mark_false(RED)
    info.mark_true(BLUE)
    assert info.possibilities() == [BLUE]
    assert info.is_determined()


def test_mark_true_of_excluded_value_fails():
    info = ValueInfo()
    info.mark_false(3)
    with pytest.raises(AssertionError):
        info.mark_true(3)


def test_mark_dispatches():
    info = ColorInfo()
    info.mark(RED, False)
    assert not info.is_possible(RED)
    info.mark(YELLOW, True)
    assert info.possibilities() == [YELLOW]


def test_merge_intersects_observers():
    mine = ValueInfo()
    theirs = ValueInfo()
    mine.mark_false(1)
    mine.mark_false(2)
    theirs.mark_false(5)
    mine.merge(theirs)
    assert mine.possibilities() == [3, 4]
    assert theirs.possibilities() == [1, 2, 3, 4]


def test_merge_contradiction_fails():
    mine = ColorInfo()
    theirs = ColorInfo()
    mine.mark_true(RED)
    theirs.mark_true(BLUE)
    with pytest.raises(AssertionError):
        mine.merge(theirs)


def test_merge_of_different_domains_fails():
    with pytest.raises(AssertionError):
        ColorInfo().merge(ValueInfo())


def test_copy_is_independent():
    info = ColorInfo()
    clone = info.copy()
    clone.mark_false(RED)
    assert info.is_possible(RED)
    assert not clone.is_possible(RED)
    assert isinstance(clone, ColorInfo)


def test_generic_info_over_any_hashable_domain():
    info = Info(["a", "b", "c"])
    info.mark_false("b")
    assert info.possibilities() == ["a", "c"]


def test_rendering():
    colors = ColorInfo()
    values = ValueInfo()
    colors.mark_false(GREEN)
    values.mark_false(1)
    assert str(colors) == "RYWB"
    assert str(values) == "2345"
