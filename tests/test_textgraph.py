import pytest

from dbfdoc.textgraph import draw_line


def test_small_rule():
    assert draw_line(5, [1, 5]) == "+---+"


def test_no_crosses_gives_only_dashes():
    line = draw_line(12, [])
    assert len(line) == 12
    assert set(line) == {"-"}


def test_zero_length_is_empty():
    assert draw_line(0, [1, 2]) == ""


@pytest.mark.parametrize("crosses", [[1, 17, 25, 41, 57, 73], [2, 3], [10]])
def test_crosses_land_on_one_based_positions(crosses):
    line = draw_line(73, crosses)
    assert len(line) == 73
    plus_positions = {index + 1 for index, char in enumerate(line) if char == "+"}
    assert plus_positions == set(crosses)


def test_out_of_range_crosses_are_ignored():
    line = draw_line(4, [0, 5, 100, -1])
    assert line == "-" * 4


def test_accepts_any_iterable():
    assert draw_line(3, (n for n in [2])) == draw_line(3, [2])