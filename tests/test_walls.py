import pytest

from cubcaster.walls import (
    acceptable_char,
    map_height,
    map_width,
    space,
    wall_outline,
    zero,
)


@pytest.mark.parametrize("c", list("10NSWE"))
def test_acceptable_char_accepts_map_cells(c):
    assert acceptable_char(c) is True


@pytest.mark.parametrize("c", [" ", "\t", "", "X", "2"])
def test_acceptable_char_rejects_others(c):
    assert acceptable_char(c) is False


def test_valid_closed_map():
    rows = ["111111", "100001", "10N001", "111111"]
    assert wall_outline(rows) is True


def test_zero_at_end_of_row_is_open():
    rows = ["1111", "1001", "100", "1111"]
    assert wall_outline(rows) is False


def test_zero_in_first_column_is_open():
    rows = ["1111", "0001", "1111"]
    assert wall_outline(rows) is False


def test_first_row_must_be_walls():
    rows = ["1101", "1001", "1111"]
    assert wall_outline(rows) is False


def test_last_row_must_be_walls():
    rows = ["1111", "1001", "1011"]
    assert wall_outline(rows) is False


def test_space_next_to_floor_is_open():
    rows = ["11111", "10 01", "11111"]
    assert wall_outline(rows) is False


def test_spaces_among_walls_are_fine():
    rows = ["11111", " 1 1 ", "11111"]
    assert wall_outline(rows) is True


def test_floor_under_short_row_is_open():
    rows = ["11", "1001", "1111"]
    assert wall_outline(rows) is False


def test_floor_under_long_enough_row_is_closed():
    rows = ["1111", "1001", "1111"]
    assert wall_outline(rows) is True


def test_empty_map_is_invalid():
    assert wall_outline([]) is False


def test_zero_direct_enclosed():
    rows = ["111", "101", "111"]
    assert zero(rows, 1, 1) is True


def test_zero_direct_in_top_row():
    rows = ["101", "111"]
    assert zero(rows, 0, 1) is False


def test_space_direct():
    rows = ["111", "1 1", "111"]
    assert space(rows, 1, 1) is True
    rows_open = ["111", "0 1", "111"]
    assert space(rows_open, 1, 1) is False


def test_map_dimensions():
    rows = ["1", "111", "11"]
    assert map_height(rows) == len(rows)
    assert map_width(rows) == len("111")


def test_map_dimensions_empty():
    assert map_height([]) == 0
    assert map_width([]) == 0