"""Unit tests for accent index computation."""

import pytest

from triads.accent_rule import (
    AccentCellStart,
    AccentEveryNth,
    AccentOff,
    compute_accent_indices,
)


def test_off_accents_nothing():
    assert compute_accent_indices(AccentOff(), cell_count=4, repeats=3) == []


def test_every_third_over_two_cells():
    assert compute_accent_indices(AccentEveryNth(3), cell_count=2, repeats=1) == [2, 5]


def test_cell_start_over_three_repeats():
    indices = compute_accent_indices(AccentCellStart(), cell_count=2, repeats=3)
    assert indices == [0, 3, 6, 9, 12, 15]


def test_every_nth_indices_are_absolute():
    indices = compute_accent_indices(AccentEveryNth(4), cell_count=2, repeats=2)
    assert indices == [3, 7, 11]


@pytest.mark.parametrize("n", [1, 0, -3])
@pytest.mark.parametrize("cells,repeats", [(1, 1), (2, 4), (8, 64)])
def test_every_nth_degenerate_width_is_empty(n, cells, repeats):
    assert compute_accent_indices(AccentEveryNth(n), cell_count=cells, repeats=repeats) == []


def test_custom_notes_per_cell():
    indices = compute_accent_indices(AccentCellStart(), cell_count=2, repeats=1, notes_per_cell=4)
    assert indices == [0, 4]


def test_tags():
    assert AccentOff().tag == "off"
    assert AccentCellStart().tag == "cell"
    assert AccentEveryNth(5).tag == "n5"


def test_unknown_rule_rejected():
    with pytest.raises(TypeError):
        compute_accent_indices("accent", cell_count=2, repeats=1)
