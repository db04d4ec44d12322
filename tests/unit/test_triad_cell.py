"""Unit tests for Limb and TriadCell primitives."""

import itertools

import pytest

from triads.errors import TriadParseError
from triads.triad_cell import FALLBACK_PHRASE, Limb, LimbScope, TriadCell


def test_identity_uses_one_glyph_per_limb():
    cell = TriadCell(Limb.RIGHT, Limb.LEFT, Limb.KICK)
    assert cell.id == "RLK"
    assert str(cell) == "RLK"


def test_order_matters_for_equality():
    rlk = TriadCell.parse("RLK")
    lrk = TriadCell.parse("LRK")

    assert rlk != lrk
    assert rlk == TriadCell(Limb.RIGHT, Limb.LEFT, Limb.KICK)
    assert len({rlk, lrk, TriadCell.parse("RLK")}) == 2


def test_parse_round_trips_every_triple():
    for triple in itertools.product(LimbScope.HANDS_AND_KICK.limbs, repeat=3):
        cell = TriadCell(*triple)
        assert TriadCell.parse(cell.id) == cell


@pytest.mark.parametrize("text", ["", "RL", "RLKR", "rlk", "RXL", "R L"])
def test_parse_rejects_invalid_text(text):
    with pytest.raises(TriadParseError):
        TriadCell.parse(text)


def test_parse_error_is_invalid_argument():
    with pytest.raises(ValueError, match="Invalid limb glyph at 1"):
        TriadCell.parse("RXL")


def test_any_double_includes_outer_positions():
    assert TriadCell.parse("RRL").has_any_double()
    assert TriadCell.parse("LRR").has_any_double()
    # Non-adjacent first/last still counts
    assert TriadCell.parse("RLR").has_any_double()
    assert not TriadCell.parse("RLK").has_any_double()


def test_kick_double_positions():
    assert TriadCell.parse("KKR").has_kick_double()
    assert TriadCell.parse("RKK").has_kick_double()
    assert TriadCell.parse("KKK").has_kick_double()
    assert not TriadCell.parse("KRK").has_kick_double()


def test_scope_limbs():
    assert LimbScope.HANDS_ONLY.limbs == (Limb.RIGHT, Limb.LEFT)
    assert Limb.KICK in LimbScope.HANDS_AND_KICK.limbs


def test_fallback_phrase_is_hands_only_alternation():
    assert [cell.id for cell in FALLBACK_PHRASE] == ["RLR", "LRL"]
