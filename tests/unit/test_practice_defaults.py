"""Unit tests for practice mode and instrument defaults."""

import pytest

from trainer.practice_defaults import (
    InstrumentContext,
    PracticeMode,
    defaults_for_mode,
    focus_for_instrument,
    scope_for_instrument,
)
from triads.accent_rule import AccentCellStart, AccentEveryNth
from triads.pattern_models import PhraseType
from triads.triad_cell import LimbScope


@pytest.mark.parametrize(
    "instrument,scope",
    [
        (InstrumentContext.PAD, LimbScope.HANDS_ONLY),
        (InstrumentContext.PAD_KICK, LimbScope.HANDS_AND_KICK),
        (InstrumentContext.KIT, LimbScope.HANDS_AND_KICK),
    ],
)
def test_scope_for_instrument(instrument, scope):
    assert scope_for_instrument(instrument) is scope


def test_training_defaults_are_short_and_looping():
    defaults = defaults_for_mode(PracticeMode.TRAINING)

    assert defaults.phrase_type is PhraseType.CHAIN
    assert defaults.chain_cells == 2
    assert defaults.repeats == 6
    assert defaults.accent_rule == AccentCellStart()
    assert defaults.infinite_repeat


def test_flow_defaults_are_longer_and_finite():
    defaults = defaults_for_mode(PracticeMode.FLOW)

    assert defaults.chain_cells == 4
    assert defaults.repeats == 2
    assert defaults.accent_rule == AccentEveryNth(3)
    assert not defaults.infinite_repeat


def test_every_instrument_has_focus_copy():
    titles = {focus_for_instrument(i).title for i in InstrumentContext}
    assert titles == {"Pad fundamentals", "Coordination", "Kit movement"}


def test_labels():
    assert InstrumentContext.PAD_KICK.label == "Pad + Kick"
    assert PracticeMode.FLOW.label == "Flow"
