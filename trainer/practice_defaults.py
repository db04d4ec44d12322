"""Practice modes, instrument contexts and their generation defaults.

Mode is intent (training vs flow); instrument is the physical setup.
Pure configuration: no state, no side effects.
"""

from dataclasses import dataclass
from enum import Enum

from triads.accent_rule import AccentCellStart, AccentEveryNth, AccentRule
from triads.pattern_models import PhraseType
from triads.triad_cell import LimbScope


class PracticeMode(Enum):
    TRAINING = "training"
    FLOW = "flow"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class InstrumentContext(Enum):
    PAD = "pad"
    PAD_KICK = "pad_kick"
    KIT = "kit"

    @property
    def label(self) -> str:
        return {
            InstrumentContext.PAD: "Pad only",
            InstrumentContext.PAD_KICK: "Pad + Kick",
            InstrumentContext.KIT: "Kit",
        }[self]


@dataclass(frozen=True)
class ModeDefaults:
    phrase_type: PhraseType
    repeats: int
    chain_cells: int
    accent_rule: AccentRule
    infinite_repeat: bool


@dataclass(frozen=True)
class PatternFocus:
    """Short "why this pattern matters" copy."""

    title: str
    detail: str


MODE_DEFAULTS = {
    # Short and repeatable; accents mark the phrasing
    PracticeMode.TRAINING: ModeDefaults(
        phrase_type=PhraseType.CHAIN,
        repeats=6,
        chain_cells=2,
        accent_rule=AccentCellStart(),
        infinite_repeat=True,
    ),
    # Longer, more musical continuity with sparse accents
    PracticeMode.FLOW: ModeDefaults(
        phrase_type=PhraseType.CHAIN,
        repeats=2,
        chain_cells=4,
        accent_rule=AccentEveryNth(3),
        infinite_repeat=False,
    ),
}

FOCUS_BY_INSTRUMENT = {
    InstrumentContext.PAD: PatternFocus(
        title="Pad fundamentals",
        detail="Hands-only triads to build clean internal motion and phrasing.",
    ),
    InstrumentContext.PAD_KICK: PatternFocus(
        title="Coordination",
        detail="Add kick without breaking hand flow. Keep it controlled.",
    ),
    InstrumentContext.KIT: PatternFocus(
        title="Kit movement",
        detail="Move the idea around the kit while staying physically honest.",
    ),
}

DEFAULT_MODE = PracticeMode.TRAINING
DEFAULT_INSTRUMENT = InstrumentContext.PAD


def scope_for_instrument(instrument: InstrumentContext) -> LimbScope:
    """Pad is hands only; pad + kick and kit both add the kick."""
    if instrument is InstrumentContext.PAD:
        return LimbScope.HANDS_ONLY
    return LimbScope.HANDS_AND_KICK


def defaults_for_mode(mode: PracticeMode) -> ModeDefaults:
    return MODE_DEFAULTS[mode]


def focus_for_instrument(instrument: InstrumentContext) -> PatternFocus:
    return FOCUS_BY_INSTRUMENT[instrument]
