"""Limb-distribution analysis of a generated pattern.

Answers which limb leads, whether one hand dominates, how many doubles a
phrase contains and how much kick it uses. Doubles here are adjacent
repeats within a cell, matching what the player sees in the notation.
"""

from dataclasses import dataclass
from typing import Optional

from triads.pattern_models import Pattern
from triads.triad_cell import Limb


@dataclass(frozen=True)
class PatternAnalysis:
    total_notes: int
    right_count: int
    left_count: int
    kick_count: int
    double_count: int
    hand_double_count: int
    kick_double_count: int
    lead_limb: Optional[Limb]
    is_right_hand_dominant: bool
    is_left_hand_dominant: bool

    @property
    def has_kick(self) -> bool:
        return self.kick_count > 0

    @property
    def has_doubles(self) -> bool:
        return self.double_count > 0

    @property
    def is_balanced_hands(self) -> bool:
        return abs(self.right_count - self.left_count) <= 1


def analyze_pattern(pattern: Pattern) -> PatternAnalysis:
    """Analyze one pass of the pattern's phrase (repeats are ignored)."""
    counts = {Limb.RIGHT: 0, Limb.LEFT: 0, Limb.KICK: 0}
    hand_doubles = 0
    kick_doubles = 0
    lead: Optional[Limb] = None

    for cell in pattern.phrase:
        previous: Optional[Limb] = None
        for limb in cell.limbs:
            if lead is None:
                lead = limb
            counts[limb] += 1

            if limb == previous:
                if limb is Limb.KICK:
                    kick_doubles += 1
                else:
                    hand_doubles += 1
            previous = limb

    right = counts[Limb.RIGHT]
    left = counts[Limb.LEFT]

    return PatternAnalysis(
        total_notes=len(pattern.phrase) * 3,
        right_count=right,
        left_count=left,
        kick_count=counts[Limb.KICK],
        double_count=hand_doubles + kick_doubles,
        hand_double_count=hand_doubles,
        kick_double_count=kick_doubles,
        lead_limb=lead,
        is_right_hand_dominant=right > left + 1,
        is_left_hand_dominant=left > right + 1,
    )
