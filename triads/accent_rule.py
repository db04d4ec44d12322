"""Accent rules and accent index computation.

An AccentRule is one of three variants. Accents are absolute zero-based
indices into the fully expanded (repeats-multiplied) note stream.
"""

from dataclasses import dataclass
from typing import Union

NOTES_PER_TRIAD = 3


@dataclass(frozen=True)
class AccentOff:
    """No accents."""

    @property
    def tag(self) -> str:
        return "off"


@dataclass(frozen=True)
class AccentCellStart:
    """Accent the first note of every cell in every repeat."""

    @property
    def tag(self) -> str:
        return "cell"


@dataclass(frozen=True)
class AccentEveryNth:
    """Accent every n-th note of the expanded stream (n <= 1 accents nothing)."""

    n: int

    @property
    def tag(self) -> str:
        return f"n{self.n}"


AccentRule = Union[AccentOff, AccentCellStart, AccentEveryNth]


def compute_accent_indices(
    rule: AccentRule,
    cell_count: int,
    repeats: int,
    notes_per_cell: int = NOTES_PER_TRIAD,
) -> list[int]:
    """Compute globally accented note positions.

    Args:
        rule: Accent strategy
        cell_count: Cells in one pass of the phrase
        repeats: Number of phrase repetitions
        notes_per_cell: Notes per cell (3 for triads)

    Returns:
        Ascending note indices into the expanded stream

    Raises:
        TypeError: If rule is not an AccentRule variant
    """
    phrase_notes = cell_count * notes_per_cell
    total_notes = phrase_notes * repeats

    if isinstance(rule, AccentOff):
        return []

    if isinstance(rule, AccentCellStart):
        return [
            r * phrase_notes + c * notes_per_cell
            for r in range(repeats)
            for c in range(cell_count)
        ]

    if isinstance(rule, AccentEveryNth):
        if rule.n <= 1:
            return []
        return [i for i in range(total_notes) if (i + 1) % rule.n == 0]

    raise TypeError(f"Unknown accent rule: {rule!r}")
