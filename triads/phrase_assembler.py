"""Phrase assembly over the eligible triad set."""

import logging
import random

from triads.constraints import GeneratorConstraints, build_eligible_triads
from triads.coverage import CoverageState, pick_cell
from triads.pattern_models import PhraseType
from triads.triad_cell import FALLBACK_PHRASE, TriadCell

logger = logging.getLogger(__name__)


def assemble_phrase(
    phrase_type: PhraseType,
    target_cells: int,
    constraints: GeneratorConstraints,
    coverage: CoverageState,
    coverage_mode: bool,
    rng: random.Random,
) -> tuple[tuple[TriadCell, ...], CoverageState]:
    """Build one phrase.

    SINGLE_CELL picks A then B != A. TWO_CELL emits the literal repeat
    [A, B, A, B]. CHAIN picks `target_cells` cells and never repeats one
    within the phrase.

    Args:
        phrase_type: Phrase shape
        target_cells: Phrase length from `PhraseType.cell_count`; only CHAIN
            reads it, the other shapes are fixed
        constraints: Active generator constraints
        coverage: Coverage state refreshed for `constraints`
        coverage_mode: Draw without replacement across phrases
        rng: Pseudo-random source

    Returns:
        Tuple of (phrase, updated coverage state)
    """
    eligible = build_eligible_triads(constraints)

    if not eligible:
        logger.warning(
            f"No triads satisfy constraints ({constraints.signature}); "
            f"using fallback phrase"
        )
        return FALLBACK_PHRASE, coverage

    banned: set[str] = set()
    picks: list[TriadCell] = []
    target = target_cells if phrase_type is PhraseType.CHAIN else 2

    for _ in range(target):
        cell, coverage = pick_cell(eligible, coverage, banned, coverage_mode, rng)
        picks.append(cell)
        banned.add(cell.id)

    if phrase_type is PhraseType.TWO_CELL:
        return tuple(picks + picks), coverage

    return tuple(picks), coverage
