"""Pure pattern generation.

Pipeline: resolve request -> refresh coverage -> clamp tuning -> assemble
phrase -> compute accents -> derive identifier.
"""

import logging
import random

from triads.accent_rule import NOTES_PER_TRIAD, compute_accent_indices
from triads.coverage import CoverageState, refresh_coverage
from triads.pattern_models import (
    CHAIN_CELLS_RANGE,
    REPEATS_RANGE,
    Pattern,
    PatternRequest,
    PatternResult,
    clamp,
    derive_pattern_id,
)
from triads.phrase_assembler import assemble_phrase

logger = logging.getLogger(__name__)


def rng_for(request: PatternRequest) -> random.Random:
    """Seeded source when the request carries a seed, OS entropy otherwise."""
    if request.seed is None:
        return random.Random()
    return random.Random(request.seed)


class PatternGenerator:
    """Turns a PatternRequest and a coverage state into a PatternResult."""

    def generate(
        self,
        request: PatternRequest,
        coverage: CoverageState,
        rng: random.Random,
    ) -> PatternResult:
        """Generate one pattern.

        Args:
            request: Generation request
            coverage: Coverage state before this call
            rng: Pseudo-random source (see `rng_for`)

        Returns:
            PatternResult carrying the coverage state after this call
        """
        genre = request.genre
        constraints = genre.constraints

        coverage = refresh_coverage(coverage, constraints)

        phrase_type = request.resolved_phrase_type
        subdivision = request.resolved_subdivision
        accent_rule = request.resolved_accent_rule
        orchestration = request.resolved_orchestration_preset_id
        repeats = clamp(request.resolved_repeats, REPEATS_RANGE)
        chain_cells = clamp(request.resolved_chain_cells, CHAIN_CELLS_RANGE)
        target_cells = phrase_type.cell_count(chain_cells)

        phrase, coverage = assemble_phrase(
            phrase_type,
            target_cells,
            constraints,
            coverage,
            request.coverage_mode,
            rng,
        )

        accent_indices = compute_accent_indices(
            accent_rule,
            cell_count=len(phrase),
            repeats=repeats,
            notes_per_cell=NOTES_PER_TRIAD,
        )

        pattern_id = derive_pattern_id(
            genre_id=genre.id,
            phrase_type=phrase_type,
            subdivision=subdivision,
            repeats=repeats,
            infinite_repeat=request.infinite_repeat,
            accent_rule=accent_rule,
            orchestration_preset_id=orchestration,
            phrase=phrase,
        )

        logger.debug(
            f"Generated {pattern_id} "
            f"({len(coverage.remaining)} triads left in coverage cycle)"
        )

        pattern = Pattern(
            id=pattern_id,
            genre=genre,
            subdivision=subdivision,
            phrase_type=phrase_type,
            repeats=repeats,
            infinite_repeat=request.infinite_repeat,
            phrase=phrase,
            accent_indices=tuple(accent_indices),
            orchestration_preset_id=orchestration,
        )

        return PatternResult(pattern=pattern, coverage_state=coverage)
