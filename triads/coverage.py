"""Coverage tracking: sampling without replacement over the eligible set.

CoverageState is an immutable value. Every function here returns a new
state instead of mutating, so selection stays referentially transparent
and the owner (PatternEngine) only swaps one value per call.

Lifecycle: fresh (empty signature) -> active -> exhausted -> refilled.
There is no terminal state; coverage refills forever.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import AbstractSet, Sequence

from triads.constraints import GeneratorConstraints, eligible_ids
from triads.triad_cell import TriadCell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoverageState:
    """Identities not yet drawn in the current cycle, keyed by constraint signature."""

    remaining: frozenset[str] = field(default_factory=frozenset)
    signature: str = ""

    @classmethod
    def empty(cls) -> "CoverageState":
        return cls()

    @property
    def is_fresh(self) -> bool:
        return self.signature == ""

    @property
    def is_exhausted(self) -> bool:
        return not self.remaining

    def without(self, cell_id: str) -> "CoverageState":
        return CoverageState(remaining=self.remaining - {cell_id}, signature=self.signature)


def build_coverage(constraints: GeneratorConstraints) -> CoverageState:
    """Full coverage cycle for the given constraints."""
    return CoverageState(
        remaining=frozenset(eligible_ids(constraints)),
        signature=constraints.signature,
    )


def refresh_coverage(
    state: CoverageState, constraints: GeneratorConstraints
) -> CoverageState:
    """Rebuild coverage when the constraints changed or the cycle is drained.

    Args:
        state: Current coverage
        constraints: Constraints of the incoming request

    Returns:
        `state` unchanged, or a freshly filled state for `constraints`
    """
    signature = constraints.signature

    if state.signature != signature:
        rebuilt = build_coverage(constraints)
        logger.info(
            f"Coverage rebuilt for new constraints ({signature}): "
            f"{len(rebuilt.remaining)} eligible triads"
        )
        return rebuilt

    if state.is_exhausted:
        logger.debug(f"Coverage exhausted, refilling ({signature})")
        return build_coverage(constraints)

    return state


def pick_cell(
    eligible: Sequence[TriadCell],
    coverage: CoverageState,
    banned: AbstractSet[str],
    coverage_mode: bool,
    rng: random.Random,
) -> tuple[TriadCell, CoverageState]:
    """Choose one triad for a phrase.

    Candidates are kept in eligibility order so a seeded rng always makes
    the same choice regardless of set iteration order.

    Args:
        eligible: Non-empty eligible cells for the active constraints
        coverage: Coverage state (only read and updated in coverage mode)
        banned: Identities already used in the phrase being assembled
        coverage_mode: Sample without replacement across calls
        rng: Pseudo-random source

    Returns:
        Tuple of (chosen cell, updated coverage state)
    """
    if not coverage_mode:
        pool = [cell for cell in eligible if cell.id not in banned]
        return rng.choice(pool or list(eligible)), coverage

    candidates = [
        cell
        for cell in eligible
        if cell.id in coverage.remaining and cell.id not in banned
    ]

    if not candidates:
        # Phrase needs more distinct cells than remain uncovered
        coverage = CoverageState(
            remaining=frozenset(cell.id for cell in eligible),
            signature=coverage.signature,
        )
        candidates = [cell for cell in eligible if cell.id not in banned]

        if not candidates:
            # Every eligible cell is already in this phrase; don't consume
            return rng.choice(list(eligible)), coverage

    chosen = rng.choice(candidates)
    return chosen, coverage.without(chosen.id)
