"""Pattern engine: the stateful façade over pure pattern generation.

Holds exactly one CoverageState and swaps it after every call. Not
thread-safe; one engine belongs to one session and is called sequentially.
Callers needing concurrent access must serialize calls themselves.
"""

import logging
import random
from typing import Optional

from trainer.interfaces.engine import IPatternEngine
from triads.coverage import CoverageState
from triads.pattern_generator import PatternGenerator, rng_for
from triads.pattern_models import PatternRequest, PatternResult

logger = logging.getLogger(__name__)


class PatternEngine(IPatternEngine):
    """Generates patterns while tracking coverage across calls."""

    def __init__(
        self,
        generator: Optional[PatternGenerator] = None,
        initial_coverage: Optional[CoverageState] = None,
    ):
        """Initialize pattern engine.

        Args:
            generator: Pure pattern generator
            initial_coverage: Starting coverage (fresh when omitted)
        """
        self.generator = generator or PatternGenerator()
        self._coverage = initial_coverage or CoverageState.empty()

        logger.info("Pattern engine initialized")

    @property
    def coverage_state(self) -> CoverageState:
        return self._coverage

    def generate_next(
        self, request: PatternRequest, rng: Optional[random.Random] = None
    ) -> PatternResult:
        result = self.generator.generate(
            request, self._coverage, rng or rng_for(request)
        )
        self._coverage = result.coverage_state

        logger.debug(
            f"Pattern {result.pattern.id}",
            extra={
                "genre_id": request.genre.id,
                "pattern_id": result.pattern.id,
                "remaining": len(self._coverage.remaining),
            },
        )

        return result

    def reset_coverage(self) -> None:
        self._coverage = CoverageState.empty()
        logger.info("Coverage history cleared")
