"""Pattern engine interface definitions."""

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from triads.coverage import CoverageState
    from triads.pattern_models import PatternRequest, PatternResult


class IPatternEngine(ABC):
    """Stateful pattern source owned by one practice session."""

    @abstractmethod
    def generate_next(
        self, request: "PatternRequest", rng: Optional[random.Random] = None
    ) -> "PatternResult":
        """Generate the next pattern and advance coverage.

        Args:
            request: Generation request
            rng: Pseudo-random source; built from request.seed when omitted

        Returns:
            PatternResult with the pattern and the coverage state after the call
        """
        pass

    @property
    @abstractmethod
    def coverage_state(self) -> "CoverageState":
        """Current coverage state."""
        pass

    @abstractmethod
    def reset_coverage(self) -> None:
        """Forget coverage history; the next call starts a fresh cycle."""
        pass
