"""Generator constraints and eligibility enumeration.

Eligibility is an exhaustive walk over every ordered triple drawn from the
scope's limb set (8 for hands only, 27 with kick), filtered by the doubles
and kick policies.
"""

import itertools
from dataclasses import dataclass

from triads.triad_cell import LimbScope, TriadCell


@dataclass(frozen=True)
class GeneratorConstraints:
    """Validity predicate over triads.

    Attributes:
        scope: Limbs available to every slot
        include_doubles: If False, excludes any triad repeating a limb in any
            two positions (RR, LL, KK, including first/last)
        require_kick: If True, at least one slot must be K
        allow_kick_doubles: If False, excludes KK at positions (0,1) or (1,2)

    `require_kick` and `allow_kick_doubles` are inert under hands-only scope.
    """

    scope: LimbScope
    include_doubles: bool
    require_kick: bool
    allow_kick_doubles: bool

    @property
    def signature(self) -> str:
        """Stable encoding used to key coverage state."""
        return ";".join(
            [
                f"scope={self.scope.value}",
                f"doubles={int(self.include_doubles)}",
                f"reqK={int(self.require_kick)}",
                f"kk={int(self.allow_kick_doubles)}",
            ]
        )

    def allows(self, cell: TriadCell) -> bool:
        if not self.include_doubles and cell.has_any_double():
            return False
        if self.require_kick and not cell.has_kick():
            return False
        if not self.allow_kick_doubles and cell.has_kick_double():
            return False
        return True


def build_eligible_triads(constraints: GeneratorConstraints) -> tuple[TriadCell, ...]:
    """Enumerate every triad the constraints allow.

    Args:
        constraints: Scope and filtering policy

    Returns:
        Eligible cells in enumeration order (R before L before K per slot).
        Empty when the constraints contradict each other, e.g. require_kick
        under hands-only scope.
    """
    limbs = constraints.scope.limbs
    return tuple(
        cell
        for cell in (TriadCell(*triple) for triple in itertools.product(limbs, repeat=3))
        if constraints.allows(cell)
    )


def eligible_ids(constraints: GeneratorConstraints) -> tuple[str, ...]:
    """Identity strings of `build_eligible_triads`, same order."""
    return tuple(cell.id for cell in build_eligible_triads(constraints))
