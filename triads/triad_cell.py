"""Limb and triad cell primitives.

A triad cell is an ordered group of three limb strikes. Its canonical
identity is a 3-character string such as "RLK", used for equality, hashing,
coverage tracking and pattern identifiers.
"""

from dataclasses import dataclass
from enum import Enum

from triads.errors import TriadParseError


class Limb(Enum):
    """One of the three strike sources."""

    RIGHT = "R"
    LEFT = "L"
    KICK = "K"

    @property
    def glyph(self) -> str:
        return self.value


class LimbScope(Enum):
    """Which limbs are physically available."""

    HANDS_ONLY = "hands_only"
    HANDS_AND_KICK = "hands_and_kick"

    @property
    def limbs(self) -> tuple[Limb, ...]:
        """Limbs a triad slot may be drawn from under this scope."""
        if self is LimbScope.HANDS_ONLY:
            return (Limb.RIGHT, Limb.LEFT)
        return (Limb.RIGHT, Limb.LEFT, Limb.KICK)


_GLYPHS = {limb.glyph: limb for limb in Limb}


@dataclass(frozen=True)
class TriadCell:
    """Ordered 3-limb note group. Order matters: RLK != LRK."""

    first: Limb
    second: Limb
    third: Limb

    @property
    def limbs(self) -> tuple[Limb, Limb, Limb]:
        return (self.first, self.second, self.third)

    @property
    def id(self) -> str:
        """Canonical identity (e.g. "LRR")."""
        return f"{self.first.glyph}{self.second.glyph}{self.third.glyph}"

    def __str__(self) -> str:
        return self.id

    def has_kick(self) -> bool:
        return Limb.KICK in self.limbs

    def has_any_double(self) -> bool:
        """True if any pair of positions repeats a limb, including 0 and 2."""
        a, b, c = self.limbs
        return a == b or b == c or a == c

    def has_kick_double(self) -> bool:
        """True for KK at positions (0,1) or (1,2); KKK is covered by both."""
        a, b, c = self.limbs
        return (a is Limb.KICK and b is Limb.KICK) or (
            b is Limb.KICK and c is Limb.KICK
        )

    @classmethod
    def parse(cls, text: str) -> "TriadCell":
        """Inverse of `id`.

        Args:
            text: 3-character identity such as "RLK"

        Returns:
            Parsed TriadCell

        Raises:
            TriadParseError: If the length is not 3 or a glyph is unknown
        """
        if len(text) != 3:
            raise TriadParseError(
                f"Triad identity must be 3 characters, got {text!r}"
            )

        limbs = []
        for i, glyph in enumerate(text):
            if glyph not in _GLYPHS:
                raise TriadParseError(
                    f"Invalid limb glyph at {i}: {glyph!r} in {text!r}"
                )
            limbs.append(_GLYPHS[glyph])

        return cls(*limbs)


# Always-valid phrase used when the constraints leave nothing eligible
FALLBACK_PHRASE: tuple[TriadCell, ...] = (
    TriadCell(Limb.RIGHT, Limb.LEFT, Limb.RIGHT),
    TriadCell(Limb.LEFT, Limb.RIGHT, Limb.LEFT),
)
