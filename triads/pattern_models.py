"""Pattern request and result value objects."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence

from triads.accent_rule import AccentRule
from triads.constraints import GeneratorConstraints
from triads.coverage import CoverageState
from triads.triad_cell import Limb, TriadCell

REPEATS_RANGE = (1, 64)
CHAIN_CELLS_RANGE = (2, 64)


class Subdivision(Enum):
    EIGHTHS = "eighths"
    TRIPLETS = "triplets"
    SIXTEENTHS = "sixteenths"

    @property
    def label(self) -> str:
        return {
            Subdivision.EIGHTHS: "8th",
            Subdivision.TRIPLETS: "Triplet",
            Subdivision.SIXTEENTHS: "16th",
        }[self]


class PhraseType(Enum):
    """Phrase shapes.

    SINGLE_CELL: (A -> B) x N
    TWO_CELL: (A -> B -> A -> B) x N
    CHAIN: N distinct cells in a row
    """

    SINGLE_CELL = "single_cell"
    TWO_CELL = "two_cell"
    CHAIN = "chain"

    def cell_count(self, chain_cells: int) -> int:
        if self is PhraseType.SINGLE_CELL:
            return 2
        if self is PhraseType.TWO_CELL:
            return 4
        return chain_cells


def clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(high, value))


@dataclass(frozen=True)
class GenrePreset:
    """Named bundle of generation defaults and constraints.

    Use `with_overrides` for tuned variants; the original is never mutated.
    """

    id: str
    name: str
    default_subdivision: Subdivision
    default_phrase_type: PhraseType
    default_repeats: int
    default_chain_cells: int
    default_accent_rule: AccentRule
    default_orchestration_preset_id: str
    constraints: GeneratorConstraints

    def with_overrides(self, **changes) -> "GenrePreset":
        return replace(self, **changes)


@dataclass(frozen=True)
class PatternRequest:
    """Generation request. Unset overrides resolve to the genre's defaults."""

    genre: GenrePreset
    coverage_mode: bool
    subdivision: Optional[Subdivision] = None
    phrase_type: Optional[PhraseType] = None
    repeats: Optional[int] = None
    chain_cells: Optional[int] = None
    accent_rule: Optional[AccentRule] = None
    orchestration_preset_id: Optional[str] = None
    seed: Optional[int] = None
    infinite_repeat: bool = False  # display hint: repeats still drive expansion

    @property
    def resolved_subdivision(self) -> Subdivision:
        if self.subdivision is None:
            return self.genre.default_subdivision
        return self.subdivision

    @property
    def resolved_phrase_type(self) -> PhraseType:
        if self.phrase_type is None:
            return self.genre.default_phrase_type
        return self.phrase_type

    @property
    def resolved_repeats(self) -> int:
        if self.repeats is None:
            return self.genre.default_repeats
        return self.repeats

    @property
    def resolved_chain_cells(self) -> int:
        if self.chain_cells is None:
            return self.genre.default_chain_cells
        return self.chain_cells

    @property
    def resolved_accent_rule(self) -> AccentRule:
        if self.accent_rule is None:
            return self.genre.default_accent_rule
        return self.accent_rule

    @property
    def resolved_orchestration_preset_id(self) -> str:
        if self.orchestration_preset_id is None:
            return self.genre.default_orchestration_preset_id
        return self.orchestration_preset_id


@dataclass(frozen=True)
class Pattern:
    """Generated exercise. Read-only for renderers and commentary."""

    id: str
    genre: GenrePreset
    subdivision: Subdivision
    phrase_type: PhraseType
    repeats: int
    infinite_repeat: bool
    phrase: tuple[TriadCell, ...]
    accent_indices: tuple[int, ...]
    orchestration_preset_id: str

    def expanded_limbs(self) -> list[Limb]:
        """Limb stream with the phrase repeated `repeats` times."""
        return [limb for _ in range(self.repeats) for cell in self.phrase for limb in cell.limbs]

    def display_text(self) -> str:
        phrase_text = " → ".join(cell.id for cell in self.phrase)
        repeat_text = "∞" if self.infinite_repeat else f"×{self.repeats}"
        return f"{phrase_text} {repeat_text}"


@dataclass(frozen=True)
class PatternResult:
    """Pattern plus the coverage state it left behind."""

    pattern: Pattern
    coverage_state: CoverageState


def derive_pattern_id(
    genre_id: str,
    phrase_type: PhraseType,
    subdivision: Subdivision,
    repeats: int,
    infinite_repeat: bool,
    accent_rule: AccentRule,
    orchestration_preset_id: str,
    phrase: Sequence[TriadCell],
) -> str:
    """Stable identifier: equal inputs give equal ids, any difference changes it.

    Example: ``rock|pt=single_cell|sub=eighths|x=4|acc=cell|orch=rock_basic|RLK-LRR``
    """
    return "|".join(
        [
            genre_id,
            f"pt={phrase_type.value}",
            f"sub={subdivision.value}",
            "x=inf" if infinite_repeat else f"x={repeats}",
            f"acc={accent_rule.tag}",
            f"orch={orchestration_preset_id}",
            "-".join(cell.id for cell in phrase),
        ]
    )
