"""Triad Trainer core - drum-sticking triad generation.

Constraint-filtered triad enumeration, coverage-tracked sampling, phrase
assembly and accent computation. Pure algorithms; no configuration or
logging setup lives here.
"""

from triads.accent_rule import (
    AccentCellStart,
    AccentEveryNth,
    AccentOff,
    AccentRule,
    compute_accent_indices,
)
from triads.constraints import GeneratorConstraints, build_eligible_triads
from triads.coverage import CoverageState, refresh_coverage
from triads.errors import TrainerError, TriadParseError
from triads.pattern_analysis import PatternAnalysis, analyze_pattern
from triads.pattern_generator import PatternGenerator
from triads.pattern_models import (
    GenrePreset,
    Pattern,
    PatternRequest,
    PatternResult,
    PhraseType,
    Subdivision,
)
from triads.phrase_assembler import assemble_phrase
from triads.triad_cell import Limb, LimbScope, TriadCell

__version__ = "1.0.0"

__all__ = [
    "AccentCellStart",
    "AccentEveryNth",
    "AccentOff",
    "AccentRule",
    "CoverageState",
    "GeneratorConstraints",
    "GenrePreset",
    "Limb",
    "LimbScope",
    "Pattern",
    "PatternAnalysis",
    "PatternGenerator",
    "PatternRequest",
    "PatternResult",
    "PhraseType",
    "Subdivision",
    "TrainerError",
    "TriadCell",
    "TriadParseError",
    "analyze_pattern",
    "assemble_phrase",
    "build_eligible_triads",
    "compute_accent_indices",
    "refresh_coverage",
]
