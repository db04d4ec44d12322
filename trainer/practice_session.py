"""Practice session controller.

Owns one PatternEngine and the user's current selections (genre, mode,
instrument, tuning overrides) and turns them into PatternRequests. The
session is single-owner: call it from one logical user surface, in order.
"""

import logging
import random
from dataclasses import replace
from typing import Optional

from trainer.config import TrainerConfig, get_config
from trainer.exceptions import ConfigurationError, PresetError
from trainer.interfaces.engine import IPatternEngine
from trainer.pattern_engine import PatternEngine
from trainer.practice_defaults import (
    DEFAULT_INSTRUMENT,
    DEFAULT_MODE,
    InstrumentContext,
    PatternFocus,
    PracticeMode,
    defaults_for_mode,
    focus_for_instrument,
    scope_for_instrument,
)
from trainer.presets import get_default_preset, get_preset
from triads.accent_rule import AccentRule
from triads.constraints import GeneratorConstraints
from triads.pattern_models import GenrePreset, Pattern, PatternRequest, PatternResult, PhraseType
from triads.triad_cell import LimbScope

logger = logging.getLogger(__name__)

BPM_RANGE = (30, 260)


class PracticeSession:
    """Sequential practice session built on one pattern engine."""

    def __init__(
        self,
        engine: Optional[IPatternEngine] = None,
        genre: Optional[GenrePreset] = None,
        mode: PracticeMode = DEFAULT_MODE,
        instrument: InstrumentContext = DEFAULT_INSTRUMENT,
        bpm: int = 92,
        coverage_mode: bool = True,
        seed_source: Optional[random.Random] = None,
    ):
        """Initialize practice session and generate the first pattern.

        Args:
            engine: Pattern engine (a fresh PatternEngine when omitted)
            genre: Genre preset (Hands Foundation when omitted)
            mode: Practice intent
            instrument: Physical setup; decides the limb scope
            bpm: Tempo, clamped to 30-260
            coverage_mode: Exhaust the eligible vocabulary before repeating
            seed_source: Source of per-pattern seeds (OS entropy when omitted)
        """
        self.engine = engine or PatternEngine()
        self._genre = genre or get_default_preset()
        self._mode = mode
        self._instrument = instrument
        self._bpm = max(BPM_RANGE[0], min(BPM_RANGE[1], bpm))
        self._coverage_mode = coverage_mode
        self._seed_source = seed_source or random.Random()

        self._phrase_type: Optional[PhraseType] = None
        self._repeats: Optional[int] = None
        self._chain_cells: Optional[int] = None
        self._accent_rule: Optional[AccentRule] = None
        self._infinite_repeat = mode is PracticeMode.TRAINING

        self._last: Optional[PatternResult] = None
        self._last_seed: Optional[int] = None

        logger.info(
            f"Practice session initialized: genre={self._genre.id}, "
            f"mode={mode.value}, instrument={instrument.value}"
        )

        self.generate_next()

    @classmethod
    def from_config(
        cls,
        config: Optional[TrainerConfig] = None,
        engine: Optional[IPatternEngine] = None,
        seed_source: Optional[random.Random] = None,
    ) -> "PracticeSession":
        """Build a session from configuration defaults.

        Raises:
            ConfigurationError: If the configured default genre is unknown
        """
        config = config or get_config()

        try:
            genre = get_preset(config.default_genre)
        except PresetError as e:
            raise ConfigurationError(f"Invalid TRIADS_DEFAULT_GENRE: {e}") from e

        return cls(
            engine=engine,
            genre=genre,
            mode=PracticeMode(config.default_mode),
            instrument=InstrumentContext(config.default_instrument),
            bpm=config.default_bpm,
            coverage_mode=config.coverage_mode,
            seed_source=seed_source,
        )

    # Read API

    @property
    def pattern(self) -> Optional[Pattern]:
        return self._last.pattern if self._last else None

    @property
    def last_result(self) -> Optional[PatternResult]:
        return self._last

    @property
    def last_seed(self) -> Optional[int]:
        return self._last_seed

    @property
    def genre(self) -> GenrePreset:
        return self._genre

    @property
    def mode(self) -> PracticeMode:
        return self._mode

    @property
    def instrument(self) -> InstrumentContext:
        return self._instrument

    @property
    def bpm(self) -> int:
        return self._bpm

    @property
    def coverage_mode(self) -> bool:
        return self._coverage_mode

    @property
    def infinite_repeat(self) -> bool:
        return self._infinite_repeat

    @property
    def focus(self) -> PatternFocus:
        return focus_for_instrument(self._instrument)

    # Selections

    def set_mode(self, mode: PracticeMode) -> None:
        """Switch intent; training shows ∞, flow shows the repeat count."""
        if mode is self._mode:
            return
        self._mode = mode
        self._infinite_repeat = mode is PracticeMode.TRAINING
        self.generate_next()

    def set_instrument(self, instrument: InstrumentContext) -> None:
        if instrument is self._instrument:
            return
        self._instrument = instrument
        self.generate_next()

    def set_genre(self, genre: GenrePreset) -> None:
        if genre == self._genre:
            return
        self._genre = genre
        self.generate_next()

    def set_coverage_mode(self, enabled: bool) -> None:
        if enabled == self._coverage_mode:
            return
        self._coverage_mode = enabled
        self.generate_next()

    def set_generator_tuning(
        self,
        phrase_type: Optional[PhraseType] = None,
        repeats: Optional[int] = None,
        chain_cells: Optional[int] = None,
        accent_rule: Optional[AccentRule] = None,
        infinite_repeat: Optional[bool] = None,
    ) -> None:
        """Replace all tuning overrides (None falls back to genre defaults)."""
        self._phrase_type = phrase_type
        self._repeats = repeats
        self._chain_cells = chain_cells
        self._accent_rule = accent_rule
        if infinite_repeat is not None:
            self._infinite_repeat = infinite_repeat
        self.generate_next()

    def apply_mode_defaults(self) -> None:
        """Use the current mode's defaults as tuning overrides."""
        defaults = defaults_for_mode(self._mode)
        self.set_generator_tuning(
            phrase_type=defaults.phrase_type,
            repeats=defaults.repeats,
            chain_cells=defaults.chain_cells,
            accent_rule=defaults.accent_rule,
            infinite_repeat=defaults.infinite_repeat,
        )

    def clear_tuning(self) -> None:
        """Drop tuning overrides; the infinite-repeat preference is kept."""
        self._phrase_type = None
        self._repeats = None
        self._chain_cells = None
        self._accent_rule = None
        self.generate_next()

    def bpm_step(self, delta: int) -> int:
        self._bpm = max(BPM_RANGE[0], min(BPM_RANGE[1], self._bpm + delta))
        return self._bpm

    # Generation

    def generate_next(self) -> PatternResult:
        """Generate a new pattern with a fresh seed."""
        return self._generate(self._seed_source.getrandbits(32))

    def restart_same(self) -> PatternResult:
        """Regenerate with the previous seed."""
        if self._last_seed is None:
            return self.generate_next()
        return self._generate(self._last_seed)

    def effective_constraints(self) -> GeneratorConstraints:
        """Genre constraints with the scope taken from the instrument."""
        scope = scope_for_instrument(self._instrument)
        base = self._genre.constraints
        return replace(
            base,
            scope=scope,
            require_kick=scope is LimbScope.HANDS_AND_KICK and base.require_kick,
        )

    def build_request(self, seed: Optional[int]) -> PatternRequest:
        tuned_genre = self._genre.with_overrides(constraints=self.effective_constraints())
        return PatternRequest(
            genre=tuned_genre,
            coverage_mode=self._coverage_mode,
            phrase_type=self._phrase_type,
            repeats=self._repeats,
            chain_cells=self._chain_cells,
            accent_rule=self._accent_rule,
            seed=seed,
            infinite_repeat=self._infinite_repeat,
        )

    def _generate(self, seed: int) -> PatternResult:
        request = self.build_request(seed)
        self._last_seed = seed
        self._last = self.engine.generate_next(request)

        logger.debug(f"Session pattern: {self._last.pattern.display_text()}")

        return self._last
