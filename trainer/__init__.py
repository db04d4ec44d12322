"""Triad Trainer - practice sessions over the triad generation core.

This module contains the pattern engine façade, the practice session
controller, built-in genre presets, configuration and logging setup.
"""

from trainer.config import TrainerConfig, get_config
from trainer.exceptions import ConfigurationError, PresetError, TrainerError, TriadParseError
from trainer.pattern_engine import PatternEngine
from trainer.practice_defaults import InstrumentContext, PracticeMode
from trainer.practice_session import PracticeSession
from trainer.presets import get_default_preset, get_preset, list_presets

__version__ = "1.0.0"

__all__ = [
    # Core components
    "PatternEngine",
    "PracticeSession",
    # Practice context
    "InstrumentContext",
    "PracticeMode",
    # Configuration
    "TrainerConfig",
    "get_config",
    # Errors
    "ConfigurationError",
    "PresetError",
    "TrainerError",
    "TriadParseError",
    # Presets
    "get_default_preset",
    "get_preset",
    "list_presets",
]
