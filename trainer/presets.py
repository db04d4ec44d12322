"""Built-in genre presets.

Each preset bundles generation defaults with generator constraints:
Rock, Funk (Linear), Jazz (Triplet), Fusion, Hands (Foundation).
"""

import logging
from typing import Dict

from trainer.exceptions import PresetError
from triads.accent_rule import AccentCellStart, AccentEveryNth, AccentOff
from triads.constraints import GeneratorConstraints
from triads.pattern_models import GenrePreset, PhraseType, Subdivision
from triads.triad_cell import LimbScope

logger = logging.getLogger(__name__)


PRESETS: Dict[str, GenrePreset] = {
    "rock": GenrePreset(
        id="rock",
        name="Rock",
        default_subdivision=Subdivision.EIGHTHS,
        default_phrase_type=PhraseType.SINGLE_CELL,
        default_repeats=4,
        default_chain_cells=8,
        default_accent_rule=AccentCellStart(),
        default_orchestration_preset_id="rock_basic",
        constraints=GeneratorConstraints(
            scope=LimbScope.HANDS_AND_KICK,
            include_doubles=True,
            require_kick=False,
            allow_kick_doubles=False,
        ),
    ),
    "funk_linear": GenrePreset(
        id="funk_linear",
        name="Funk (Linear)",
        default_subdivision=Subdivision.SIXTEENTHS,
        default_phrase_type=PhraseType.CHAIN,
        default_repeats=2,
        default_chain_cells=8,
        default_accent_rule=AccentEveryNth(3),
        default_orchestration_preset_id="funk_linear",
        constraints=GeneratorConstraints(
            scope=LimbScope.HANDS_AND_KICK,
            include_doubles=False,  # linear: no limb twice in a cell
            require_kick=True,
            allow_kick_doubles=False,
        ),
    ),
    "jazz_triplet": GenrePreset(
        id="jazz_triplet",
        name="Jazz (Triplet)",
        default_subdivision=Subdivision.TRIPLETS,
        default_phrase_type=PhraseType.CHAIN,
        default_repeats=2,
        default_chain_cells=6,
        default_accent_rule=AccentCellStart(),
        default_orchestration_preset_id="jazz_ride_comp",
        constraints=GeneratorConstraints(
            scope=LimbScope.HANDS_AND_KICK,
            include_doubles=True,
            require_kick=False,
            allow_kick_doubles=False,
        ),
    ),
    "fusion": GenrePreset(
        id="fusion",
        name="Fusion",
        default_subdivision=Subdivision.SIXTEENTHS,
        default_phrase_type=PhraseType.CHAIN,
        default_repeats=2,
        default_chain_cells=12,
        default_accent_rule=AccentEveryNth(4),
        default_orchestration_preset_id="fusion_melodic_toms",
        constraints=GeneratorConstraints(
            scope=LimbScope.HANDS_AND_KICK,
            include_doubles=True,
            require_kick=False,
            allow_kick_doubles=True,
        ),
    ),
    "hands_foundation": GenrePreset(
        id="hands_foundation",
        name="Hands (Foundation)",
        default_subdivision=Subdivision.EIGHTHS,
        default_phrase_type=PhraseType.SINGLE_CELL,
        default_repeats=4,
        default_chain_cells=8,
        default_accent_rule=AccentOff(),
        default_orchestration_preset_id="hands_basic",
        constraints=GeneratorConstraints(
            scope=LimbScope.HANDS_ONLY,
            include_doubles=True,
            require_kick=False,
            allow_kick_doubles=False,
        ),
    ),
}

DEFAULT_PRESET_ID = "hands_foundation"


def get_preset(preset_id: str) -> GenrePreset:
    """Get preset by id.

    Args:
        preset_id: Preset id ("rock", "funk_linear", "jazz_triplet", "fusion",
            "hands_foundation")

    Returns:
        The built-in GenrePreset

    Raises:
        PresetError: If preset id not found
    """
    preset_id_lower = preset_id.lower()

    if preset_id_lower not in PRESETS:
        available = ", ".join(PRESETS.keys())
        raise PresetError(f"Unknown preset: {preset_id}. Available presets: {available}")

    preset = PRESETS[preset_id_lower]

    logger.info(f"Loading preset: {preset.name} ({preset.constraints.signature})")

    return preset


def built_in_presets() -> Dict[str, GenrePreset]:
    """Copy of the built-in table, keyed by id, in declaration order."""
    return dict(PRESETS)


def list_presets() -> list[Dict[str, str]]:
    """List all available presets.

    Returns:
        List of preset metadata dictionaries
    """
    return [
        {
            "id": preset.id,
            "name": preset.name,
            "subdivision": preset.default_subdivision.label,
            "phrase_type": preset.default_phrase_type.value,
            "repeats": str(preset.default_repeats),
            "scope": preset.constraints.scope.value,
        }
        for preset in PRESETS.values()
    ]


def get_default_preset() -> GenrePreset:
    """Get the default preset (Hands Foundation)."""
    return get_preset(DEFAULT_PRESET_ID)
