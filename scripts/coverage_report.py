#!/usr/bin/env python3
"""
Coverage Report Generator

Drains the coverage cycle of each genre preset with single-cell phrases and
reports how many patterns it takes before the first triad repeats.

Usage:
    python scripts/coverage_report.py --genre rock --seed 7
"""

import argparse
import random
import sys
from typing import Dict, List, Optional

from tabulate import tabulate

from trainer.exceptions import PresetError
from trainer.logging_config import setup_logging
from trainer.pattern_engine import PatternEngine
from trainer.presets import built_in_presets, get_preset
from triads.constraints import build_eligible_triads
from triads.pattern_models import GenrePreset, PatternRequest, PhraseType


def measure_coverage(preset: GenrePreset, seed: int, max_patterns: int = 64) -> Dict:
    """
    Generate single-cell patterns until every eligible triad has been drawn.

    Args:
        preset: Genre preset to measure
        seed: Seed for the shared pseudo-random source
        max_patterns: Upper bound on generated patterns

    Returns:
        Dict with eligible size, patterns needed and first repeat position
    """
    eligible = {cell.id for cell in build_eligible_triads(preset.constraints)}
    engine = PatternEngine()
    rng = random.Random(seed)
    request = PatternRequest(
        genre=preset, coverage_mode=True, phrase_type=PhraseType.SINGLE_CELL
    )

    seen: set = set()
    draws = 0
    first_repeat: Optional[int] = None
    patterns = 0

    while eligible and not eligible <= seen and patterns < max_patterns:
        result = engine.generate_next(request, rng=rng)
        patterns += 1
        for cell in result.pattern.phrase:
            draws += 1
            if cell.id in seen and first_repeat is None:
                first_repeat = draws
            seen.add(cell.id)

    return {
        "genre": preset.id,
        "scope": preset.constraints.scope.value,
        "eligible": len(eligible),
        "patterns": patterns,
        "draws": draws,
        "first_repeat": first_repeat,
    }


def build_report(presets: List[GenrePreset], seed: int) -> str:
    """Render the coverage table for the given presets."""
    rows = []
    for preset in presets:
        data = measure_coverage(preset, seed)
        exhausted = data["eligible"] > 0 and (
            data["first_repeat"] is None or data["first_repeat"] > data["eligible"]
        )
        rows.append(
            [
                data["genre"],
                data["scope"],
                data["eligible"],
                data["patterns"],
                data["draws"],
                data["first_repeat"] if data["first_repeat"] is not None else "-",
                "✓ PASS" if exhausted else "✗ FALLBACK",
            ]
        )

    return tabulate(
        rows,
        headers=["Genre", "Scope", "Eligible", "Patterns", "Draws", "First repeat", "Status"],
        tablefmt="simple",
    )


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description='Report triad coverage per genre preset')
    parser.add_argument(
        '--genre',
        help='Preset id (default: all built-in presets)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=0,
        help='Seed for reproducible draws (default: 0)'
    )

    args = parser.parse_args()

    setup_logging()

    try:
        presets = [get_preset(args.genre)] if args.genre else list(built_in_presets().values())
    except PresetError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    print(build_report(presets, args.seed))


if __name__ == '__main__':
    main()
