"""Interface definitions for the triad trainer."""

from trainer.interfaces.engine import IPatternEngine

__all__ = ["IPatternEngine"]
