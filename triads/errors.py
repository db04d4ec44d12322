"""Exceptions raised by the triad generation core."""


class TrainerError(Exception):
    """Base exception for all triad trainer errors."""

    pass


class TriadParseError(TrainerError, ValueError):
    """Invalid triad identity string (wrong length or unknown limb glyph)."""

    pass
