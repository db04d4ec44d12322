"""Custom exceptions for the triad trainer."""

from triads.errors import TrainerError, TriadParseError


class PresetError(TrainerError, KeyError):
    """Unknown genre preset id."""

    def __str__(self) -> str:
        # KeyError quotes its message; keep the plain text
        return str(self.args[0]) if self.args else ""


class ConfigurationError(TrainerError):
    """Error in trainer configuration."""

    pass


__all__ = ["ConfigurationError", "PresetError", "TrainerError", "TriadParseError"]
