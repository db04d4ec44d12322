"""Dependency injection container for triad trainer components."""

import logging
from typing import Any

from trainer.config import get_config
from trainer.pattern_engine import PatternEngine
from trainer.practice_session import PracticeSession
from triads.pattern_generator import PatternGenerator

logger = logging.getLogger(__name__)


class DIContainer:
    """Dependency injection container for trainer components."""

    def __init__(self) -> None:
        """Initialize DI container."""
        self._config = get_config()
        self._instances: dict[str, Any] = {}

        logger.info("DI container initialized")

    def get_config(self):
        """Get configuration instance."""
        return self._config

    def get_pattern_generator(self) -> PatternGenerator:
        """Get or create pattern generator instance."""
        if "pattern_generator" not in self._instances:
            self._instances["pattern_generator"] = PatternGenerator()
        return self._instances["pattern_generator"]

    def get_pattern_engine(self) -> PatternEngine:
        """Get or create pattern engine instance."""
        if "pattern_engine" not in self._instances:
            self._instances["pattern_engine"] = PatternEngine(
                generator=self.get_pattern_generator()
            )
        return self._instances["pattern_engine"]

    def get_practice_session(self) -> PracticeSession:
        """Get or create practice session instance."""
        if "practice_session" not in self._instances:
            self._instances["practice_session"] = PracticeSession.from_config(
                self._config, engine=self.get_pattern_engine()
            )
        return self._instances["practice_session"]

    def reset(self) -> None:
        """Drop all cached instances."""
        self._instances.clear()
        logger.info("DI container reset")


# Global container instance
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """Get the global DI container instance."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
