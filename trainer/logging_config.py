"""Structured logging configuration for the triad trainer.

Emits key=value formatted logs with optional pattern context.
"""

import logging
import sys
from typing import Any, Optional

from trainer.config import TrainerConfig, get_config

# Extra fields copied from `logger.x(..., extra={...})` when present
CONTEXT_FIELDS = ("genre_id", "pattern_id", "remaining")


class StructuredFormatter(logging.Formatter):
    """Key=value log formatter with pattern context."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as key=value pairs.

        Args:
            record: Log record to format

        Returns:
            Formatted log string
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        pairs = [f"{k}={v}" for k, v in log_data.items()]
        return " ".join(pairs)


def setup_logging(config: Optional[TrainerConfig] = None) -> None:
    """Configure structured logging for the application.

    Args:
        config: Configuration to read the level from (defaults to get_config())
    """
    config = config or get_config()
    level = getattr(logging, config.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(StructuredFormatter(datefmt="%Y-%m-%dT%H:%M:%S"))
    root_logger.addHandler(console_handler)

    logging.getLogger("triads").setLevel(level)
    logging.getLogger("trainer").setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
