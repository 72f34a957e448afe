"""Logging configuration for torrentctl.

Console output uses Rich, an optional log file uses a rotating plain-text
handler. Both are wired through ``logging.config.dictConfig``.
"""

from __future__ import annotations

import logging
import logging.config
import time
from pathlib import Path
from typing import TYPE_CHECKING, Any

from torrentctl.utils.rich_logging import create_rich_handler

if TYPE_CHECKING:  # pragma: no cover
    from torrentctl.models import ObservabilityConfig


def setup_logging(
    config: ObservabilityConfig,
    level_override: int | None = None,
    show_path: bool = False,
) -> None:
    """Set up logging from the observability config.

    Args:
        config: Observability section of the configuration
        level_override: Numeric level that replaces ``config.log_level``
            (used by the CLI ``-v`` flags)
        show_path: Show the source file and line of console log records

    """
    level: int | str = (
        level_override if level_override is not None else config.log_level.value
    )

    logging_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "format": "%(asctime)s %(levelname)s %(name)s.%(funcName)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {},
        "loggers": {
            "torrentctl": {
                "level": level,
                "handlers": [],
                "propagate": False,
            },
        },
    }

    if config.log_file:
        log_path = Path(config.log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logging_config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "simple",
            "filename": str(log_path),
            "maxBytes": 10 * 1024 * 1024,  # 10MB
            "backupCount": 5,
        }
        logging_config["loggers"]["torrentctl"]["handlers"].append("file")

    logging.config.dictConfig(logging_config)

    # RichHandler needs a live Console, so it is attached after dictConfig
    logging.getLogger("torrentctl").addHandler(
        create_rich_handler(level=level, show_path=show_path)
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``torrentctl`` namespace."""
    if name == "torrentctl" or name.startswith("torrentctl."):
        return logging.getLogger(name)
    return logging.getLogger(f"torrentctl.{name}")


class LoggingContext:
    """Context manager that logs the start, end and duration of an operation."""

    def __init__(self, operation: str, log_level: int = logging.DEBUG, **kwargs):
        """Initialize operation context manager.

        Args:
            operation: Name of the operation
            log_level: Level for the start/complete messages
            **kwargs: Additional context included in the log records

        """
        self.operation = operation
        self.kwargs = kwargs
        self.logger = get_logger(self.__class__.__module__)
        self.log_level = log_level
        self.start_time: float | None = None

    def __enter__(self):
        """Enter the context manager."""
        self.start_time = time.time()
        self.logger.log(self.log_level, "Starting %s", self.operation, extra=self.kwargs)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit the context manager."""
        duration = time.time() - self.start_time if self.start_time else 0
        if exc_type is None:
            self.logger.log(
                self.log_level,
                "Completed %s in %.3fs",
                self.operation,
                duration,
                extra=self.kwargs,
            )
        else:
            self.logger.debug(
                "Failed %s in %.3fs: %s",
                self.operation,
                duration,
                exc_val,
                extra=self.kwargs,
            )
        return False

