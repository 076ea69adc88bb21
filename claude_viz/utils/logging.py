"""
Logging configuration for claude-viz.

Provides a namespaced logger hierarchy and a compact console formatter.
Scanner warnings flow through here as the side channel for recoverable
per-file problems.
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path

_ROOT_LOGGER_NAME = "claude_viz"

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


class LogLevel(str, Enum):
    """Levels accepted by ``setup_logging`` and the ``--log-level`` option."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ============================================================================
# Custom Formatter
# ============================================================================


class VizFormatter(logging.Formatter):
    """Formatter with optional colour and timestamp."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def __init__(
        self,
        use_colors: bool = True,
        include_timestamp: bool = True,
    ):
        self.use_colors = use_colors
        self.include_timestamp = include_timestamp
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        parts = []

        if self.include_timestamp:
            timestamp = datetime.fromtimestamp(record.created, UTC).strftime(
                "%Y-%m-%d %H:%M:%S"
            )
            parts.append(f"[{timestamp}]")

        level = record.levelname
        if self.use_colors:
            color = self.COLORS.get(level, "")
            reset = self.COLORS["RESET"]
            parts.append(f"{color}{level:8}{reset}")
        else:
            parts.append(f"{level:8}")

        name = record.name
        prefix = f"{_ROOT_LOGGER_NAME}."
        if name.startswith(prefix):
            name = name[len(prefix):]
        parts.append(f"[{name:18}]")

        parts.append(record.getMessage())

        if record.exc_info:
            parts.append(self.formatException(record.exc_info))

        return " ".join(parts)


# ============================================================================
# Setup Functions
# ============================================================================


def parse_log_level(value: LogLevel | str) -> LogLevel:
    """Normalize a level name, case-insensitively.

    Raises:
        ValueError: If ``value`` is not one of the LogLevel names
    """
    if isinstance(value, LogLevel):
        return value
    return LogLevel(str(value).strip().upper())


def setup_logging(
    level: LogLevel | str = LogLevel.INFO,
    log_dir: str | Path | None = None,
    console_output: bool = True,
    file_output: bool = False,
    log_filename: str = "claude-viz.log",
) -> None:
    """Configure the ``claude_viz`` logger hierarchy.

    Args:
        level: Minimum log level to capture
        log_dir: Directory for log files (required if file_output=True)
        console_output: Whether to log to stderr
        file_output: Whether to log to file
        log_filename: Name of the log file

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    numeric_level = getattr(logging, parse_log_level(level).value)
    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(numeric_level)
    root_logger.handlers = []

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(
            VizFormatter(use_colors=sys.stderr.isatty(), include_timestamp=False)
        )
        root_logger.addHandler(console_handler)

    if file_output and log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(
            log_path / log_filename,
            encoding="utf-8",
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(VizFormatter(use_colors=False))
        root_logger.addHandler(file_handler)

    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get or create a logger under the ``claude_viz`` namespace.

    Usage:
        logger = get_logger("scanners.agents")
        logger.warning("Failed to parse %s", path)
    """
    if not name.startswith(f"{_ROOT_LOGGER_NAME}."):
        full_name = f"{_ROOT_LOGGER_NAME}.{name}"
    else:
        full_name = name

    if full_name not in _loggers:
        _loggers[full_name] = logging.getLogger(full_name)

    return _loggers[full_name]


def log_error(
    logger: logging.Logger,
    operation: str,
    error: Exception,
    context: dict | None = None,
) -> None:
    """Log a failed operation with its exception and optional context."""
    msg = f"FAILED {operation}: {type(error).__name__}: {error}"
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        msg = f"{msg} | Context: {context_str}"
    logger.error(msg, exc_info=True)


# Console-only default so library use logs warnings before the CLI configures
setup_logging(level="WARNING", console_output=True, file_output=False)
