"""
claude-viz utils - logging and project filesystem helpers.
"""

from claude_viz.utils.logging import setup_logging, get_logger, log_error
from claude_viz.utils.project import (
    ensure_visualizer_dir,
    find_available_port,
    validate_claude_project,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_error",
    "ensure_visualizer_dir",
    "find_available_port",
    "validate_claude_project",
]
