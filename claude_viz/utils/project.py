"""
Project filesystem helpers.

Marker validation, visualizer directory bootstrap and port selection for
the ``serve`` command.
"""

from __future__ import annotations

import socket
from pathlib import Path

from claude_viz.core.exceptions import PortUnavailableError
from claude_viz.utils.logging import get_logger

logger = get_logger("utils.project")

CLAUDE_DIRNAME = ".claude"
VISUALIZER_DIRNAME = "visualizer"
GRAPH_DATA_FILENAME = "graph-data.json"

_GITIGNORE_CONTENT = f"# Visualizer generated data\n{GRAPH_DATA_FILENAME}\n"


def validate_claude_project(project_root: str | Path) -> bool:
    """Return True if ``project_root`` contains a ``.claude`` directory."""
    return (Path(project_root) / CLAUDE_DIRNAME).is_dir()


def default_visualizer_dir(project_root: str | Path) -> Path:
    return Path(project_root) / CLAUDE_DIRNAME / VISUALIZER_DIRNAME


def default_output_path(project_root: str | Path) -> Path:
    return default_visualizer_dir(project_root) / GRAPH_DATA_FILENAME


def ensure_visualizer_dir(viz_dir: str | Path) -> Path:
    """Create the visualizer directory and its ``.gitignore``.

    An existing ``.gitignore`` is left untouched.

    Args:
        viz_dir: Directory that will hold the generated graph data

    Returns:
        The directory path
    """
    viz_path = Path(viz_dir)
    viz_path.mkdir(parents=True, exist_ok=True)

    gitignore_path = viz_path / ".gitignore"
    if not gitignore_path.exists():
        gitignore_path.write_text(_GITIGNORE_CONTENT, encoding="utf-8")
        logger.debug(f"Created {gitignore_path}")

    return viz_path


def is_port_available(port: int, host: str = "127.0.0.1") -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError:
            return False
    return True


def find_available_port(
    preferred: int,
    attempts: int = 10,
    host: str = "127.0.0.1",
) -> int:
    """Find a bindable port, starting from ``preferred``.

    Tries ``preferred`` and then up to ``attempts`` ports after it.

    Raises:
        PortUnavailableError: If every port in the range is taken
    """
    for port in range(preferred, preferred + attempts + 1):
        if is_port_available(port, host):
            if port != preferred:
                logger.info(f"Port {preferred} in use, using {port}")
            return port

    raise PortUnavailableError(preferred, attempts)
