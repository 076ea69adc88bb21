"""
Core - models, diagnostics and exceptions shared by every layer.
"""

from claude_viz.core.diagnostics import ScanDiagnostic, ScanResult
from claude_viz.core.exceptions import (
    ClaudeVizError,
    ConfigError,
    PortUnavailableError,
    ProjectNotFoundError,
)

__all__ = [
    "ScanDiagnostic",
    "ScanResult",
    "ClaudeVizError",
    "ConfigError",
    "PortUnavailableError",
    "ProjectNotFoundError",
]
