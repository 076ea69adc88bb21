"""
App - configuration for the CLI and server.
"""

from claude_viz.app.config import ScanConfig, ServerConfig, VizConfig

__all__ = [
    "ScanConfig",
    "ServerConfig",
    "VizConfig",
]
