"""
Server - read-only HTTP access to the graph artifact.
"""

from claude_viz.server.app import ServerOptions, create_app, run_server

__all__ = [
    "ServerOptions",
    "create_app",
    "run_server",
]
