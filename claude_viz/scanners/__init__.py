"""
Scanners - one directory walker per definition kind.

Each scanner takes the ``.claude`` directory and returns a ScanResult.
They share no state and can run concurrently.
"""

from claude_viz.scanners.agents import scan_agents
from claude_viz.scanners.commands import scan_commands
from claude_viz.scanners.skills import scan_skills

__all__ = [
    "scan_agents",
    "scan_commands",
    "scan_skills",
]
