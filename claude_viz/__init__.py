"""claude-viz - agent/skill dependency graphs for Claude Code projects."""

__version__ = "1.0.0"

__all__ = ["__version__"]
