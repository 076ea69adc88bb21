"""
Entry point for running claude-viz as a module.

Usage:
    python -m claude_viz scan ./my-project
    python -m claude_viz --help
"""

from claude_viz.cli import main

if __name__ == "__main__":
    main()
