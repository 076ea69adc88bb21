"""Shared fixtures for building throwaway Claude Code projects on disk."""

from __future__ import annotations

import textwrap
from pathlib import Path


def write_file(root: Path, relative: str, content: str | bytes) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
    return path


def make_project(root: Path, files: dict[str, str | bytes] | None = None) -> Path:
    """Create ``root/.claude`` and the given files (paths relative to root)."""
    (root / ".claude").mkdir(parents=True, exist_ok=True)
    for relative, content in (files or {}).items():
        write_file(root, relative, content)
    return root


REVIEWER_AGENT = """
    ---
    name: Reviewer
    skills: testing
    ---
    Reviews code changes.
    """

TESTING_SKILL = """
    ---
    name: Testing
    ---
    Write and run tests.
    """
