"""
Shared helpers for the directory scanners.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from claude_viz.core.diagnostics import ScanResult
from claude_viz.parsing.frontmatter import HeaderValue, extract_body, parse_frontmatter
from claude_viz.utils.logging import get_logger

logger = get_logger("scanners")


@dataclass(frozen=True)
class Document:
    """A definition file read from disk."""

    path: Path
    relative_path: str
    content: str
    header: dict[str, HeaderValue]

    @property
    def body(self) -> str:
        return extract_body(self.content)

    def scalar(self, key: str, default: str = "") -> str:
        """Header field as a string; list values are not scalars."""
        value = self.header.get(key)
        if isinstance(value, str) and value:
            return value
        return default


def relative_to_project(path: Path, claude_dir: Path) -> str:
    """Path relative to the project root (the parent of ``.claude``)."""
    return path.relative_to(claude_dir.parent).as_posix()


def list_markdown_files(directory: Path) -> list[Path]:
    """``*.md`` files directly under ``directory``, sorted by name."""
    if not directory.is_dir():
        return []
    return sorted(
        (p for p in directory.glob("*.md") if p.is_file()),
        key=lambda p: p.name,
    )


def read_document(
    path: Path,
    claude_dir: Path,
    result: ScanResult,
) -> Document | None:
    """Read and parse one definition file.

    Failures are recorded on ``result`` and logged; the caller skips the
    file and moves on.
    """
    relative_path = relative_to_project(path, claude_dir)
    try:
        content = path.read_text(encoding="utf-8")
        header = parse_frontmatter(content)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        message = f"Failed to parse: {e}"
        logger.warning(f"Failed to parse {relative_path}: {e}")
        result.warn(relative_path, message)
        return None

    return Document(
        path=path,
        relative_path=relative_path,
        content=content,
        header=header,
    )
