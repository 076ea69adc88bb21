"""
Command scanner.

Every ``.claude/commands/*.md`` file is a slash command, recorded as a
skill with ``subtype="command"``.
"""

from __future__ import annotations

from pathlib import Path

from claude_viz.core.diagnostics import ScanResult
from claude_viz.core.models.entity import (
    EntityKind,
    SkillEntity,
    SkillSubtype,
    make_entity_id,
)
from claude_viz.scanners.base import Document, list_markdown_files, read_document
from claude_viz.utils.logging import get_logger

logger = get_logger("scanners.commands")

COMMANDS_DIRNAME = "commands"


def build_command(document: Document) -> SkillEntity:
    # Commands are invoked by file name, so the header name is not used
    slug = document.path.stem
    return SkillEntity(
        id=make_entity_id(EntityKind.SKILL, slug),
        subtype=SkillSubtype.COMMAND,
        name=slug,
        description=document.scalar("description"),
        source_path=document.relative_path,
        argument_hint=document.scalar("argument-hint"),
    )


def scan_commands(claude_dir: str | Path) -> ScanResult[SkillEntity]:
    """Scan ``<claude_dir>/commands`` for slash command definitions."""
    claude_dir = Path(claude_dir)
    result: ScanResult[SkillEntity] = ScanResult()

    for path in list_markdown_files(claude_dir / COMMANDS_DIRNAME):
        document = read_document(path, claude_dir, result)
        if document is None:
            continue
        result.entities.append(build_command(document))

    logger.debug(f"Found {len(result.entities)} commands")
    return result
