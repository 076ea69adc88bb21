"""
Agent scanner.

Every ``.claude/agents/*.md`` file is one agent.
"""

from __future__ import annotations

from pathlib import Path

from claude_viz.core.diagnostics import ScanResult
from claude_viz.core.models.entity import AgentEntity, EntityKind, make_entity_id
from claude_viz.parsing.frontmatter import parse_list_field
from claude_viz.parsing.sections import truncate_summary
from claude_viz.scanners.base import Document, list_markdown_files, read_document
from claude_viz.utils.logging import get_logger

logger = get_logger("scanners.agents")

AGENTS_DIRNAME = "agents"


def build_agent(document: Document) -> AgentEntity:
    """Assemble an agent record from a parsed document."""
    slug = document.path.stem
    header = document.header
    return AgentEntity(
        id=make_entity_id(EntityKind.AGENT, slug),
        name=document.scalar("name", slug),
        description=document.scalar("description"),
        source_path=document.relative_path,
        tools=parse_list_field(header.get("tools")),
        model=document.scalar("model"),
        subagent_refs=parse_list_field(header.get("subagents")),
        skill_refs=parse_list_field(header.get("skills")),
        summary=truncate_summary(document.body),
    )


def scan_agents(claude_dir: str | Path) -> ScanResult[AgentEntity]:
    """Scan ``<claude_dir>/agents`` for agent definitions.

    Args:
        claude_dir: The project's ``.claude`` directory

    Returns:
        Agents in file-name order plus diagnostics for skipped files
    """
    claude_dir = Path(claude_dir)
    result: ScanResult[AgentEntity] = ScanResult()

    for path in list_markdown_files(claude_dir / AGENTS_DIRNAME):
        document = read_document(path, claude_dir, result)
        if document is None:
            continue
        result.entities.append(build_agent(document))

    logger.debug(f"Found {len(result.entities)} agents")
    return result
