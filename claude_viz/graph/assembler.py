"""
Graph Assembler.

Runs the three scanners concurrently, folds commands into the skill
collection, resolves relationships and stamps metadata. Scanning must
finish completely before resolution starts, since the resolver needs
the full entity set.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from claude_viz.core.diagnostics import ScanDiagnostic
from claude_viz.core.exceptions import ProjectNotFoundError
from claude_viz.core.models.entity import SkillEntity
from claude_viz.core.models.graph import GraphData, GraphMetadata
from claude_viz.graph.resolver import RelationshipResolver
from claude_viz.scanners import scan_agents, scan_commands, scan_skills
from claude_viz.utils.logging import get_logger
from claude_viz.utils.project import CLAUDE_DIRNAME

logger = get_logger("graph.assembler")


@dataclass
class ProjectScan:
    """Outcome of one scan: the graph plus every recoverable problem."""

    graph: GraphData
    diagnostics: list[ScanDiagnostic] = field(default_factory=list)

    @property
    def metadata(self) -> GraphMetadata:
        return self.graph.metadata


def fold_commands(
    skills: list[SkillEntity],
    commands: list[SkillEntity],
    diagnostics: list[ScanDiagnostic],
) -> list[SkillEntity]:
    """Append commands to skills, dropping commands whose id is taken."""
    combined = list(skills)
    taken = {skill.id for skill in skills}
    for command in commands:
        if command.id in taken:
            message = f"Command id {command.id} collides with a skill; skipped"
            logger.warning(f"{command.source_path}: {message}")
            diagnostics.append(ScanDiagnostic(path=command.source_path, message=message))
            continue
        taken.add(command.id)
        combined.append(command)
    return combined


async def scan_project(project_path: str | Path) -> ProjectScan:
    """Scan a project and build its graph.

    Args:
        project_path: Project root containing ``.claude``

    Returns:
        ProjectScan with the graph and scan diagnostics

    Raises:
        ProjectNotFoundError: If the project has no ``.claude`` directory
    """
    project = Path(project_path).resolve()
    claude_dir = project / CLAUDE_DIRNAME

    if not claude_dir.is_dir():
        raise ProjectNotFoundError(project)

    logger.info(f"Scanning {claude_dir}")

    agent_result, skill_result, command_result = await asyncio.gather(
        asyncio.to_thread(scan_agents, claude_dir),
        asyncio.to_thread(scan_skills, claude_dir),
        asyncio.to_thread(scan_commands, claude_dir),
    )

    diagnostics = [
        *agent_result.diagnostics,
        *skill_result.diagnostics,
        *command_result.diagnostics,
    ]

    agents = agent_result.entities
    skills = skill_result.entities
    all_skills = fold_commands(skills, command_result.entities, diagnostics)
    command_count = len(all_skills) - len(skills)

    edges = RelationshipResolver(project).resolve(agents, all_skills)

    graph = GraphData(
        nodes=[*agents, *all_skills],
        edges=edges,
        metadata=GraphMetadata(
            project_path=str(project),
            project_name=project.name,
            agent_count=len(agents),
            skill_count=len(skills),
            command_count=command_count,
            edge_count=len(edges),
        ),
    )

    logger.info(
        f"Scanned {project.name}: {len(agents)} agents, {len(skills)} skills, "
        f"{command_count} commands, {len(edges)} edges"
    )
    if diagnostics:
        logger.info(f"{len(diagnostics)} file(s) skipped or degraded")

    return ProjectScan(graph=graph, diagnostics=diagnostics)


def scan_project_sync(project_path: str | Path) -> ProjectScan:
    """Blocking wrapper around scan_project."""
    return asyncio.run(scan_project(project_path))


def write_graph(graph: GraphData, output_path: str | Path) -> Path:
    """Write the graph JSON, creating parent directories as needed."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(graph.to_json(), encoding="utf-8")
    logger.info(f"Wrote graph data to {output_path}")
    return output_path


async def scan_project_to_file(
    project_path: str | Path,
    output_path: str | Path,
) -> GraphMetadata:
    """Scan a project and write the artifact; nothing is written on failure."""
    scan = await scan_project(project_path)
    write_graph(scan.graph, output_path)
    return scan.metadata
