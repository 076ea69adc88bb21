"""
Relationship Resolver.

Infers edges between agents and skills in two passes:

1. Declared references: the ``subagents`` and ``skills`` header fields of
   each agent, matched case-insensitively against entity names and slugs.
2. Content references: any skill whose lower-cased name or slug occurs
   anywhere in the agent's file.

The content pass is plain substring containment. A skill called "test"
matches an agent that mentions "testing"; that imprecision is accepted.
Unresolved declared references are dropped without a diagnostic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from claude_viz.core.models.edge import Edge, EdgeType, edge_key
from claude_viz.core.models.entity import AgentEntity, BaseEntity, SkillEntity
from claude_viz.utils.logging import get_logger

logger = get_logger("graph.resolver")


def build_lookup(entities: Iterable[BaseEntity]) -> dict[str, str]:
    """Map lower-cased name and slug to entity id.

    Later entities overwrite earlier ones on key collisions.
    """
    lookup: dict[str, str] = {}
    for entity in entities:
        lookup[entity.name.lower()] = entity.id
        lookup[entity.slug.lower()] = entity.id
    return lookup


class EdgeSet:
    """Ordered edge list that keeps the first edge per source/target pair."""

    def __init__(self):
        self._edges: list[Edge] = []
        self._seen: set[str] = set()

    def add(self, source: str, target: str, edge_type: EdgeType) -> bool:
        """Add an edge unless the pair is already present.

        Returns:
            True if the edge was added
        """
        key = edge_key(source, target)
        if key in self._seen:
            return False
        self._seen.add(key)
        self._edges.append(Edge(source=source, target=target, type=edge_type))
        return True

    def __len__(self) -> int:
        return len(self._edges)

    def __contains__(self, key: str) -> bool:
        return key in self._seen

    def to_list(self) -> list[Edge]:
        return list(self._edges)


class RelationshipResolver:
    """Computes the deduplicated edge list for a scanned project.

    Usage:
        resolver = RelationshipResolver(project_root)
        edges = resolver.resolve(agents, skills)
    """

    def __init__(self, project_root: str | Path):
        """
        Args:
            project_root: Directory that ``source_path`` values are relative to
        """
        self.project_root = Path(project_root)

    def resolve(
        self,
        agents: Sequence[AgentEntity],
        skills: Sequence[SkillEntity],
    ) -> list[Edge]:
        edges = EdgeSet()
        self._resolve_declared(agents, skills, edges)
        declared = len(edges)
        self._resolve_content(agents, skills, edges)
        logger.debug(
            f"Resolved {len(edges)} edges "
            f"({declared} declared, {len(edges) - declared} from content)"
        )
        return edges.to_list()

    def _resolve_declared(
        self,
        agents: Sequence[AgentEntity],
        skills: Sequence[SkillEntity],
        edges: EdgeSet,
    ) -> None:
        agent_lookup = build_lookup(agents)
        skill_lookup = build_lookup(skills)

        for agent in agents:
            for ref in agent.subagent_refs:
                target = agent_lookup.get(ref.strip().lower())
                if target:
                    edges.add(agent.id, target, EdgeType.CALLS)

            for ref in agent.skill_refs:
                target = skill_lookup.get(ref.strip().lower())
                if target:
                    edges.add(agent.id, target, EdgeType.USES)

    def _resolve_content(
        self,
        agents: Sequence[AgentEntity],
        skills: Sequence[SkillEntity],
        edges: EdgeSet,
    ) -> None:
        for agent in agents:
            content = self._read_lowered(agent)
            if content is None:
                continue

            for skill in skills:
                if skill.name.lower() in content or skill.slug.lower() in content:
                    edges.add(agent.id, skill.id, EdgeType.USES)

    def _read_lowered(self, agent: AgentEntity) -> str | None:
        path = self.project_root / agent.source_path
        try:
            return path.read_text(encoding="utf-8").lower()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Skipping content references for {agent.id}: {e}")
            return None


def resolve_relationships(
    agents: Sequence[AgentEntity],
    skills: Sequence[SkillEntity],
    project_root: str | Path,
) -> list[Edge]:
    """Convenience wrapper around RelationshipResolver."""
    return RelationshipResolver(project_root).resolve(agents, skills)
