"""
Graph Model for claude-viz.

The serialized artifact consumed by the visualizer: nodes, edges and
scan metadata.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from claude_viz.core.models.edge import Edge
from claude_viz.core.models.entity import AgentEntity, Entity, SkillEntity


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with millisecond precision and ``Z``."""
    return (
        datetime.now(UTC)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


class GraphMetadata(BaseModel):
    """Provenance and per-kind counts for a scan."""

    generated_at: str = Field(
        default_factory=utc_timestamp,
        alias="generatedAt",
    )
    project_path: str = Field(alias="projectPath")
    project_name: str = Field(alias="projectName")
    agent_count: int = Field(default=0, alias="agentCount")
    skill_count: int = Field(
        default=0,
        alias="skillCount",
        description="Skills excluding commands"
    )
    command_count: int = Field(default=0, alias="commandCount")
    edge_count: int = Field(default=0, alias="edgeCount")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class GraphData(BaseModel):
    """Complete graph artifact.

    Fully derived from the ``.claude`` tree; rebuilt on every scan.
    """

    nodes: list[Entity] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)
    metadata: GraphMetadata

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def agents(self) -> list[AgentEntity]:
        return [n for n in self.nodes if isinstance(n, AgentEntity)]

    @property
    def skills(self) -> list[SkillEntity]:
        return [n for n in self.nodes if isinstance(n, SkillEntity)]

    def get_node(self, entity_id: str) -> AgentEntity | SkillEntity | None:
        for node in self.nodes:
            if node.id == entity_id:
                return node
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON contract shape."""
        return {
            "nodes": [node.to_node_dict() for node in self.nodes],
            "edges": [edge.model_dump(mode="json") for edge in self.edges],
            "metadata": self.metadata.model_dump(mode="json", by_alias=True),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "GraphData":
        return cls.model_validate_json(text)

    @classmethod
    def load(cls, path: str | Path) -> "GraphData":
        """Read a previously written artifact."""
        return cls.from_json(Path(path).read_text(encoding="utf-8"))
