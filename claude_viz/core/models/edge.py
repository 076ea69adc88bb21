"""
Edge Model for claude-viz.

Directed dependency between two entities.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EdgeType(str, Enum):
    """Kinds of dependency between entities."""
    USES = "uses"      # agent -> skill
    CALLS = "calls"    # agent -> subagent


class Edge(BaseModel):
    """Graph edge ``source -> target``.

    Attributes:
        source: Originating entity ID
        target: Referenced entity ID
        type: Dependency kind
    """

    source: str = Field(description="Source entity ID")
    target: str = Field(description="Target entity ID")
    type: EdgeType = Field(description="Dependency kind")

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> str:
        """Deduplication key; ignores the edge type."""
        return edge_key(self.source, self.target)

    def __str__(self) -> str:
        return f"Edge({self.source} --[{self.type.value}]--> {self.target})"


def edge_key(source: str, target: str) -> str:
    return f"{source}->{target}"
