"""
Core Models - entities, edges and the graph artifact.
"""

from claude_viz.core.models.entity import (
    AgentEntity,
    BaseEntity,
    Entity,
    EntityKind,
    SkillEntity,
    SkillSubtype,
)
from claude_viz.core.models.edge import Edge, EdgeType
from claude_viz.core.models.graph import GraphData, GraphMetadata

__all__ = [
    "AgentEntity",
    "BaseEntity",
    "Entity",
    "EntityKind",
    "SkillEntity",
    "SkillSubtype",
    "Edge",
    "EdgeType",
    "GraphData",
    "GraphMetadata",
]
