"""
Entity Models for claude-viz.

Agents and skills discovered under a project's ``.claude`` directory.
Both share a common base (id, name, description, source path) and are
discriminated by ``kind`` so that heterogeneous node lists round-trip
through JSON without losing their concrete type.

Commands are skills with ``subtype="command"``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class EntityKind(str, Enum):
    """Node classification in the output graph."""
    AGENT = "agent"
    SKILL = "skill"


class SkillSubtype(str, Enum):
    COMMAND = "command"


def make_entity_id(kind: EntityKind, slug: str) -> str:
    """Build a namespaced id such as ``agent:reviewer``."""
    return f"{kind.value}:{slug}"


def entity_slug(entity_id: str) -> str:
    """Strip the kind prefix from an entity id."""
    _, _, slug = entity_id.partition(":")
    return slug


# ============================================================================
# Entity Models
# ============================================================================


class BaseEntity(BaseModel):
    """Fields shared by every node.

    Attributes:
        id: Namespaced identifier, ``<kind>:<slug>``
        name: Display name, from the header or the slug
        description: Header ``description`` field
        source_path: Path of the defining file, relative to the project root
    """

    id: str = Field(description="Namespaced entity ID")
    name: str = Field(description="Human-readable name")
    description: str = Field(
        default="",
        description="Header description field"
    )
    source_path: str = Field(
        alias="sourcePath",
        description="Defining file, relative to the project root"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def slug(self) -> str:
        return entity_slug(self.id)

    def to_node_dict(self) -> dict:
        """Flat JSON object for the ``nodes`` array."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AgentEntity(BaseEntity):
    """An agent definition from ``.claude/agents/<slug>.md``."""

    kind: Literal["agent"] = "agent"
    tools: list[str] = Field(
        default_factory=list,
        description="Capability names, in header order"
    )
    model: str = Field(
        default="",
        description="Model identifier, empty when unspecified"
    )
    subagent_refs: list[str] = Field(
        default_factory=list,
        alias="subagentRefs",
        description="Agents this agent may delegate to"
    )
    skill_refs: list[str] = Field(
        default_factory=list,
        alias="skillRefs",
        description="Skills this agent declares it uses"
    )
    summary: str = Field(
        default="",
        description="Body text, truncated"
    )

    def __str__(self) -> str:
        return f"Agent({self.name}, id={self.id})"


class SkillEntity(BaseEntity):
    """A skill directory or a slash command."""

    kind: Literal["skill"] = "skill"
    subtype: Optional[SkillSubtype] = Field(
        default=None,
        description="Set to 'command' for slash commands"
    )
    triggers: list[str] = Field(
        default_factory=list,
        description="Bullet items from the Triggers section"
    )
    has_scripts: bool = Field(default=False, alias="hasScripts")
    has_webapp: bool = Field(default=False, alias="hasWebapp")
    argument_hint: Optional[str] = Field(
        default=None,
        alias="argumentHint",
        description="Commands only: the argument-hint header field"
    )

    @property
    def is_command(self) -> bool:
        return self.subtype == SkillSubtype.COMMAND

    def __str__(self) -> str:
        label = "Command" if self.is_command else "Skill"
        return f"{label}({self.name}, id={self.id})"


Entity = Annotated[Union[AgentEntity, SkillEntity], Field(discriminator="kind")]
