"""
Skill scanner.

Every ``.claude/skills/<slug>/`` directory holding a ``SKILL.md`` is one
skill. Sibling ``scripts/`` and ``webapp/`` directories are flagged on
the record.
"""

from __future__ import annotations

from pathlib import Path

from claude_viz.core.diagnostics import ScanResult
from claude_viz.core.models.entity import EntityKind, SkillEntity, make_entity_id
from claude_viz.parsing.sections import extract_triggers
from claude_viz.scanners.base import Document, read_document, relative_to_project
from claude_viz.utils.logging import get_logger

logger = get_logger("scanners.skills")

SKILLS_DIRNAME = "skills"
SKILL_FILENAME = "SKILL.md"


def build_skill(document: Document, skill_dir: Path) -> SkillEntity:
    slug = skill_dir.name
    return SkillEntity(
        id=make_entity_id(EntityKind.SKILL, slug),
        name=document.scalar("name", slug),
        description=document.scalar("description"),
        source_path=document.relative_path,
        triggers=extract_triggers(document.body),
        has_scripts=(skill_dir / "scripts").is_dir(),
        has_webapp=(skill_dir / "webapp").is_dir(),
    )


def scan_skills(claude_dir: str | Path) -> ScanResult[SkillEntity]:
    """Scan ``<claude_dir>/skills`` for skill directories.

    Directories without ``SKILL.md`` are skipped with a diagnostic.
    """
    claude_dir = Path(claude_dir)
    skills_dir = claude_dir / SKILLS_DIRNAME
    result: ScanResult[SkillEntity] = ScanResult()

    if not skills_dir.is_dir():
        return result

    for skill_dir in sorted(skills_dir.iterdir(), key=lambda p: p.name):
        if not skill_dir.is_dir():
            continue

        skill_file = skill_dir / SKILL_FILENAME
        if not skill_file.is_file():
            relative_path = relative_to_project(skill_dir, claude_dir)
            logger.warning(f"Skipping {relative_path}: {SKILL_FILENAME} is missing")
            result.warn(relative_path, f"{SKILL_FILENAME} is missing")
            continue

        document = read_document(skill_file, claude_dir, result)
        if document is None:
            continue
        result.entities.append(build_skill(document, skill_dir))

    logger.debug(f"Found {len(result.entities)} skills")
    return result
