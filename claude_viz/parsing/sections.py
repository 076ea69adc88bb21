"""
Body helpers: trigger extraction and summary truncation.
"""

from __future__ import annotations

import re

SUMMARY_MAX_CHARS = 500
ELLIPSIS = "..."
MAX_TRIGGERS = 5

# "## Triggers", "### Trigger", "## 사용 시점" (Korean: "when to use")
_TRIGGER_SECTION_PATTERN = re.compile(
    r"^#{2,}[ \t]*(?:triggers?|사용\s*시점)[^\n]*\n(.*?)(?=^#{2,}|\Z)",
    re.IGNORECASE | re.DOTALL | re.MULTILINE,
)
_BULLET_PATTERN = re.compile(r"^(?:-\s*|[*+]\s+)")


def extract_triggers(body: str, limit: int = MAX_TRIGGERS) -> list[str]:
    """Collect bullet items under the first Triggers heading.

    The section runs until the next ``##`` heading line or the end of the body.
    Non-bullet lines inside it are ignored.
    """
    match = _TRIGGER_SECTION_PATTERN.search(body)
    if not match:
        return []

    triggers: list[str] = []
    for line in match.group(1).strip().splitlines():
        stripped = line.strip()
        if not _BULLET_PATTERN.match(stripped):
            continue
        item = _BULLET_PATTERN.sub("", stripped, count=1).strip()
        if item:
            triggers.append(item)
        if len(triggers) == limit:
            break
    return triggers


def truncate_summary(body: str, max_chars: int = SUMMARY_MAX_CHARS) -> str:
    """Cut ``body`` to ``max_chars`` and mark the cut with ``...``."""
    if len(body) > max_chars:
        return body[:max_chars] + ELLIPSIS
    return body
