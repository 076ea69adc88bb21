"""
Front matter parsing for agent, skill and command definitions.

Definitions start with a header block::

    ---
    name: Reviewer
    description: "Reviews pull requests"
    tools: Read, Grep
    skills:
      - testing
      - linting
    ---

This is deliberately not a YAML parser. Only ``key: value`` scalars and
``key:`` followed by ``- item`` lines are understood; anything else inside
the block is ignored rather than rejected, so a half-broken header still
yields whatever fields can be recovered.

Known quirk: a bare ``key:`` with no following items does not appear in
the result at all (it is not mapped to an empty list).
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

HeaderValue = str | list[str]

_HEADER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)
_LIST_ITEM_PATTERN = re.compile(r"^\s*-\s+(.+)$")
_KEY_VALUE_PATTERN = re.compile(r"^([\w-]+):\s*(.*)$")


class _State(Enum):
    AWAITING_KEY = "awaiting_key"
    ACCUMULATING_LIST = "accumulating_list"


def _unquote(value: str) -> str:
    """Strip one level of matching single or double quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def split_frontmatter(content: str) -> tuple[str | None, str]:
    """Split a document into (header text, body).

    Returns:
        The raw header text (None when there is no header block) and the
        remaining document after it, untrimmed.
    """
    match = _HEADER_PATTERN.match(content)
    if not match:
        return None, content
    return match.group(1), content[match.end():]


def parse_frontmatter(content: str) -> dict[str, HeaderValue]:
    """Parse the header block of ``content`` into a field mapping.

    Args:
        content: Raw document text

    Returns:
        Mapping of field name to a scalar string or an ordered list of
        strings. Empty if the document has no header block.
    """
    header, _ = split_frontmatter(content)
    if header is None:
        return {}

    result: dict[str, HeaderValue] = {}
    state = _State.AWAITING_KEY
    list_key: str | None = None
    items: list[str] = []

    def close_list() -> None:
        if list_key is not None and items:
            result[list_key] = list(items)

    for line in header.splitlines():
        if not line.strip():
            continue

        if state is _State.ACCUMULATING_LIST:
            item_match = _LIST_ITEM_PATTERN.match(line)
            if item_match:
                items.append(item_match.group(1).strip())
                continue

        kv_match = _KEY_VALUE_PATTERN.match(line)
        if not kv_match:
            continue

        if state is _State.ACCUMULATING_LIST:
            close_list()
            list_key, items = None, []
            state = _State.AWAITING_KEY

        key = kv_match.group(1)
        value = kv_match.group(2).strip()

        if value:
            result[key] = _unquote(value)
        else:
            list_key = key
            state = _State.ACCUMULATING_LIST

    if state is _State.ACCUMULATING_LIST:
        close_list()

    return result


def extract_body(content: str) -> str:
    """Return the document without its header block, trimmed."""
    _, body = split_frontmatter(content)
    return body.strip()


def parse_list_field(value: Any) -> list[str]:
    """Normalize a header field to a list of names.

    Accepts a comma-separated scalar or a list. Entries are trimmed and
    empty entries dropped; any other value yields an empty list.
    """
    if isinstance(value, list):
        candidates = [str(item) for item in value]
    elif isinstance(value, str):
        candidates = value.split(",")
    else:
        return []
    return [item.strip() for item in candidates if item.strip()]
