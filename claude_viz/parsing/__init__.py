"""
Parsing - front matter, body and section helpers for definition files.
"""

from claude_viz.parsing.frontmatter import (
    extract_body,
    parse_frontmatter,
    parse_list_field,
    split_frontmatter,
)
from claude_viz.parsing.sections import extract_triggers, truncate_summary

__all__ = [
    "extract_body",
    "parse_frontmatter",
    "parse_list_field",
    "split_frontmatter",
    "extract_triggers",
    "truncate_summary",
]
