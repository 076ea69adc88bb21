"""Tests for trigger extraction and summary truncation."""

import unittest

from claude_viz.parsing.sections import (
    ELLIPSIS,
    SUMMARY_MAX_CHARS,
    extract_triggers,
    truncate_summary,
)


class ExtractTriggersTest(unittest.TestCase):
    """Test extract_triggers."""

    def test_keeps_first_five_in_order(self) -> None:
        items = "\n".join(f"- t{i}" for i in range(1, 9))
        body = f"Intro\n\n## Triggers\n{items}\n"
        self.assertEqual(extract_triggers(body), ["t1", "t2", "t3", "t4", "t5"])

    def test_section_ends_at_next_heading(self) -> None:
        body = (
            "## Trigger\n"
            "- when tests fail\n"
            "Some prose in between\n"
            "* when CI is red\n"
            "\n"
            "## Usage\n"
            "- not a trigger\n"
        )
        self.assertEqual(
            extract_triggers(body),
            ["when tests fail", "when CI is red"],
        )

    def test_empty_section_does_not_borrow_next_section(self) -> None:
        body = "## Triggers\n## Usage\n- not a trigger\n- also not\n"
        self.assertEqual(extract_triggers(body), [])

    def test_section_ends_at_deeper_heading(self) -> None:
        body = "## Triggers\n- real\n### Examples\n- example bullet\n"
        self.assertEqual(extract_triggers(body), ["real"])

    def test_heading_is_case_insensitive_and_deeper_levels_match(self) -> None:
        body = "### TRIGGERS\n- one\n- two\n"
        self.assertEqual(extract_triggers(body), ["one", "two"])

    def test_korean_heading(self) -> None:
        body = "## 사용 시점\n- 테스트 작성 시\n- 리뷰 요청 시\n"
        self.assertEqual(extract_triggers(body), ["테스트 작성 시", "리뷰 요청 시"])

    def test_bold_text_is_not_a_bullet(self) -> None:
        body = "## Triggers\n**Note** read first\n- real item\n"
        self.assertEqual(extract_triggers(body), ["real item"])

    def test_no_section_returns_empty_list(self) -> None:
        self.assertEqual(extract_triggers("## Usage\n- item\n"), [])
        self.assertEqual(extract_triggers(""), [])

    def test_custom_limit(self) -> None:
        body = "## Triggers\n- a\n- b\n- c\n"
        self.assertEqual(extract_triggers(body, limit=2), ["a", "b"])


class TruncateSummaryTest(unittest.TestCase):
    """Test truncate_summary."""

    def test_long_body_is_cut_and_marked(self) -> None:
        body = "x" * 600
        summary = truncate_summary(body)
        self.assertEqual(len(summary), SUMMARY_MAX_CHARS + len(ELLIPSIS))
        self.assertEqual(len(summary), 503)
        self.assertTrue(summary.endswith("..."))
        self.assertEqual(summary[:500], body[:500])

    def test_short_body_is_unchanged(self) -> None:
        body = "y" * 400
        self.assertEqual(truncate_summary(body), body)

    def test_exact_limit_is_unchanged(self) -> None:
        body = "z" * SUMMARY_MAX_CHARS
        self.assertEqual(truncate_summary(body), body)


if __name__ == "__main__":
    unittest.main()
