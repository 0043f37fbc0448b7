"""Tests for the blockquote alert preprocessor."""

from __future__ import annotations

import pytest

from editor.markdown.preprocessors import apply_preprocessors
from editor.markdown.preprocessors.alerts import (
    Alert,
    alert_style,
    find_alerts,
    rewrite_alerts,
)


class TestAlertStyle:
    @pytest.mark.parametrize(
        ("kind", "style"),
        [
            ("NOTE", "note"),
            ("TIP", "tip"),
            ("WARNING", "warning"),
            ("CAUTION", "caution"),
            ("IMPORTANT", "warning"),
            ("Important", "warning"),
        ],
    )
    def test_style_for_kind(self, kind: str, style: str) -> None:
        assert alert_style(kind) == style


class TestFindAlerts:
    def test_finds_marker_lines_in_order(self) -> None:
        text = "> [!NOTE] first\n\nplain\n\n> [!caution] second"
        assert find_alerts(text) == [Alert("NOTE", "first"), Alert("caution", "second")]

    def test_body_is_optional(self) -> None:
        assert find_alerts("> [!TIP]") == [Alert("TIP", "")]

    def test_unknown_kind_is_ignored(self) -> None:
        assert find_alerts("> [!DANGER] nope") == []

    def test_requires_space_after_quote_marker(self) -> None:
        assert find_alerts(">[!NOTE] tight") == []

    def test_marker_must_start_the_line(self) -> None:
        assert find_alerts("text > [!NOTE] inline") == []
        assert find_alerts("  > [!NOTE] indented") == []

    def test_does_not_match_across_lines(self) -> None:
        assert find_alerts(">\n[!NOTE] split") == []

    def test_empty_text(self) -> None:
        assert find_alerts("") == []


class TestRewriteAlerts:
    def test_tip_container(self) -> None:
        out = rewrite_alerts("> [!TIP] Remember to save", {})

        assert '<div class="markdown-alert markdown-alert-tip">' in out
        assert '<p class="markdown-alert-title">TIP</p>' in out
        assert "\nRemember to save\n" in out
        assert out.rstrip().endswith("</div>")

    def test_important_uses_warning_style(self) -> None:
        out = rewrite_alerts("> [!IMPORTANT] Check this", {})

        assert "markdown-alert-warning" in out
        assert "markdown-alert-important" not in out
        assert '<p class="markdown-alert-title">IMPORTANT</p>' in out

    def test_title_keeps_kind_as_written(self) -> None:
        out = rewrite_alerts("> [!note] lower", {})

        assert "markdown-alert-note" in out
        assert '<p class="markdown-alert-title">note</p>' in out

    def test_body_is_not_escaped(self) -> None:
        out = rewrite_alerts("> [!NOTE] a <b>bold</b> & **strong** claim", {})
        assert "a <b>bold</b> & **strong** claim" in out

    def test_only_marker_line_is_rewritten(self) -> None:
        text = "> [!NOTE] first line\n> second line"
        out = rewrite_alerts(text, {})

        assert out.endswith("</div>\n\n> second line")

    def test_surrounding_text_untouched(self) -> None:
        text = "# Heading\n\n> [!WARNING] careful\n\nAfter."
        out = rewrite_alerts(text, {})

        assert out.startswith("# Heading\n\n<div ")
        assert out.endswith("\n\nAfter.")

    def test_plain_blockquote_untouched(self) -> None:
        text = "> just a quote\n> [not an alert]"
        assert rewrite_alerts(text, {}) == text

    def test_second_pass_does_not_rematch(self) -> None:
        once = rewrite_alerts("> [!TIP] hi", {})
        assert rewrite_alerts(once, {}) == once

    def test_empty_text(self) -> None:
        assert rewrite_alerts("", {}) == ""

    def test_registered_in_preprocessors(self) -> None:
        out = apply_preprocessors("> [!CAUTION] hot", {})
        assert "markdown-alert-caution" in out
