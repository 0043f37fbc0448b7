"""Tests for the Django template filters."""

from __future__ import annotations

from django.template import Context, Template


def _render(source: str, **context) -> str:
    return Template("{% load markdown_tags %}" + source).render(Context(context))


class TestMarkdownFilter:
    def test_renders_markdown_unescaped(self) -> None:
        out = _render("{{ text|markdown }}", text="**hi**")
        assert out == "<p><strong>hi</strong></p>\n"

    def test_sanitizes(self) -> None:
        out = _render("{{ text|markdown }}", text="<script>alert(1)</script>ok")

        assert "<script" not in out
        assert "alert(1)" not in out

    def test_alerts(self) -> None:
        out = _render("{{ text|markdown }}", text="> [!TIP] Remember to save")
        assert "markdown-alert-tip" in out

    def test_missing_value(self) -> None:
        assert _render("{{ missing|markdown }}") == ""


class TestStatsFilters:
    def test_word_count(self) -> None:
        assert _render("{{ text|word_count }}", text="one two three") == "3"

    def test_reading_time(self) -> None:
        assert _render("{{ text|reading_time }}", text="word " * 450) == "3"
