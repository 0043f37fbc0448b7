"""Markdown to sanitized HTML for the editor preview and export."""

from .renderer import render_markdown, render_markdown_async, warm_pipeline

# Short name used by the editing surface
render = render_markdown

__all__ = ("render", "render_markdown", "render_markdown_async", "warm_pipeline")
