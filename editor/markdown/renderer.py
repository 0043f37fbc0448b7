# editor/markdown/renderer.py

import asyncio
import logging
from functools import lru_cache

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml

from .config import get_markdown_it_config
from .highlighting import get_language_table, render_fence
from .postprocessors import SanitizationError, apply_postprocessors
from .postprocessors.sanitizer import get_sanitizer_policy
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)

# Returned when sanitizing fails and the caller has no last-known-good HTML
RENDER_ERROR_PLACEHOLDER = ""


@lru_cache(maxsize=1)
def get_markdown_parser() -> MarkdownIt:
    """Shared markdown-it instance. Built once, never reconfigured."""
    config = get_markdown_it_config()
    options = dict(config["options"], highlight=render_fence)
    return MarkdownIt(config["preset"], options)


def warm_pipeline():
    """Build the cached renderer, language table and sanitizer policy now."""
    get_markdown_parser()
    get_language_table()
    get_sanitizer_policy()


def markdown_to_html(text: str) -> str:
    """
    Convert markdown to raw (unsanitized) HTML.

    Never raises: if markdown-it fails on some input the source is shown as
    escaped text instead.
    """
    try:
        return get_markdown_parser().render(text)
    except Exception as e:
        logger.warning(f"Markdown rendering failed, showing source as text: {e}")
        return f"<p>{escapeHtml(text)}</p>\n"


def render_markdown(text, context=None):
    """
    Main rendering function: preprocess, convert, sanitize.

    Args:
        text: Raw markdown text (None is treated as empty)
        context: Optional dict shared with the processors. If it holds
            "fallback_html" (the last HTML shown), that is returned when
            sanitizing fails.

    Returns:
        Sanitized HTML
    """
    context = context if context is not None else {}

    if not text:
        return ""

    # Pre-processing: Before markdown conversion
    text = apply_preprocessors(text, context)

    html = markdown_to_html(text)

    # Post-processing: After markdown conversion
    try:
        html = apply_postprocessors(html, context)
    except SanitizationError:
        logger.error("Sanitization failed, discarding rendered HTML", exc_info=True)
        return context.get("fallback_html", RENDER_ERROR_PLACEHOLDER)

    return html


async def render_markdown_async(text, context=None):
    """render_markdown in a worker thread, as a single awaitable step."""
    return await asyncio.to_thread(render_markdown, text, context)
