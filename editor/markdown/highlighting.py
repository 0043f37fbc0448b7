"""
Syntax highlighting for fenced code blocks.

markdown-it calls ``render_fence`` for every fence. The block always comes
back wrapped as::

    <pre class="hljs"><code>...</code></pre>

with Pygments token spans inside when the language is known and highlighting
succeeded, or the HTML-escaped source otherwise. Highlighting problems are
never raised to the renderer: ``highlight_code`` reports them through a
``HighlightResult`` and the fence falls back to plain text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from markdown_it.common.utils import escapeHtml
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_all_lexers, get_lexer_by_name

logger = logging.getLogger(__name__)

CODE_BLOCK_TEMPLATE = '<pre class="hljs"><code>{}</code></pre>'


@dataclass(frozen=True)
class HighlightResult:
    ok: bool
    markup: str = ""

    @classmethod
    def success(cls, markup: str) -> HighlightResult:
        return cls(ok=True, markup=markup)

    @classmethod
    def failure(cls) -> HighlightResult:
        return cls(ok=False)


@lru_cache(maxsize=1)
def get_language_table() -> dict[str, str]:
    """Map every Pygments lexer alias (lower-cased) to its lexer name."""
    table = {}
    for name, aliases, _filenames, _mimetypes in get_all_lexers():
        for alias in aliases:
            table.setdefault(alias.lower(), name)
    return table


def is_known_language(lang: str | None) -> bool:
    return bool(lang) and lang.lower() in get_language_table()


@lru_cache(maxsize=1)
def _get_formatter() -> HtmlFormatter:
    # nowrap: the fence template supplies <pre><code>
    return HtmlFormatter(nowrap=True)


def highlight_code(code: str, lang: str | None) -> HighlightResult:
    """
    Highlight ``code`` as ``lang``.

    Returns a failure result, without touching Pygments, for an empty or
    unknown language, and a failure result when the lexer or formatter
    raises.
    """
    if not is_known_language(lang):
        return HighlightResult.failure()

    try:
        lexer = get_lexer_by_name(lang.lower(), stripnl=False)
        markup = highlight(code, lexer, _get_formatter())
    except Exception as e:
        logger.debug(f"Highlighting failed for language {lang!r}: {e}")
        return HighlightResult.failure()

    return HighlightResult.success(markup)


def render_fence(code: str, lang: str | None, attrs=None) -> str:
    """
    markdown-it ``highlight`` hook.

    Args:
        code: Fence content
        lang: First word of the fence info string (may be empty)
        attrs: Remaining info string attributes (unused)

    Returns:
        The complete ``<pre>`` element, so markdown-it does not wrap it again
    """
    result = highlight_code(code, lang)
    if result.ok:
        return CODE_BLOCK_TEMPLATE.format(result.markup)
    return CODE_BLOCK_TEMPLATE.format(escapeHtml(code))
