"""
Preprocessor that rewrites blockquote alert markers into alert containers.

Converts:
    > [!TIP] Remember to save

into:
    <div class="markdown-alert markdown-alert-tip">
    <p class="markdown-alert-title">TIP</p>

    Remember to save

    </div>

Supported kinds: NOTE, TIP, IMPORTANT, WARNING, CAUTION (any case).
IMPORTANT shares the warning style.

Only the marker line is rewritten. Further quoted lines of the same
blockquote stay as they are and render as a normal blockquote after the
container; merging them would need a block-level grammar rule in the
renderer rather than a line regex.
"""

import re
from typing import NamedTuple

ALERT_KINDS = ("NOTE", "TIP", "IMPORTANT", "WARNING", "CAUTION")

# Kinds whose CSS style differs from their lower-cased name
ALERT_STYLE_OVERRIDES = {
    "important": "warning",
}

# "[ \t]" instead of "\s" so a match never spans two lines
ALERT_PATTERN = re.compile(
    r"^>[ \t]+\[!(" + "|".join(ALERT_KINDS) + r")\][ \t]*(.*)$",
    re.IGNORECASE | re.MULTILINE,
)


class Alert(NamedTuple):
    kind: str
    body: str

    @property
    def style(self) -> str:
        return alert_style(self.kind)


def alert_style(kind: str) -> str:
    """Return the CSS style suffix for an alert kind (e.g. "tip")."""
    style = kind.lower()
    return ALERT_STYLE_OVERRIDES.get(style, style)


def find_alerts(text: str) -> list[Alert]:
    """List the alert markers in ``text`` in document order."""
    return [Alert(m.group(1), m.group(2)) for m in ALERT_PATTERN.finditer(text or "")]


def render_alert(alert: Alert) -> str:
    # Blank lines around the body end the raw HTML blocks, so the body is
    # parsed as markdown and the closing tag does not swallow the next line.
    return (
        f'<div class="markdown-alert markdown-alert-{alert.style}">\n'
        f'<p class="markdown-alert-title">{alert.kind}</p>\n'
        f"\n"
        f"{alert.body}\n"
        f"\n"
        f"</div>\n"
    )


def rewrite_alerts(text: str, context: dict) -> str:
    """
    Replace every alert marker line with alert container markup.

    The body text is copied as-is; escaping is left to the sanitizer.

    Args:
        text: Markdown text
        context: Context dictionary (unused but required for preprocessor signature)

    Returns:
        Markdown with alert markers replaced
    """
    if not text:
        return text

    def replace_alert(match):
        return render_alert(Alert(match.group(1), match.group(2)))

    return ALERT_PATTERN.sub(replace_alert, text)


def alert_rewriter_default(text: str, context: dict) -> str:
    """
    Default configuration for rewrite_alerts.

    Register this in PREPROCESSORS.
    """
    return rewrite_alerts(text, context)
