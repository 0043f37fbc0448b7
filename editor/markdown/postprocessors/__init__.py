# editor/markdown/postprocessors/__init__.py

from .sanitizer import SanitizationError, sanitize_html

POSTPROCESSORS = [
    sanitize_html,  # Must stay last: nothing may touch the HTML after sanitizing
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html


__all__ = ("POSTPROCESSORS", "SanitizationError", "apply_postprocessors", "sanitize_html")
