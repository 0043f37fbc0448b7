# editor/markdown/preprocessors/__init__.py

from .alerts import alert_rewriter_default

PREPROCESSORS = [
    alert_rewriter_default,  # Rewrite "> [!KIND]" markers into alert containers
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
