# editor/markdown/config.py

# Typographic quotes used by markdown-it's smartquotes rule: double open/close,
# then single open/close.
SMART_QUOTES = "“”‘’"


def get_markdown_it_config():
    """
    Configuration for markdown-it-py rendering.

    The "js-default" preset matches markdown-it's own default rule set
    (tables and strikethrough enabled, linkify/typographer rules available),
    which the plain "commonmark" preset of markdown-it-py does not.

    The highlight hook is attached by the renderer; see highlighting.py.
    """
    return {
        "preset": "js-default",
        "options": {
            # Raw HTML is passed through; the sanitizer postprocessor deals with it
            "html": True,
            # Use '/' to close single tags (<br />)
            "xhtmlOut": False,
            # Convert '\n' in paragraphs into <br>
            "breaks": True,
            # CSS language prefix for fenced blocks
            "langPrefix": "hljs language-",
            # Autoconvert URL-like text to links (needs linkify-it-py)
            "linkify": True,
            # Quotes beautification and (c), ..., -- replacements
            "typographer": True,
            "quotes": SMART_QUOTES,
        },
    }
