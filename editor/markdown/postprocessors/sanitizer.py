# editor/markdown/postprocessors/sanitizer.py
"""
Sanitize rendered HTML against a fixed allow-list using bleach.

Two passes:

1. BeautifulSoup removes elements that can run script or hide markup
   (script, style, template, svg, ...) together with everything inside
   them. bleach on its own would keep their text content.
2. bleach strips every remaining tag, attribute and URL scheme outside
   the policy. ``style`` is checked by name only; its value is kept.

The policy is built once per process and never derived from input.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

import bleach
from bleach.css_sanitizer import CSSSanitizer
from bs4 import BeautifulSoup, NavigableString

logger = logging.getLogger(__name__)

# Markup the renderer itself produces
RENDERER_TAGS = {
    # text
    "p",
    "br",
    "hr",
    "div",  # alert containers
    "span",  # highlighted code tokens
    "s",  # ~~strikethrough~~
    # headings
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    # lists
    "ul",
    "ol",
    "li",
    "blockquote",
    # code
    "pre",
    "code",
    # tables
    "table",
    "thead",
    "tbody",
    "tr",
    "th",
    "td",
    # media
    "img",
    "a",
}

# Inline HTML authors commonly write by hand
AUTHORED_TAGS = {
    "del",
    "ins",
    "mark",
    "small",
    "cite",
    "q",
    "dfn",
    "samp",
    "var",
    "dl",
    "dt",
    "dd",
    "figure",
    "figcaption",
    "caption",
    "tfoot",
    "colgroup",
    "col",
    "center",
}

# Additions required by the editor's block templates
EXTRA_TAGS = {
    "iframe",
    "details",
    "summary",
    "kbd",
    "sub",
    "sup",
    "u",
}

# Allowed on every element
GLOBAL_ATTRIBUTES = (
    "id",
    "title",
    # additions required by the editor's block templates
    "allow",
    "allowfullscreen",
    "frameborder",
    "scrolling",
    "class",
    "open",
    "align",
    "style",
)

TAG_ATTRIBUTES = {
    "a": ("href", "title"),
    "img": ("src", "alt", "title", "width", "height"),
    "iframe": ("src", "width", "height", "title"),
    "ol": ("start", "type"),
    "th": ("colspan", "rowspan"),
    "td": ("colspan", "rowspan"),
    "col": ("span",),
    "colgroup": ("span",),
    "q": ("cite",),
    "blockquote": ("cite",),
}

ALLOWED_PROTOCOLS = ("http", "https", "mailto", "tel")

# Removed along with their content before bleach runs
DROP_WITH_CONTENT = (
    "script",
    "style",
    "template",
    "noscript",
    "noembed",
    "noframes",
    "object",
    "embed",
    "applet",
    "frameset",
    "frame",
    "svg",
    "math",
    "xmp",
    "plaintext",
    "title",
    "head",
    "textarea",
    "select",
    "option",
)


class SanitizationError(Exception):
    """The sanitizer could not produce output. The raw HTML must not be used."""


@dataclass(frozen=True)
class SanitizerPolicy:
    tags: frozenset
    attributes: MappingProxyType
    protocols: frozenset
    drop_with_content: frozenset

    def bleach_attributes(self) -> dict:
        # bleach only accepts a real dict (or a list/callable)
        return {tag: list(names) for tag, names in self.attributes.items()}


@lru_cache(maxsize=1)
def get_sanitizer_policy() -> SanitizerPolicy:
    """Build the process-wide sanitizer policy."""
    tags = set(bleach.sanitizer.ALLOWED_TAGS) | RENDERER_TAGS | AUTHORED_TAGS | EXTRA_TAGS

    attributes = {"*": GLOBAL_ATTRIBUTES}
    attributes.update(TAG_ATTRIBUTES)

    return SanitizerPolicy(
        tags=frozenset(tags),
        attributes=MappingProxyType(attributes),
        protocols=frozenset(ALLOWED_PROTOCOLS),
        drop_with_content=frozenset(DROP_WITH_CONTENT),
    )


class PassthroughCSSSanitizer(CSSSanitizer):
    """Keep ``style`` values exactly as written.

    ``style`` is allowed by attribute name only. bleach drops the attribute
    unless a CSS sanitizer is configured, so this one accepts everything.
    """

    def sanitize_css(self, style):
        return style


@lru_cache(maxsize=1)
def _get_css_sanitizer() -> CSSSanitizer:
    return PassthroughCSSSanitizer()


def drop_dangerous_elements(html: str, policy: SanitizerPolicy) -> str:
    """
    Remove script-capable elements and their content.

    Also normalizes two spots where html5lib (used by bleach) would read
    the markup differently on a second pass:

    - iframe content is raw text to html5lib and never displayed, so it is
      emptied;
    - html5lib swallows one newline right after <pre>, so a <pre> that
      starts with a newline gets an extra one to keep its text unchanged.
    """
    soup = BeautifulSoup(html, "html.parser")

    dropped = 0
    for element in soup.find_all(list(policy.drop_with_content)):
        # Nested matches go away with their ancestor
        if element.decomposed:
            continue
        element.decompose()
        dropped += 1

    if dropped:
        logger.debug(f"Dropped {dropped} script-capable element(s)")

    for iframe in soup.find_all("iframe"):
        iframe.clear()

    for pre in soup.find_all("pre"):
        first = next(iter(pre.contents), None)
        if type(first) is NavigableString and first.startswith("\n"):
            first.replace_with(NavigableString("\n" + first))

    return str(soup)


def clean_html(html: str) -> str:
    """
    Sanitize ``html`` against the allow-list.

    Raises:
        SanitizationError: if either pass fails
    """
    if not html:
        return ""

    policy = get_sanitizer_policy()

    try:
        html = drop_dangerous_elements(html, policy)
        return bleach.clean(
            html,
            tags=policy.tags,
            attributes=policy.bleach_attributes(),
            protocols=policy.protocols,
            strip=True,  # Drop disallowed tags instead of escaping them
            strip_comments=True,
            css_sanitizer=_get_css_sanitizer(),
        )
    except Exception as e:
        raise SanitizationError(f"HTML sanitization failed: {e}") from e


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.
    This is the LAST post-processor; its output goes straight to the caller.
    """
    return clean_html(html)
