"""Markup helpers for email bodies.

``sanitize_post_html`` applies the restricted "post content" policy used for
anything embedded in an HTML email. ``strip_all_markup`` and
``escape_for_text`` turn markup into display-safe plain text.
"""

from __future__ import annotations

import re
from typing import Optional

import bleach
from bleach.css_sanitizer import CSSSanitizer
from bs4 import BeautifulSoup

# Tags whose content is removed entirely (not just the tag itself)
_SKIP_TAGS = ("script", "style")

_SKIP_ELEMENT_RE = re.compile(
    r"<(script|style)\b[^>]*>.*?</\1\s*>",
    flags=re.IGNORECASE | re.DOTALL,
)

_GLOBAL_ATTRIBUTES = ["class", "id", "style", "title", "dir", "lang", "align"]

POST_ALLOWED_TAGS = frozenset(
    {
        "a",
        "abbr",
        "address",
        "b",
        "blockquote",
        "br",
        "caption",
        "cite",
        "code",
        "del",
        "div",
        "em",
        "figcaption",
        "figure",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "i",
        "img",
        "ins",
        "li",
        "ol",
        "p",
        "pre",
        "s",
        "small",
        "span",
        "strike",
        "strong",
        "sub",
        "sup",
        "table",
        "tbody",
        "td",
        "tfoot",
        "th",
        "thead",
        "tr",
        "u",
        "ul",
    }
)

POST_ALLOWED_ATTRIBUTES = {
    "*": _GLOBAL_ATTRIBUTES,
    "a": _GLOBAL_ATTRIBUTES + ["href", "rel", "target", "name"],
    "img": _GLOBAL_ATTRIBUTES + ["src", "alt", "width", "height"],
    "table": _GLOBAL_ATTRIBUTES + ["border", "cellpadding", "cellspacing", "width"],
    "td": _GLOBAL_ATTRIBUTES + ["colspan", "rowspan", "width", "valign"],
    "th": _GLOBAL_ATTRIBUTES + ["colspan", "rowspan", "scope", "width", "valign"],
}

POST_ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

POST_ALLOWED_CSS_PROPERTIES = frozenset(
    {
        "background-color",
        "border",
        "border-bottom",
        "border-collapse",
        "border-left",
        "border-radius",
        "border-right",
        "border-top",
        "color",
        "display",
        "font-family",
        "font-size",
        "font-style",
        "font-weight",
        "height",
        "line-height",
        "margin",
        "margin-bottom",
        "margin-left",
        "margin-right",
        "margin-top",
        "max-width",
        "padding",
        "padding-bottom",
        "padding-left",
        "padding-right",
        "padding-top",
        "text-align",
        "text-decoration",
        "vertical-align",
        "width",
    }
)

_CSS_SANITIZER = CSSSanitizer(allowed_css_properties=POST_ALLOWED_CSS_PROPERTIES)


def sanitize_post_html(html: Optional[str]) -> str:
    """Filter HTML down to the post content allow list.

    Script and style elements are dropped together with their content;
    other disallowed tags are stripped but their text is kept. Event
    handler attributes and non-http(s)/mailto URLs never survive.

    Sanitizing already sanitized output returns it unchanged.

    Example:
        >>> sanitize_post_html('<p onclick="x()">Hi<script>alert(1)</script></p>')
        '<p>Hi</p>'
    """
    if not html:
        return ""

    without_scripts = _SKIP_ELEMENT_RE.sub("", html)
    return bleach.clean(
        without_scripts,
        tags=POST_ALLOWED_TAGS,
        attributes=POST_ALLOWED_ATTRIBUTES,
        protocols=POST_ALLOWED_PROTOCOLS,
        css_sanitizer=_CSS_SANITIZER,
        strip=True,
        strip_comments=True,
    )


def strip_all_markup(html: Optional[str]) -> str:
    """Remove every tag, decode entities and trim the result.

    Script and style elements are removed with their content.
    """
    if not html:
        return ""

    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_SKIP_TAGS):
        tag.decompose()

    return soup.get_text().strip()


def escape_for_text(text: Optional[str]) -> str:
    """Escape the characters that would read as markup in a text body."""
    if not text:
        return ""
    return text.replace("<", "&lt;").replace(">", "&gt;")
