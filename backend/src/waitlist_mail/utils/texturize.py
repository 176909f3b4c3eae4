"""Typographic normalization for email text.

Replaces straight quotes, double hyphens, ellipses and similar sequences with
their typographic forms. Markup is left alone: tag text (including attribute
values) is never touched, and nor is anything inside ``pre``, ``code``,
``kbd``, ``style``, ``script`` or ``tt`` elements.
"""

from __future__ import annotations

import re
from typing import Optional

NO_TEXTURIZE_TAGS = frozenset({"pre", "code", "kbd", "style", "script", "tt"})

_TOKEN_RE = re.compile(r"(<[^>]*>)")
_TAG_NAME_RE = re.compile(r"^<\s*(/?)\s*([a-zA-Z][a-zA-Z0-9]*)")

# Characters after which a quote opens rather than closes.
_OPENERS = r"(^|[\s(\[{\-\u2013\u2014])"

_STATIC_REPLACEMENTS = (
    ("---", "\u2014"),
    (" -- ", " \u2014 "),
    ("...", "\u2026"),
    ("``", "\u201c"),
    ("''", "\u201d"),
    (" (tm)", " \u2122"),
)

_DYNAMIC_REPLACEMENTS = (
    # en dash; punycode labels such as "xn--" are kept
    (re.compile(r"(?<!xn)--"), "\u2013"),
    (re.compile(r"(?<=\s)-(?=\s)"), "\u2013"),
    # abbreviated years: '99
    (re.compile(_OPENERS + r"'(\d\d)(?=\D|$)"), "\\1\u2019\\2"),
    (re.compile(_OPENERS + r"'"), "\\1\u2018"),
    (re.compile(_OPENERS + r'"'), "\\1\u201c"),
    (re.compile(r"""(\d)'(?=\s|$|[.,;:!?)])"""), "\\1\u2032"),
    (re.compile(r"""(\d)"(?=\s|$|[.,;:!?)])"""), "\\1\u2033"),
    (re.compile(r"(\w)'(?=\w)"), "\\1\u2019"),
    (re.compile(r"\b(\d[\d.,]*)x(-?\d[\d.,]*)\b"), "\\1\u00d7\\2"),
    (re.compile(r"'"), "\u2019"),
    (re.compile(r'"'), "\u201d"),
)


def texturize_text(text: str) -> str:
    """Apply the substitutions to a run of text that contains no markup."""
    for needle, replacement in _STATIC_REPLACEMENTS:
        text = text.replace(needle, replacement)
    for pattern, replacement in _DYNAMIC_REPLACEMENTS:
        text = pattern.sub(replacement, text)
    return text


def texturize(html: Optional[str]) -> str:
    """Texturize the text runs of an HTML fragment.

    Example:
        >>> texturize("<p>It's back -- finally...</p>")
        '<p>It’s back — finally…</p>'
    """
    if not html:
        return ""

    skip_stack: list[str] = []
    parts: list[str] = []

    for token in _TOKEN_RE.split(html):
        if not token:
            continue

        if token.startswith("<") and token.endswith(">"):
            _track_skipped_tag(token, skip_stack)
            parts.append(token)
        elif skip_stack:
            parts.append(token)
        else:
            parts.append(texturize_text(token))

    return "".join(parts)


def _track_skipped_tag(tag: str, skip_stack: list[str]) -> None:
    match = _TAG_NAME_RE.match(tag)
    if not match:
        return

    closing, name = match.group(1), match.group(2).lower()
    if name not in NO_TEXTURIZE_TAGS:
        return

    if closing:
        if name in skip_stack:
            # Drop the innermost matching element
            index = len(skip_stack) - 1 - skip_stack[::-1].index(name)
            del skip_stack[index]
    elif not tag.rstrip(">").rstrip().endswith("/"):
        skip_stack.append(name)
