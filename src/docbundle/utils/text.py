"""Text helpers for anchors and HTML-safe labels."""

from __future__ import annotations

import html
import re

_WHITESPACE_RUN = re.compile(r"\s+")
# ASCII word characters only; anything else in a path becomes a hyphen.
_NON_WORD = re.compile(r"[^\w]", re.ASCII)


def category_anchor(label: str) -> str:
    """Lowercase the label and collapse each whitespace run into one hyphen."""
    return _WHITESPACE_RUN.sub("-", label.lower())


def document_anchor(path: str) -> str:
    """Replace every non-word character of the path with a hyphen.

    >>> document_anchor("docs/getting-started.md")
    'docs-getting-started-md'
    """
    return _NON_WORD.sub("-", path)


def escape_text(value: str) -> str:
    return html.escape(value, quote=True)
