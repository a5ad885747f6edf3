"""Assembles processed documents into one navigable HTML page."""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, Sequence

from docbundle.config import DEFAULT_TITLE
from docbundle.errors import AnchorCollisionError
from docbundle.models import Category, ProcessedDocument
from docbundle.utils.text import category_anchor, escape_text

LOGGER = logging.getLogger(__name__)

_ID_ATTRIBUTE = re.compile(r'\sid="([^"]+)"')

STYLE = """
    body {
      font-family: system-ui, -apple-system, sans-serif;
      line-height: 1.5;
      max-width: 80ch;
      margin: 0 auto;
      padding: 2rem;
    }
    nav {
      position: sticky;
      top: 0;
      background: white;
      padding: 1rem 0;
      border-bottom: 1px solid #eee;
    }
    .category {
      margin-top: 2rem;
    }
    .file {
      margin: 2rem 0;
      padding: 1rem;
      border: 1px solid #eee;
      border-radius: 4px;
    }
    h1, h2, h3 {
      scroll-margin-top: 4rem;
    }
    a {
      color: #0066cc;
      text-decoration: none;
    }
    a:hover {
      text-decoration: underline;
    }
    code {
      background: #f5f5f5;
      padding: 0.2em 0.4em;
      border-radius: 3px;
      font-size: 0.9em;
    }
    pre code {
      display: block;
      padding: 1rem;
      overflow-x: auto;
    }
"""


def group_by_category(docs: Sequence[ProcessedDocument]) -> list[Category]:
    """Group documents by label in first-seen order, keeping document order."""
    groups: Dict[str, Category] = {}
    for doc in docs:
        if doc.category not in groups:
            groups[doc.category] = Category(label=doc.category, anchor_id=category_anchor(doc.category))
        groups[doc.category].documents.append(doc)
    return list(groups.values())


def _ensure_unique(pairs: Iterable[tuple[str, str]]) -> None:
    seen: Dict[str, str] = {}
    for anchor, owner in pairs:
        if anchor in seen:
            raise AnchorCollisionError(anchor, seen[anchor], owner)
        seen[anchor] = owner


def check_anchors(categories: Sequence[Category]) -> None:
    """Fail loudly when two categories or two documents share an anchor."""
    _ensure_unique((category.anchor_id, category.label) for category in categories)
    _ensure_unique(
        (doc.anchor_id, doc.path) for category in categories for doc in category.documents
    )


def find_shadowed_anchors(categories: Sequence[Category]) -> list[tuple[str, str]]:
    """Return (anchor, path) pairs where an id inside a rendered fragment
    repeats a category or document anchor.

    Browsers jump to the first element with a given id, so such a heading
    captures navigation links meant for the section.
    """
    structural = {category.anchor_id for category in categories}
    structural.update(doc.anchor_id for category in categories for doc in category.documents)
    shadowed = []
    for category in categories:
        for doc in category.documents:
            for element_id in _ID_ATTRIBUTE.findall(doc.rendered_html):
                if element_id in structural:
                    shadowed.append((element_id, doc.path))
    return shadowed


def build_nav(categories: Sequence[Category], title: str = DEFAULT_TITLE) -> str:
    parts = ["<nav>", f"<h1>{escape_text(title)}</h1>", "<h2>Contents</h2>"]
    for category in categories:
        parts.append(f'<h3><a href="#{category.anchor_id}">{escape_text(category.label)}</a></h3>')
        parts.append("<ul>")
        for doc in category.documents:
            parts.append(f'<li><a href="#{doc.anchor_id}">{escape_text(doc.path)}</a></li>')
        parts.append("</ul>")
    parts.append("</nav>")
    return "\n".join(parts)


def build_content(categories: Sequence[Category]) -> str:
    parts = []
    for category in categories:
        parts.append(f'<div class="category" id="{category.anchor_id}">')
        parts.append(f"<h2>{escape_text(category.label)}</h2>")
        for doc in category.documents:
            parts.append(f'<div class="file" id="{doc.anchor_id}">')
            parts.append(f"<h3>{escape_text(doc.path)}</h3>")
            # Renderer output is trusted HTML and is embedded verbatim.
            parts.append(doc.rendered_html)
            parts.append("</div>")
        parts.append("</div>")
    return "\n".join(parts)


def aggregate(docs: Sequence[ProcessedDocument], *, title: str = DEFAULT_TITLE) -> str:
    """Assemble the complete HTML document for the given ordered documents."""
    categories = group_by_category(docs)
    check_anchors(categories)
    for anchor, path in find_shadowed_anchors(categories):
        LOGGER.warning("Element id '#%s' in %s repeats a section anchor", anchor, path)
    LOGGER.info("Assembling %d documents in %d categories", len(docs), len(categories))

    return "\n".join(
        [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{escape_text(title)}</title>",
            f"<style>{STYLE}</style>",
            "</head>",
            "<body>",
            build_nav(categories, title),
            build_content(categories),
            "</body>",
            "</html>",
            "",
        ]
    )
