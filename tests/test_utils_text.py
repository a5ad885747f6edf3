"""Tests for anchor and escaping helpers."""

from __future__ import annotations

import random
import string

import pytest

from docbundle.utils.text import category_anchor, document_anchor, escape_text


class TestCategoryAnchor:
    """Test category_anchor function."""

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("Getting Started", "getting-started"),
            ("Blog Posts", "blog-posts"),
            ("Other", "other"),
            ("Release   Notes\tArchive", "release-notes-archive"),
        ],
    )
    def test_known_labels(self, label: str, expected: str) -> None:
        assert category_anchor(label) == expected


class TestDocumentAnchor:
    """Test document_anchor function."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("README.md", "README-md"),
            ("docs/a.md", "docs-a-md"),
            ("docs/getting_started.mdx", "docs-getting_started-mdx"),
            ("blog/2024 recap.md", "blog-2024-recap-md"),
        ],
    )
    def test_known_paths(self, path: str, expected: str) -> None:
        assert document_anchor(path) == expected

    def test_non_ascii_replaced(self) -> None:
        """Non-ASCII letters are not word characters for anchors."""
        assert document_anchor("docs/café.md") == "docs-caf--md"

    def test_punctuation_collision(self) -> None:
        """Paths differing only in punctuation collide."""
        assert document_anchor("a/b.md") == document_anchor("a-b.md")

    def test_distinct_paths_give_distinct_anchors(self) -> None:
        """Slash-separated word segments with one extension never collide."""
        rng = random.Random(1234)
        alphabet = string.ascii_letters + string.digits + "_"

        for _ in range(200):
            paths = set()
            while len(paths) < 25:
                depth = rng.randint(1, 4)
                segments = [
                    "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 6)))
                    for _ in range(depth)
                ]
                paths.add("/".join(segments) + rng.choice([".md", ".mdx"]))

            anchors = {document_anchor(path) for path in paths}
            assert len(anchors) == len(paths)


class TestEscapeText:
    """Test escape_text function."""

    def test_escapes_markup(self) -> None:
        assert escape_text('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"

    def test_plain_text_unchanged(self) -> None:
        assert escape_text("docs/guide.md") == "docs/guide.md"
