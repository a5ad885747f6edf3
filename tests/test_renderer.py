"""Tests for the markdown renderer."""

from __future__ import annotations

import re

from docbundle.rendering.renderer import MarkdownRenderer, RendererConfig, render


class TestMarkdownRenderer:
    """Test MarkdownRenderer."""

    def test_heading_gets_slug_id(self) -> None:
        html = render("# Hello World!")

        assert 'id="hello-world"' in html

    def test_heading_links_to_itself(self) -> None:
        html = render("## Install the CLI")

        assert '<h2 id="install-the-cli">' in html
        assert 'href="#install-the-cli"' in html
        assert "Install the CLI</a>" in html

    def test_duplicate_headings_get_unique_ids(self) -> None:
        html = render("# Usage\n\ntext\n\n# Usage\n")

        ids = re.findall(r'<h1 id="([^"]+)"', html)
        assert len(ids) == 2
        assert len(set(ids)) == 2
        assert ids[0] == "usage"

    def test_deterministic(self) -> None:
        source = "# Title\n\nSome *text*.\n\n## Part\n\n- one\n- two\n"
        renderer = MarkdownRenderer()

        assert renderer.render(source) == renderer.render(source)

    def test_fresh_state_per_call(self) -> None:
        """Heading ids do not carry over between documents."""
        renderer = MarkdownRenderer()
        renderer.render("# Intro")

        assert 'id="intro"' in renderer.render("# Intro")

    def test_fenced_code_and_tables(self) -> None:
        source = "```python\nprint('hi')\n```\n\n| a | b |\n|---|---|\n| 1 | 2 |\n"

        html = render(source)

        assert "<code" in html
        assert "<table>" in html

    def test_anchorlink_can_be_disabled(self) -> None:
        renderer = MarkdownRenderer(RendererConfig(anchorlink=False))

        html = renderer("# Plain")

        assert 'id="plain"' in html
        assert "href" not in html

    def test_empty_document(self) -> None:
        assert render("") == ""
