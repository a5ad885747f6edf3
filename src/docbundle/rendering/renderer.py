"""Markdown to HTML rendering.

Uses Python-Markdown with the ``toc`` extension so every heading gets a
slugged, de-duplicated ``id`` and its text is wrapped in a link to itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict

import markdown

Renderer = Callable[[str], str]

DEFAULT_EXTENSIONS = ("toc", "fenced_code", "tables")


@dataclass(slots=True)
class RendererConfig:
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    anchorlink: bool = True
    extension_configs: Dict[str, Dict[str, Any]] = field(default_factory=dict)


class MarkdownRenderer:
    """Deterministic markdown renderer with autolinked heading anchors."""

    def __init__(self, config: RendererConfig | None = None) -> None:
        self.config = config or RendererConfig()

    def _extension_configs(self) -> Dict[str, Dict[str, Any]]:
        configs = {name: dict(values) for name, values in self.config.extension_configs.items()}
        if "toc" in self.config.extensions:
            configs.setdefault("toc", {}).setdefault("anchorlink", self.config.anchorlink)
        return configs

    def render(self, text: str) -> str:
        # Markdown instances keep per-document state and are not thread-safe.
        converter = markdown.Markdown(
            extensions=list(self.config.extensions),
            extension_configs=self._extension_configs(),
            output_format="html",
        )
        return converter.convert(text)

    __call__ = render


def render(text: str) -> str:
    """Render with the default configuration."""
    return MarkdownRenderer().render(text)
