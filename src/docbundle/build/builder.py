"""Documentation build orchestration."""

from __future__ import annotations

import logging

from docbundle.build.aggregator import aggregate
from docbundle.build.pipeline import Pipeline
from docbundle.build.writer import write
from docbundle.config import AppConfig
from docbundle.ingestion.classifier import Classifier
from docbundle.ingestion.discovery import discover
from docbundle.models import BuildResult, DocumentFile
from docbundle.rendering.renderer import MarkdownRenderer, Renderer

LOGGER = logging.getLogger(__name__)


class DocumentationBuilder:
    """Runs discovery, rendering, aggregation and writing for one project."""

    def __init__(
        self,
        config: AppConfig,
        *,
        renderer: Renderer | None = None,
        classifier: Classifier | None = None,
    ) -> None:
        self.config = config
        self.classifier = classifier or Classifier()
        self.pipeline = Pipeline(
            renderer or MarkdownRenderer(),
            self.classifier,
            max_workers=config.max_workers,
        )

    def discover(self) -> list[DocumentFile]:
        return discover(
            self.config.root_dir,
            suffixes=self.config.suffixes,
            exclude_markers=self.config.exclude_markers,
            include_hidden=self.config.include_hidden,
        )

    def build(self) -> BuildResult:
        """Build the page; any failure propagates before the output is touched."""
        self.config.validate()
        files = self.discover()
        if not files:
            LOGGER.warning("No documentation files found under %s", self.config.root_dir)

        processed = self.pipeline.process(files)
        page = aggregate(processed, title=self.config.title)
        output_path = write(page, self.config.resolve_output_path())

        categories: list[str] = []
        for doc in processed:
            if doc.category not in categories:
                categories.append(doc.category)
        LOGGER.info("Documentation generated at %s", output_path)
        return BuildResult(output_path=output_path, document_count=len(processed), categories=categories)
