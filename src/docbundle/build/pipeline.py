"""Concurrent classify-and-render stage."""

from __future__ import annotations

import logging
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import Sequence

from docbundle.errors import RenderError
from docbundle.ingestion.classifier import Classifier
from docbundle.models import DocumentFile, ProcessedDocument
from docbundle.rendering.renderer import MarkdownRenderer, Renderer
from docbundle.utils.text import document_anchor

LOGGER = logging.getLogger(__name__)


class Pipeline:
    """Classifies and renders every document, one task per file."""

    def __init__(
        self,
        renderer: Renderer | None = None,
        classifier: Classifier | None = None,
        *,
        max_workers: int | None = None,
    ) -> None:
        self.renderer = renderer or MarkdownRenderer()
        self.classifier = classifier or Classifier()
        self.max_workers = max_workers

    def process(self, files: Sequence[DocumentFile]) -> list[ProcessedDocument]:
        """Process all files and return results in input order.

        The first failing file (by input position) is raised as RenderError;
        files not yet started are cancelled and nothing is returned.
        """
        files = list(files)
        if not files:
            return []

        LOGGER.info("Rendering %d documents", len(files))
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(self._process_one, doc) for doc in files]
            done, _ = wait(futures, return_when=FIRST_EXCEPTION)
            if any(future.exception() is not None for future in done):
                executor.shutdown(wait=True, cancel_futures=True)
                raise _first_failure(futures)

        return [future.result() for future in futures]

    def _process_one(self, doc: DocumentFile) -> ProcessedDocument:
        category = doc.category or self.classifier.classify(doc.path)
        try:
            rendered = self.renderer(doc.raw_content)
        except Exception as exc:
            raise RenderError(doc.path, str(exc) or type(exc).__name__) from exc
        LOGGER.debug("Rendered %s (%s)", doc.path, category)
        return ProcessedDocument.from_file(
            doc,
            category=category,
            rendered_html=rendered,
            anchor_id=document_anchor(doc.path),
        )


def _first_failure(futures: list[Future]) -> BaseException:
    """Return the error of the earliest input that failed."""
    errors = (future.exception() for future in futures if not future.cancelled())
    return next(error for error in errors if error is not None)
