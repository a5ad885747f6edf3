"""Core docbundle data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(slots=True, frozen=True)
class DocumentFile:
    """A discovered documentation source with its raw markup.

    Discovery leaves the category unset and the pipeline classifies the path.
    A category supplied up front is kept as-is.
    """

    path: str
    raw_content: str
    category: str | None = None


@dataclass(slots=True, frozen=True)
class ProcessedDocument:
    """A document after classification and rendering."""

    path: str
    raw_content: str
    category: str
    rendered_html: str
    anchor_id: str

    @classmethod
    def from_file(
        cls, doc: DocumentFile, *, category: str, rendered_html: str, anchor_id: str
    ) -> "ProcessedDocument":
        return cls(
            path=doc.path,
            raw_content=doc.raw_content,
            category=category,
            rendered_html=rendered_html,
            anchor_id=anchor_id,
        )


@dataclass(slots=True)
class Category:
    """A category label and the documents grouped under it, in encounter order."""

    label: str
    anchor_id: str
    documents: List[ProcessedDocument] = field(default_factory=list)


@dataclass(slots=True)
class BuildResult:
    """Summary of a completed build."""

    output_path: Path
    document_count: int
    categories: List[str] = field(default_factory=list)
