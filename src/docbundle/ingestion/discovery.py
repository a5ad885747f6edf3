"""Documentation file discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from docbundle.config import DEFAULT_EXCLUDE_MARKERS, DEFAULT_SUFFIXES
from docbundle.errors import FilesystemError
from docbundle.models import DocumentFile
from docbundle.utils.files import iter_doc_paths, read_text

LOGGER = logging.getLogger(__name__)


def _check_root(root: Path) -> None:
    if not root.is_dir():
        raise FilesystemError(root, "Root directory not found")
    try:
        with os.scandir(root):
            pass
    except OSError as exc:
        raise FilesystemError(root, f"Root directory is not readable ({exc})") from exc


def discover(
    root_dir: Path,
    *,
    suffixes: tuple[str, ...] = DEFAULT_SUFFIXES,
    exclude_markers: tuple[str, ...] = DEFAULT_EXCLUDE_MARKERS,
    include_hidden: bool = False,
) -> list[DocumentFile]:
    """Find documentation files under root_dir and load their content.

    Paths on the returned documents are root-relative and use forward slashes.
    Any unreadable file aborts discovery with FilesystemError.
    """
    root = Path(root_dir)
    _check_root(root)

    LOGGER.info("Discovering documentation under %s", root)
    documents: list[DocumentFile] = []
    for path in iter_doc_paths(
        root,
        suffixes=suffixes,
        exclude_markers=exclude_markers,
        include_hidden=include_hidden,
    ):
        relative = path.relative_to(root).as_posix()
        content = read_text(path)
        documents.append(
            DocumentFile(path=relative, raw_content=content)
        )
        LOGGER.debug("Found %s", relative)

    LOGGER.info("Found %d documentation files", len(documents))
    return documents
