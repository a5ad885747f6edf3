"""Output writer."""

from __future__ import annotations

import logging
from pathlib import Path

from docbundle.utils.files import write_text_atomic

LOGGER = logging.getLogger(__name__)


def write(output: str, destination: Path) -> Path:
    """Atomically write the assembled page and return its absolute path.

    Raises FilesystemError when the destination cannot be written; an
    existing file at the destination is left untouched in that case.
    """
    target = write_text_atomic(Path(destination), output)
    LOGGER.info("Wrote %s (%d bytes)", target, len(output.encode("utf-8")))
    return target
