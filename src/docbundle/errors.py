"""Error types raised while building the documentation bundle."""

from __future__ import annotations

from pathlib import Path


class DocBundleError(Exception):
    """Base class for all fatal build errors."""


class ConfigurationError(DocBundleError):
    """Invalid root or output settings, reported before discovery starts."""


class FilesystemError(DocBundleError):
    """A directory or file could not be read, or the output could not be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class RenderError(DocBundleError):
    """The markdown renderer failed on a document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to render {path}: {reason}")


class AnchorCollisionError(DocBundleError):
    """Two distinct items sanitize to the same fragment identifier."""

    def __init__(self, anchor: str, first: str, second: str) -> None:
        self.anchor = anchor
        self.first = first
        self.second = second
        super().__init__(f"Anchor '#{anchor}' is shared by {first!r} and {second!r}")
