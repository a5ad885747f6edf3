"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from docbundle.errors import ConfigurationError

DEFAULT_OUTPUT = Path("docs/documentation.html")
DEFAULT_TITLE = "Project Documentation"
DEFAULT_SUFFIXES = (".md", ".mdx")
# Matched as plain substrings of the root-relative path, not as whole segments.
DEFAULT_EXCLUDE_MARKERS = ("node_modules", "dist", "build", ".next")


@dataclass(slots=True)
class AppConfig:
    root_dir: Path | None = None
    output_path: Path = DEFAULT_OUTPUT
    title: str = DEFAULT_TITLE
    max_workers: int | None = None
    include_hidden: bool = False
    suffixes: tuple[str, ...] = DEFAULT_SUFFIXES
    exclude_markers: tuple[str, ...] = DEFAULT_EXCLUDE_MARKERS

    def __post_init__(self) -> None:
        if self.root_dir is None:
            self.root_dir = Path.cwd()
        self.root_dir = Path(self.root_dir)
        self.output_path = Path(self.output_path)

    def resolve_output_path(self) -> Path:
        if self.output_path.is_absolute():
            return self.output_path
        return Path(self.root_dir) / self.output_path

    def validate(self) -> None:
        """Reject unusable settings before any filesystem work begins."""
        root = Path(self.root_dir)
        if not root.exists():
            raise ConfigurationError(f"Root directory does not exist: {root}")
        if not root.is_dir():
            raise ConfigurationError(f"Root path is not a directory: {root}")

        output = self.resolve_output_path()
        if output.is_dir():
            raise ConfigurationError(f"Output path is a directory: {output}")

        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be at least 1, got {self.max_workers}")
