"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from docbundle.config import AppConfig
from docbundle.errors import ConfigurationError


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should default to the cwd and docs/documentation.html."""
        monkeypatch.chdir(tmp_path)

        config = AppConfig()

        assert config.root_dir == Path.cwd()
        assert config.output_path == Path("docs/documentation.html")
        assert config.title == "Project Documentation"
        assert config.max_workers is None
        assert config.include_hidden is False
        assert config.suffixes == (".md", ".mdx")
        assert config.exclude_markers == ("node_modules", "dist", "build", ".next")

    def test_custom_config(self) -> None:
        """Should accept custom values and coerce paths."""
        config = AppConfig(
            root_dir="/custom/root",
            output_path="out/index.html",
            title="Handbook",
            max_workers=4,
        )

        assert config.root_dir == Path("/custom/root")
        assert config.output_path == Path("out/index.html")
        assert config.title == "Handbook"
        assert config.max_workers == 4

    def test_resolve_output_relative(self) -> None:
        """Should resolve a relative output path against the root."""
        config = AppConfig(root_dir=Path("/project"))

        assert config.resolve_output_path() == Path("/project/docs/documentation.html")

    def test_resolve_output_absolute(self) -> None:
        """Should return an absolute output path as-is."""
        config = AppConfig(root_dir=Path("/project"), output_path=Path("/srv/site/docs.html"))

        assert config.resolve_output_path() == Path("/srv/site/docs.html")


class TestValidate:
    """Test AppConfig.validate."""

    def test_valid_root(self, tmp_path: Path) -> None:
        """Should pass for an existing directory."""
        AppConfig(root_dir=tmp_path).validate()

    def test_missing_root(self, tmp_path: Path) -> None:
        """Should reject a root that does not exist."""
        config = AppConfig(root_dir=tmp_path / "missing")

        with pytest.raises(ConfigurationError, match="does not exist"):
            config.validate()

    def test_root_is_file(self, tmp_path: Path) -> None:
        """Should reject a root that is a regular file."""
        target = tmp_path / "README.md"
        target.write_text("# Hi")

        with pytest.raises(ConfigurationError, match="not a directory"):
            AppConfig(root_dir=target).validate()

    def test_output_is_directory(self, tmp_path: Path) -> None:
        """Should reject an output path that is an existing directory."""
        (tmp_path / "docs").mkdir()

        with pytest.raises(ConfigurationError, match="Output path is a directory"):
            AppConfig(root_dir=tmp_path, output_path=Path("docs")).validate()

    def test_zero_workers(self, tmp_path: Path) -> None:
        """Should reject a non-positive worker count."""
        with pytest.raises(ConfigurationError, match="max_workers"):
            AppConfig(root_dir=tmp_path, max_workers=0).validate()
