"""Utility helpers for working with files."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, Iterator

from docbundle.errors import FilesystemError


def is_excluded(relative_path: str, markers: Iterable[str]) -> bool:
    """Return True when any marker occurs anywhere in the relative path."""
    return any(marker in relative_path for marker in markers)


def is_hidden(relative_path: str) -> bool:
    return any(part.startswith(".") for part in relative_path.split("/"))


def iter_doc_paths(
    root: Path,
    *,
    suffixes: Iterable[str],
    exclude_markers: Iterable[str],
    include_hidden: bool = False,
) -> Iterator[Path]:
    """Yield documentation files under root, skipping excluded and hidden paths.

    Excluded and hidden directories are pruned during the walk, so dependency
    trees are never listed. Matches are yielded in sorted path order.
    """
    wanted = {suffix.lower() for suffix in suffixes}
    markers = tuple(exclude_markers)
    matches: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        # Markers never contain "/", so an excluded directory excludes everything below it.
        dirnames[:] = [
            name
            for name in dirnames
            if not is_excluded((current / name).relative_to(root).as_posix(), markers)
            and (include_hidden or not name.startswith("."))
        ]
        for name in filenames:
            item = current / name
            if item.suffix.lower() not in wanted or not item.is_file():
                continue
            relative = item.relative_to(root).as_posix()
            if is_excluded(relative, markers):
                continue
            if not include_hidden and is_hidden(relative):
                continue
            matches.append(item)
    yield from sorted(matches)


def read_text(path: Path) -> str:
    """Read a whole file as UTF-8 text."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FilesystemError(path, f"Cannot read file ({exc})") from exc


def _published_mode(target: Path) -> int:
    """Keep an existing file's permissions, else use the umask default for new files."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_text_atomic(path: Path, content: str) -> Path:
    """Write content to a temp file beside path, then rename it into place."""
    target = Path(path).absolute()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    except OSError as exc:
        raise FilesystemError(target, f"Cannot prepare output ({exc})") from exc

    tmp_file = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_file, _published_mode(target))
        os.replace(tmp_file, target)
    except OSError as exc:
        tmp_file.unlink(missing_ok=True)
        raise FilesystemError(target, f"Cannot write output ({exc})") from exc
    return target
