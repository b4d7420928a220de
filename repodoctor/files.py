"""Filesystem helpers used by the analyzers."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path


def path_exists(root: str | os.PathLike, relative: str) -> bool:
    """Whether ``relative`` exists beneath ``root``."""
    return (Path(root) / relative).exists()


def max_directory_depth(root: str | os.PathLike) -> int:
    """Number of directory levels below ``root`` in its deepest branch."""
    base = Path(root)
    deepest = 0
    for dirpath, _dirnames, _filenames in os.walk(base):
        depth = len(Path(dirpath).relative_to(base).parts)
        deepest = max(deepest, depth)
    return deepest


def walk_files(root: str | os.PathLike, skip_dirs: Iterable[str] = ()) -> Iterator[Path]:
    """Yield every file under ``root``, not descending into ``skip_dirs``."""
    skipped = set(skip_dirs)
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in skipped)
        for filename in sorted(filenames):
            yield Path(dirpath) / filename


def find_files_with_extension(root: str | os.PathLike, extension: str) -> list[Path]:
    """All files under ``root`` whose extension is ``extension`` (without the dot)."""
    suffix = "." + extension.lstrip(".")
    return [p for p in walk_files(root) if p.suffix == suffix]