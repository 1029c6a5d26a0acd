"""File system utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List


def iter_relative_files(
    directory: Path, exclude_dirs: Iterable[str] = ()
) -> List[Path]:
    """List regular files under directory as relative paths, sorted.

    Files below any top-level directory named in ``exclude_dirs`` are left out.
    """
    excluded = set(exclude_dirs)
    files: List[Path] = []
    for file_path in directory.rglob("*"):
        if not file_path.is_file():
            continue
        relative_path = file_path.relative_to(directory)
        if relative_path.parts[0] in excluded:
            continue
        files.append(relative_path)
    return sorted(files, key=lambda p: p.as_posix())
