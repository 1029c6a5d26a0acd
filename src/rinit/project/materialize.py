"""Write a manifest into a brand-new project directory."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..errors import MaterializeError, PreexistingTargetError
from ..templates.manifest import Manifest, resolve_operations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectContext:
    """What the caller wants created: a named project of a given variant."""

    name: str
    root: Path
    variant: str


def ensure_project_root_absent(project_root: Path) -> None:
    """Raise PreexistingTargetError if anything already exists at project_root."""
    if project_root.exists() or project_root.is_symlink():
        raise PreexistingTargetError(project_root)


def _mkdir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise MaterializeError(path, e.strerror or str(e)) from e


def materialize(project_root: Path, manifest: Manifest) -> List[Path]:
    """Create project_root and fill it from manifest.

    Fails before touching the filesystem if project_root exists. Any later
    failure stops immediately and leaves what was already written in place.
    Returns the written file paths in manifest order.
    """
    ensure_project_root_absent(project_root)
    try:
        operations = resolve_operations(manifest)
    except OSError as e:
        raise MaterializeError(project_root, f"cannot prepare templates: {e}") from e

    try:
        project_root.mkdir(parents=True)
    except FileExistsError as e:
        raise PreexistingTargetError(project_root) from e
    except OSError as e:
        raise MaterializeError(project_root, e.strerror or str(e)) from e

    for directory in manifest.directories:
        _mkdir(project_root / directory)

    written: List[Path] = []
    for op in operations:
        target = project_root / op.target
        _mkdir(target.parent)
        try:
            if op.source is not None:
                shutil.copyfile(op.source, target)
            elif op.content is not None:
                target.write_bytes(op.content.encode("utf-8", errors="surrogateescape"))
        except OSError as e:
            raise MaterializeError(target, e.strerror or str(e)) from e
        logger.debug("Wrote %s", target)
        written.append(target)

    return written
