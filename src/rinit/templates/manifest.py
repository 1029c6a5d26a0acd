"""Build the list of directories and file operations for a new project."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional, Tuple

from ..utils import iter_relative_files
from .locator import METADATA_DIR
from .transforms import TARGET_TRANSFORMS, Transform

logger = logging.getLogger(__name__)

# Created in every project regardless of template content.
PROJECT_DIRECTORIES: Tuple[str, ...] = (
    "raw",
    "R/import",
    "R/build",
    "R/analysis",
    "R/check",
    "R/utils",
    "R/lib",
    "doc",
    "out/data",
    "out/tables",
    "out/figures",
    "out/manuscript",
    "log",
    "cache",
    ".pandoc",
)

# Templates can't reliably ship dotfiles, so these are renamed on the way out.
RENAMED_TARGETS = {"gitignore": ".gitignore"}
METADATA_TARGET = "_metadata.yml"


@dataclass(frozen=True)
class FileOperation:
    """A single file to place in the project, relative to its root."""

    target: str
    source: Optional[Path] = None
    content: Optional[str] = None
    transform: Optional[Transform] = None

    def __post_init__(self) -> None:
        if self.source is not None and self.content is not None:
            raise ValueError(f"{self.target}: both source and content given")
        if self.source is None and self.content is None:
            raise ValueError(f"{self.target}: neither source nor content given")


@dataclass(frozen=True)
class Manifest:
    """Everything needed to materialize one project."""

    variant: str
    operations: Tuple[FileOperation, ...]
    directories: Tuple[str, ...] = PROJECT_DIRECTORIES
    warnings: Tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        seen = set()
        for op in self.operations:
            if op.target in seen:
                raise ValueError(f"Duplicate target in manifest: {op.target}")
            seen.add(op.target)

    @property
    def targets(self) -> List[str]:
        return [op.target for op in self.operations]


def metadata_file(root: Path, variant: str) -> Path:
    return root / METADATA_DIR / f"metadata_{variant}.yml"


def list_variants(root: Path) -> List[str]:
    """Return the variant codes that have a metadata file under root."""
    prefix, suffix = "metadata_", ".yml"
    variants = []
    for path in (root / METADATA_DIR).glob(f"{prefix}*{suffix}"):
        if path.is_file():
            variants.append(path.name[len(prefix) : -len(suffix)])
    return sorted(variants)


def build_manifest(root: Path, project_name: str, variant: str) -> Manifest:
    """Walk a template root into a manifest for project_name.

    Every regular file outside `metadata/` becomes an operation. The variant's
    metadata file, if present, is added as `_metadata.yml`; a missing variant
    file is logged and recorded on the manifest but does not fail the build.
    """
    operations: List[FileOperation] = []
    warnings: List[str] = []

    for relative_path in iter_relative_files(root, exclude_dirs=[METADATA_DIR]):
        target = relative_path.as_posix()
        target = RENAMED_TARGETS.get(target, target)

        transform = None
        factory = TARGET_TRANSFORMS.get(target)
        if factory is not None:
            transform = factory(project_name)

        operations.append(
            FileOperation(target=target, source=root / relative_path, transform=transform)
        )

    variant_file = metadata_file(root, variant)
    if variant_file.is_file():
        operations.append(FileOperation(target=METADATA_TARGET, source=variant_file))
    else:
        message = f"Metadata file for variant '{variant}' not found at {variant_file}"
        logger.warning(message)
        warnings.append(message)

    return Manifest(
        variant=variant,
        operations=tuple(operations),
        warnings=tuple(warnings),
    )


def resolve_operations(manifest: Manifest) -> Tuple[FileOperation, ...]:
    """Apply transforms, turning transformed operations into inline content.

    Operations without a transform are returned unchanged.
    """
    resolved: List[FileOperation] = []
    for op in manifest.operations:
        if op.transform is None or op.source is None:
            resolved.append(op)
            continue
        text = op.source.read_bytes().decode("utf-8", errors="surrogateescape")
        resolved.append(
            replace(op, source=None, content=op.transform(text), transform=None)
        )
    return tuple(resolved)
