"""Template discovery and project manifests for rinit."""

from .locator import LocateMode, Strategy, STRATEGIES, is_template_root, resolve_template_root
from .manifest import (
    PROJECT_DIRECTORIES,
    FileOperation,
    Manifest,
    build_manifest,
    list_variants,
    resolve_operations,
)
from .transforms import TARGET_TRANSFORMS, project_name_transform

__all__ = [
    "LocateMode",
    "Strategy",
    "STRATEGIES",
    "is_template_root",
    "resolve_template_root",
    "PROJECT_DIRECTORIES",
    "FileOperation",
    "Manifest",
    "build_manifest",
    "list_variants",
    "resolve_operations",
    "TARGET_TRANSFORMS",
    "project_name_transform",
]
