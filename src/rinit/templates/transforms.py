"""Content transforms applied to template files while building a project."""

from __future__ import annotations

from typing import Callable, Dict

from ..config import PROJECT_NAME_MARKER

Transform = Callable[[str], str]


def project_name_transform(project_name: str) -> Transform:
    """Return a transform replacing every project name marker with project_name."""

    def apply(content: str) -> str:
        return content.replace(PROJECT_NAME_MARKER, project_name)

    return apply


# Target path -> factory taking the project name.
TARGET_TRANSFORMS: Dict[str, Callable[[str], Transform]] = {
    "README.md": project_name_transform,
}
