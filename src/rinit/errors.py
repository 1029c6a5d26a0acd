"""Exceptions raised by rinit."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional


class RinitError(Exception):
    """Base class for all rinit failures."""


class TemplateRootNotFoundError(RinitError):
    """Raised when no candidate location holds a valid template root."""

    def __init__(self, checked: List[Path]) -> None:
        self.checked = list(checked)
        lines = "\n  ".join(str(p) for p in self.checked) or "(none)"
        super().__init__(
            "Could not locate the template directory.\n"
            f"Checked locations:\n  {lines}\n"
            "Set RINIT_SHARE_DIR or reinstall rinit."
        )


class PreexistingTargetError(RinitError):
    """Raised when the project root already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory '{path}' already exists")


class MaterializeError(RinitError):
    """Raised when writing the project tree fails part way through."""

    def __init__(self, target: Path, reason: Optional[str] = None) -> None:
        self.target = target
        message = f"Failed to write '{target}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
