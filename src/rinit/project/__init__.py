"""Project creation for rinit."""

from .materialize import ProjectContext, ensure_project_root_absent, materialize

__all__ = ["ProjectContext", "ensure_project_root_absent", "materialize"]
