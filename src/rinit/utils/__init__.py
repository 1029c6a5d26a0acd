"""Utility modules for rinit."""

from .console import console, err_console
from .filesystem import iter_relative_files
from .subprocess_utils import run_tool, tool_available

__all__ = [
    "console",
    "err_console",
    "iter_relative_files",
    "run_tool",
    "tool_available",
]
