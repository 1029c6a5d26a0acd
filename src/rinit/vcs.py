"""Version control bootstrap for new projects."""

from __future__ import annotations

from pathlib import Path

from .utils import console, run_tool, tool_available


def init_git(project_root: Path) -> bool:
    """Run `git init` in project_root if git is installed."""
    if not tool_available(["git", "--version"]):
        console.print("⚠️  Git not found, skipping Git initialization", style="red")
        return False
    if run_tool(["git", "init", "-q"], cwd=project_root) is None:
        return False
    console.print("✅ Git repository initialized", style="green")
    return True


def init_dvc(project_root: Path) -> bool:
    """Run `dvc init` in project_root if DVC is installed."""
    if not tool_available(["dvc", "version"]):
        console.print(
            "ℹ️  DVC not detected. For large datasets (>100MB), install DVC: pip install dvc",
            style="blue",
        )
        return False
    if run_tool(["dvc", "init", "--quiet"], cwd=project_root) is None:
        return False
    console.print("✅ DVC (Data Version Control) initialized", style="green")
    return True
