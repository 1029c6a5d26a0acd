"""Subprocess utilities for running external tools."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional

from .console import console


def tool_available(command: List[str]) -> bool:
    """Return True if the command runs and exits cleanly."""
    try:
        result = subprocess.run(
            command,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def run_tool(
    cmd: List[str], cwd: Optional[Path] = None
) -> Optional[subprocess.CompletedProcess[str]]:
    """Run a command and return the result, or None if it failed."""
    try:
        return subprocess.run(
            cmd, cwd=cwd, capture_output=True, text=True, check=True
        )
    except subprocess.CalledProcessError as e:
        console.print(f"Command failed with exit code {e.returncode}", style="bold red")
        if e.stderr:
            console.print(f"stderr: {e.stderr}", style="bold yellow")
        return None
    except OSError as e:
        console.print(f"Could not run {cmd[0]}: {e}", style="bold red")
        return None
