"""Shared rich console."""

from __future__ import annotations

from rich.console import Console

# Paths are printed whole rather than wrapped at the terminal width.
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)
