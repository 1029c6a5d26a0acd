"""Template root discovery.

Candidate locations are tried in order and the first one that looks like a
template root wins:
1. `RINIT_SHARE_DIR` environment variable
2. Per-user override directory (skipped in DIST_ONLY mode)
3. Development checkout: a `share/` directory next to `pyproject.toml`,
   walking up from this module, then from the working directory
4. Package data installed with rinit
5. System-wide share directories
6. `../share` relative to the running program
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from importlib.resources import files
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Tuple

from ..config import APP_NAME, SHARE_DIR_ENV, SYSTEM_SHARE_DIRS, user_template_dir
from ..errors import TemplateRootNotFoundError

logger = logging.getLogger(__name__)

METADATA_DIR = "metadata"
SHARE_DIR_NAME = "share"
PROJECT_FILE = "pyproject.toml"


class LocateMode(str, Enum):
    """Which strategies may be used to find a template root."""

    FULL = "full"
    DIST_ONLY = "dist-only"


@dataclass(frozen=True)
class Strategy:
    """A named source of candidate template roots."""

    name: str
    candidates: Callable[[], Iterable[Path]]
    user_override: bool = False


def is_template_root(path: Path) -> bool:
    """Return True if path is a directory holding a `metadata` subdirectory."""
    return path.is_dir() and (path / METADATA_DIR).is_dir()


def _from_env() -> Iterator[Path]:
    value = os.environ.get(SHARE_DIR_ENV)
    if value:
        yield Path(value).expanduser()


def _from_user_dir() -> Iterator[Path]:
    yield user_template_dir()


def _walk_up(start: Path) -> Iterator[Path]:
    yield start
    yield from start.parents


def _from_dev_tree() -> Iterator[Path]:
    for directory in _walk_up(Path(__file__).resolve().parent):
        if (directory / PROJECT_FILE).is_file():
            yield directory / SHARE_DIR_NAME
    for directory in _walk_up(Path.cwd().resolve()):
        yield directory / SHARE_DIR_NAME


def _from_package_data() -> Iterator[Path]:
    try:
        resource = files(APP_NAME).joinpath(SHARE_DIR_NAME)
    except ModuleNotFoundError:
        return
    # Only filesystem-backed installs can be copied from.
    if isinstance(resource, Path):
        yield resource


def _from_system_dirs() -> Iterator[Path]:
    yield from SYSTEM_SHARE_DIRS


def _from_program_dir() -> Iterator[Path]:
    if sys.argv and sys.argv[0]:
        program_dir = Path(sys.argv[0]).resolve().parent
        yield program_dir.parent / SHARE_DIR_NAME


STRATEGIES: Tuple[Strategy, ...] = (
    Strategy("environment", _from_env),
    Strategy("user", _from_user_dir, user_override=True),
    Strategy("development", _from_dev_tree),
    Strategy("package", _from_package_data),
    Strategy("system", _from_system_dirs),
    Strategy("program", _from_program_dir),
)


def resolve_template_root(
    mode: LocateMode = LocateMode.FULL,
    strategies: Tuple[Strategy, ...] = STRATEGIES,
) -> Path:
    """Return the first valid template root, as an absolute path.

    Raises TemplateRootNotFoundError listing every checked location when no
    strategy yields a valid root.
    """
    checked: List[Path] = []
    for strategy in strategies:
        if strategy.user_override and mode is LocateMode.DIST_ONLY:
            continue
        for candidate in strategy.candidates():
            checked.append(candidate)
            if is_template_root(candidate):
                root = candidate.resolve()
                logger.debug("Using %s template root %s", strategy.name, root)
                return root
    raise TemplateRootNotFoundError(checked)
