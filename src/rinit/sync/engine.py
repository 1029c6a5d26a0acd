"""Merge a template tree into the user override directory."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Tuple

from ..config import user_template_dir
from ..errors import RinitError
from ..templates.locator import LocateMode, resolve_template_root
from ..utils import iter_relative_files

logger = logging.getLogger(__name__)


class ConflictMode(str, Enum):
    """How existing target files are treated for the rest of a run."""

    ASK_EACH_TIME = "ask"
    OVERWRITE_ALL = "overwrite-all"
    SKIP_ALL = "skip-all"


class Decision(str, Enum):
    """An answer to "overwrite this file?"."""

    YES = "yes"
    NO = "no"
    ALL = "all"
    NONE = "none"
    EXHAUSTED = "exhausted"


class Action(str, Enum):
    COPY = "copy"
    OVERWRITE = "overwrite"
    SKIP = "skip"


class DecisionSource(Protocol):
    def __call__(self, relative_path: str) -> Decision: ...


@dataclass
class SyncReport:
    """What happened to each file during a sync."""

    copied: List[str] = field(default_factory=list)
    overwritten: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    def record(self, action: Action, relative_path: str) -> None:
        if action is Action.COPY:
            self.copied.append(relative_path)
        elif action is Action.OVERWRITE:
            self.overwritten.append(relative_path)
        else:
            self.skipped.append(relative_path)

    @property
    def total(self) -> int:
        return (
            len(self.copied)
            + len(self.overwritten)
            + len(self.skipped)
            + len(self.failed)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "copied": len(self.copied),
            "overwritten": len(self.overwritten),
            "skipped": len(self.skipped),
            "failed": len(self.failed),
        }


_ANSWERS: Dict[Decision, Tuple[Action, Optional[ConflictMode]]] = {
    Decision.YES: (Action.OVERWRITE, None),
    Decision.NO: (Action.SKIP, None),
    Decision.ALL: (Action.OVERWRITE, ConflictMode.OVERWRITE_ALL),
    Decision.NONE: (Action.SKIP, ConflictMode.SKIP_ALL),
    Decision.EXHAUSTED: (Action.SKIP, ConflictMode.SKIP_ALL),
}


def resolve_conflict(
    mode: ConflictMode,
    target_exists: bool,
    relative_path: str,
    decisions: DecisionSource,
) -> Tuple[Action, ConflictMode]:
    """Decide what to do with one file and return the mode for the next one.

    The decision source is only consulted when the target exists and no
    "apply to all" answer has been given yet.
    """
    if not target_exists:
        return Action.COPY, mode
    if mode is ConflictMode.OVERWRITE_ALL:
        return Action.OVERWRITE, mode
    if mode is ConflictMode.SKIP_ALL:
        return Action.SKIP, mode

    decision = decisions(relative_path)
    action, new_mode = _ANSWERS[decision]
    if decision is Decision.EXHAUSTED:
        logger.debug("No more answers; skipping remaining conflicts")
    return action, new_mode or mode


def sync_tree(
    source_root: Path,
    target_root: Path,
    decisions: DecisionSource,
    mode: ConflictMode = ConflictMode.ASK_EACH_TIME,
) -> SyncReport:
    """Copy every file under source_root to the same place under target_root.

    Files missing from the target are always copied. Existing files are
    overwritten or kept according to the conflict mode, asking the decision
    source while the mode is ASK_EACH_TIME. A file that cannot be copied is
    logged and reported as failed; the walk carries on.
    """
    report = SyncReport()

    for relative_path in iter_relative_files(source_root):
        name = relative_path.as_posix()
        source = source_root / relative_path
        target = target_root / relative_path

        action, mode = resolve_conflict(mode, target.exists(), name, decisions)
        if action is Action.SKIP:
            logger.debug("Skipped %s", name)
            report.record(action, name)
            continue

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
        except OSError as e:
            logger.error("Failed to copy %s: %s", name, e)
            report.failed.append(name)
            continue
        logger.debug("%s %s", "Overwrote" if action is Action.OVERWRITE else "Copied", name)
        report.record(action, name)

    return report


def sync_user_templates(
    decisions: DecisionSource,
    target_root: Optional[Path] = None,
    mode: ConflictMode = ConflictMode.ASK_EACH_TIME,
) -> Tuple[Path, Path, SyncReport]:
    """Install or refresh the user override templates from the distribution copy.

    Returns the source root, the target root and the report.
    """
    source_root = resolve_template_root(LocateMode.DIST_ONLY)
    target = target_root if target_root is not None else user_template_dir()
    if target.resolve() == source_root:
        raise RinitError(f"Refusing to sync {source_root} onto itself")
    return source_root, target, sync_tree(source_root, target, decisions, mode)
