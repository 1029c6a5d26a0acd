"""Synchronization of user override templates for rinit."""

from .engine import (
    Action,
    ConflictMode,
    Decision,
    DecisionSource,
    SyncReport,
    resolve_conflict,
    sync_tree,
    sync_user_templates,
)
from .prompt import ClickDecisionSource, ScriptedDecisions

__all__ = [
    "Action",
    "ConflictMode",
    "Decision",
    "DecisionSource",
    "SyncReport",
    "resolve_conflict",
    "sync_tree",
    "sync_user_templates",
    "ClickDecisionSource",
    "ScriptedDecisions",
]
