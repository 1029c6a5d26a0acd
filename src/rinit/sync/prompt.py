"""Decision sources for sync conflicts."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator

import click

from .engine import Decision

_CHOICES: Dict[str, Decision] = {
    "y": Decision.YES,
    "n": Decision.NO,
    "a": Decision.ALL,
    "none": Decision.NONE,
}


class ClickDecisionSource:
    """Ask on the terminal whether to overwrite each conflicting file.

    Answers: y (this file), n (keep this file, the default), a (overwrite this
    and every later file), none (keep this and every later file). End of input
    is reported as EXHAUSTED.
    """

    def __call__(self, relative_path: str) -> Decision:
        try:
            answer = click.prompt(
                f"{relative_path} exists. Overwrite?",
                type=click.Choice(list(_CHOICES), case_sensitive=False),
                default="n",
                show_choices=True,
            )
        except click.Abort:
            return Decision.EXHAUSTED
        return _CHOICES[answer.lower()]


class ScriptedDecisions:
    """Replay a fixed list of answers, then report EXHAUSTED."""

    def __init__(self, answers: Iterable[Decision]) -> None:
        self._answers: Iterator[Decision] = iter(answers)
        self.asked: list[str] = []

    def __call__(self, relative_path: str) -> Decision:
        self.asked.append(relative_path)
        return next(self._answers, Decision.EXHAUSTED)
