"""Observers notified when an add is refused because of a time conflict."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

from daily_schedule.domain.models import Task


class TaskObserver(Protocol):
    """Anything with an ``update(task)`` method can watch for conflicts."""

    def update(self, task: Task) -> None: ...


class ConflictObserver:
    """Reports the task that was refused."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def update(self, task: Task) -> None:
        print(
            f"Conflict detected with task: {task.description}",
            file=self._out or sys.stdout,
        )
