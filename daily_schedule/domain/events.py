"""Domain events published by the schedule manager."""

from __future__ import annotations

from pydantic import BaseModel

from daily_schedule.domain.models import Task


class TaskConflictDetected(BaseModel):
    """Fired when a task is refused because its interval overlaps others."""

    task: Task
    conflicting_descriptions: list[str]
