"""Service for detecting time conflicts between tasks."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import time

from daily_schedule.domain.models import Task


def overlaps(new_start: time, new_end: time, existing: Task) -> bool:
    """Return True unless the new range lies strictly before or after *existing*.

    Ranges that merely touch (new_end == existing.start_time, or
    new_start == existing.end_time) count as overlapping.
    """
    return not (new_end < existing.start_time or new_start > existing.end_time)


def find_conflicts(
    new_start: time,
    new_end: time,
    existing_tasks: Iterable[Task],
) -> list[Task]:
    """Return the existing tasks whose ranges overlap the given one."""
    return [task for task in existing_tasks if overlaps(new_start, new_end, task)]
