"""In-memory repository for scheduled tasks."""

from __future__ import annotations

from operator import attrgetter

from daily_schedule.domain.models import Task

_by_start = attrgetter("start_time")


class TaskRepository:
    """List-backed store for Task instances, kept sorted by start time.

    Lookups are linear scans over the list; a day's schedule stays small.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        self.resort()

    def get(self, description: str) -> Task | None:
        """Return the first task whose description matches exactly."""
        for task in self._tasks:
            if task.description == description:
                return task
        return None

    def list_all(self) -> list[Task]:
        return list(self._tasks)

    def list_by_priority(self, priority: str) -> list[Task]:
        wanted = priority.casefold()
        return [t for t in self._tasks if t.priority.casefold() == wanted]

    def remove(self, task: Task) -> None:
        self._tasks.remove(task)

    def resort(self) -> None:
        self._tasks.sort(key=_by_start)

    def clear(self) -> None:
        self._tasks.clear()
