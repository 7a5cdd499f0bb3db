"""Schedule manager: the owner of a day's task list."""

from __future__ import annotations

import sys
from typing import TextIO

from daily_schedule.core.log import get_logger
from daily_schedule.domain.bus import EventBus
from daily_schedule.domain.errors import ScheduleError
from daily_schedule.domain.events import TaskConflictDetected
from daily_schedule.domain.models import Task, TaskOutcome
from daily_schedule.domain.observers import TaskObserver
from daily_schedule.repos.memory import TaskRepository
from daily_schedule.services.conflicts import find_conflicts

logger = get_logger(__name__)


class ScheduleManager:
    """Adds, edits, removes, completes and lists tasks for one day.

    Every operation writes a human-readable status line to *out* and returns
    a :class:`TaskOutcome` (or the listed tasks) so callers can branch on the
    result. Conflicting adds are refused and announced on the bus, which
    forwards them to every registered observer in registration order.
    """

    def __init__(
        self,
        repo: TaskRepository | None = None,
        bus: EventBus | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.repo = repo if repo is not None else TaskRepository()
        self.bus = bus if bus is not None else EventBus()
        self._out = out

    def __len__(self) -> int:
        return len(self.repo)

    def _say(self, message: str) -> None:
        print(message, file=self._out or sys.stdout)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_observer(self, observer: TaskObserver) -> None:
        def _forward(event: TaskConflictDetected) -> None:
            observer.update(event.task)

        self.bus.subscribe(TaskConflictDetected, _forward)

    def _reject_add(self, task: Task, conflicts: list[Task]) -> None:
        self._say("Error: Task conflicts with existing task.")
        notified = self.bus.publish(
            TaskConflictDetected(
                task=task,
                conflicting_descriptions=[c.description for c in conflicts],
            )
        )
        logger.debug(
            "Refused %r: overlaps %s (%d observers notified)",
            task.description,
            [c.description for c in conflicts],
            notified,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_task(self, description: str) -> Task | None:
        return self.repo.get(description)

    def is_conflicting(self, new_task: Task) -> bool:
        return bool(
            find_conflicts(new_task.start_time, new_task.end_time, self.repo.list_all())
        )

    def view_tasks(self) -> list[Task]:
        tasks = self.repo.list_all()
        if not tasks:
            self._say("No tasks scheduled for the day.")
        for task in tasks:
            self._say(task.render())
        return tasks

    def view_tasks_by_priority(self, priority: str) -> list[Task]:
        tasks = self.repo.list_by_priority(priority)
        if not tasks:
            self._say(f"No tasks with priority: {priority}")
        for task in tasks:
            self._say(task.render())
        return tasks

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_task(self, task: Task) -> TaskOutcome:
        if self.repo.get(task.description) is not None:
            self._say(f"Error: Task '{task.description}' already exists.")
            return TaskOutcome.DUPLICATE

        conflicts = find_conflicts(task.start_time, task.end_time, self.repo.list_all())
        if conflicts:
            self._reject_add(task, conflicts)
            return TaskOutcome.CONFLICT

        self.repo.add(task)
        logger.debug("Added %r; %d tasks scheduled", task.description, len(self.repo))
        self._say(f"Task added successfully: {task.description}.")
        return TaskOutcome.ADDED

    def remove_task(self, description: str) -> TaskOutcome:
        task = self.repo.get(description)
        if task is None:
            self._say(f"Error: Task '{description}' not found.")
            return TaskOutcome.NOT_FOUND

        self.repo.remove(task)
        self._say(f"Task '{description}' removed successfully.")
        return TaskOutcome.REMOVED

    def edit_task(
        self,
        old_description: str,
        new_description: str,
        new_start_time: str,
        new_end_time: str,
        new_priority: str,
    ) -> TaskOutcome:
        task = self.repo.get(old_description)
        if task is None:
            self._say(f"Error: Task '{old_description}' not found.")
            return TaskOutcome.NOT_FOUND

        try:
            candidate = Task.create(
                new_description, new_start_time, new_end_time, new_priority
            )
        except ScheduleError as exc:
            logger.debug("Edit of %r rejected: %s", old_description, exc)
            self._say(str(exc))
            return TaskOutcome.INVALID_TIME

        if (
            new_description != old_description
            and self.repo.get(new_description) is not None
        ):
            self._say(f"Error: Task '{new_description}' already exists.")
            return TaskOutcome.DUPLICATE

        others = [t for t in self.repo.list_all() if t is not task]
        conflicts = find_conflicts(candidate.start_time, candidate.end_time, others)
        if conflicts:
            # Observers hear about refused adds only
            self._say("Error: Task conflicts with existing task.")
            logger.debug(
                "Edit of %r refused: overlaps %s",
                old_description,
                [c.description for c in conflicts],
            )
            return TaskOutcome.CONFLICT

        task.edit_details(new_description, new_start_time, new_end_time, new_priority)
        self.repo.resort()
        self._say("Task edited successfully.")
        return TaskOutcome.EDITED

    def mark_task_completed(self, description: str) -> TaskOutcome:
        task = self.repo.get(description)
        if task is None:
            self._say(f"Error: Task '{description}' not found.")
            return TaskOutcome.NOT_FOUND

        task.mark_completed()
        self._say(f"Task '{description}' marked as completed.")
        return TaskOutcome.COMPLETED
