"""Console walkthrough of the schedule organizer."""

from __future__ import annotations

import sys
from typing import TextIO

from daily_schedule.core.log import Logger
from daily_schedule.domain.errors import ScheduleError
from daily_schedule.domain.observers import ConflictObserver
from daily_schedule.services.factory import TaskFactory
from daily_schedule.services.manager import ScheduleManager


def run_demo(out: TextIO | None = None) -> ScheduleManager:
    """Run the fixed demonstration sequence and return the resulting manager."""
    out = out or sys.stdout
    manager = ScheduleManager(out=out)
    factory = TaskFactory()
    logger = Logger(stream=out)

    manager.add_observer(ConflictObserver(out=out))

    try:
        manager.add_task(factory.create_task("Morning Exercise", "07:00", "08:00", "High"))
        manager.add_task(factory.create_task("Team Meeting", "09:00", "10:00", "Medium"))

        # Overlaps Team Meeting; the observer reports it
        manager.add_task(factory.create_task("Training Session", "09:30", "10:30", "High"))

        manager.edit_task("Morning Exercise", "Morning Walk", "07:00", "08:00", "Low")
        manager.mark_task_completed("Team Meeting")
        manager.view_tasks()
        manager.view_tasks_by_priority("High")

        manager.remove_task("Morning Walk")
        manager.view_tasks()
    except ScheduleError as exc:
        logger.log(str(exc))

    return manager


def main() -> None:
    run_demo()


if __name__ == "__main__":
    main()
