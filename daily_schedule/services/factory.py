"""Central place for building Task instances."""

from __future__ import annotations

from daily_schedule.domain.models import Task


class TaskFactory:
    @staticmethod
    def create_task(
        description: str, start_time: str, end_time: str, priority: str
    ) -> Task:
        return Task.create(description, start_time, end_time, priority)


create_task = TaskFactory.create_task
