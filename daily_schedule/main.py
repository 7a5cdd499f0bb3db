"""FastAPI application: HTTP entry point for the daily schedule."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException, status

from daily_schedule.core.log import get_logger
from daily_schedule.core.settings import get_settings
from daily_schedule.domain.bus import EventBus
from daily_schedule.domain.errors import ScheduleError
from daily_schedule.domain.events import TaskConflictDetected
from daily_schedule.domain.models import (
    Task,
    TaskCreateRequest,
    TaskEditRequest,
    TaskOutcome,
)
from daily_schedule.repos.memory import TaskRepository
from daily_schedule.services.factory import create_task
from daily_schedule.services.manager import ScheduleManager

logger = get_logger(__name__)

app = FastAPI(title=get_settings().app_title)

# ── Singletons (created at import time for simplicity) ────────────────
event_bus = EventBus()
task_repo = TaskRepository()
schedule_manager = ScheduleManager(repo=task_repo, bus=event_bus)


def _log_conflict(event: TaskConflictDetected) -> None:
    logger.info(
        "Conflict: %r overlaps %s",
        event.task.description,
        ", ".join(event.conflicting_descriptions),
    )


event_bus.subscribe(TaskConflictDetected, _log_conflict)


def _require(description: str) -> Task:
    task = schedule_manager.get_task(description)
    if task is None:
        raise HTTPException(status_code=404, detail=f"Task '{description}' not found")
    return task


def _raise_for_outcome(outcome: TaskOutcome, description: str) -> None:
    if outcome == TaskOutcome.NOT_FOUND:
        raise HTTPException(status_code=404, detail=f"Task '{description}' not found")
    if outcome == TaskOutcome.DUPLICATE:
        raise HTTPException(
            status_code=409, detail=f"Task '{description}' already exists"
        )
    if outcome == TaskOutcome.CONFLICT:
        raise HTTPException(
            status_code=409, detail="Task conflicts with existing task"
        )


# ── Routes ────────────────────────────────────────────────────────────


@app.post("/tasks", response_model=Task, status_code=status.HTTP_201_CREATED)
def add_task(payload: TaskCreateRequest) -> Task:
    """Create a task and add it to the schedule."""
    try:
        task = create_task(
            payload.description, payload.start_time, payload.end_time, payload.priority
        )
    except ScheduleError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    _raise_for_outcome(schedule_manager.add_task(task), payload.description)
    return task


@app.get("/tasks", response_model=list[Task])
def list_tasks(priority: str | None = None) -> list[Task]:
    """Return scheduled tasks in start-time order, optionally by priority."""
    if priority is None:
        return task_repo.list_all()
    return task_repo.list_by_priority(priority)


@app.get("/tasks/{description}", response_model=Task)
def get_task(description: str) -> Task:
    """Return a single task by description."""
    return _require(description)


@app.put("/tasks/{description}", response_model=Task)
def edit_task(description: str, payload: TaskEditRequest) -> Task:
    """Replace a task's description, times and priority."""
    _require(description)
    try:
        create_task(
            payload.description, payload.start_time, payload.end_time, payload.priority
        )
    except ScheduleError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    outcome = schedule_manager.edit_task(
        description,
        payload.description,
        payload.start_time,
        payload.end_time,
        payload.priority,
    )
    _raise_for_outcome(
        outcome,
        payload.description if outcome == TaskOutcome.DUPLICATE else description,
    )
    return _require(payload.description)


@app.post("/tasks/{description}/complete", response_model=Task)
def complete_task(description: str) -> Task:
    """Mark a task as completed."""
    _raise_for_outcome(schedule_manager.mark_task_completed(description), description)
    return _require(description)


@app.delete("/tasks/{description}", status_code=200)
def remove_task(description: str) -> dict:
    """Remove a task from the schedule."""
    _raise_for_outcome(schedule_manager.remove_task(description), description)
    return {"status": "removed"}
