"""Domain models for the daily schedule."""

from __future__ import annotations

import re
from datetime import time
from enum import StrEnum

from pydantic import BaseModel, field_serializer, field_validator, model_validator

from daily_schedule.domain.errors import InvalidTimeFormat, InvalidTimeRange

TIME_FORMAT = "%H:%M"

_HHMM = re.compile(r"([0-9]{1,2}):([0-9]{2})")


def parse_time(raw: str) -> time:
    """Parse a 24-hour ``HH:MM`` string into a :class:`datetime.time`.

    Raises InvalidTimeFormat for anything else, including out-of-range
    values such as ``25:99``.
    """
    if not isinstance(raw, str):
        raise InvalidTimeFormat(raw)
    match = _HHMM.fullmatch(raw)
    if match is None:
        raise InvalidTimeFormat(raw)
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeFormat(raw)
    return time(hour, minute)


def format_time(value: time) -> str:
    return value.strftime(TIME_FORMAT)


class TaskOutcome(StrEnum):
    ADDED = "added"
    REMOVED = "removed"
    EDITED = "edited"
    COMPLETED = "completed"
    CONFLICT = "conflict"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    INVALID_TIME = "invalid_time"


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class Task(BaseModel):
    description: str
    start_time: time
    end_time: time
    priority: str
    completed: bool = False

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _parse_hhmm(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_time(value)
        return value

    @model_validator(mode="after")
    def _end_after_start(self) -> Task:
        if self.end_time <= self.start_time:
            raise InvalidTimeRange(
                format_time(self.start_time), format_time(self.end_time)
            )
        return self

    @field_serializer("start_time", "end_time")
    def _serialize_time(self, value: time) -> str:
        return format_time(value)

    @classmethod
    def create(
        cls, description: str, start_time: str, end_time: str, priority: str
    ) -> Task:
        """Build a task from ``HH:MM`` strings.

        Raises InvalidTimeFormat or InvalidTimeRange directly rather than a
        pydantic ValidationError, so callers can report the message as-is.
        """
        start, end = _parse_range(start_time, end_time)
        return cls(
            description=description, start_time=start, end_time=end, priority=priority
        )

    def edit_details(
        self,
        new_description: str,
        new_start_time: str,
        new_end_time: str,
        new_priority: str,
    ) -> None:
        """Replace every field at once; nothing changes if validation fails."""
        start, end = _parse_range(new_start_time, new_end_time)
        self.description = new_description
        self.start_time = start
        self.end_time = end
        self.priority = new_priority

    def mark_completed(self) -> None:
        self.completed = True

    def render(self) -> str:
        status = "[Completed]" if self.completed else "[Pending]"
        return (
            f"{format_time(self.start_time)} - {format_time(self.end_time)}: "
            f"{self.description} [{self.priority}] {status}"
        )

    def __str__(self) -> str:
        return self.render()


def _parse_range(start_time: str, end_time: str) -> tuple[time, time]:
    start = parse_time(start_time)
    end = parse_time(end_time)
    if end <= start:
        raise InvalidTimeRange(start_time, end_time)
    return start, end


# ---------------------------------------------------------------------------
# Request DTOs
# ---------------------------------------------------------------------------


class TaskCreateRequest(BaseModel):
    description: str
    start_time: str
    end_time: str
    priority: str


class TaskEditRequest(BaseModel):
    description: str
    start_time: str
    end_time: str
    priority: str
