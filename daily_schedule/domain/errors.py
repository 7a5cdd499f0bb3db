"""Exceptions raised by the schedule domain."""

from __future__ import annotations


class ScheduleError(Exception):
    """Base class for schedule errors."""


class InvalidTimeFormat(ScheduleError, ValueError):
    """A time string did not parse as 24-hour HH:MM."""

    def __init__(self, raw: str | None = None) -> None:
        self.raw = raw
        super().__init__("Error: Invalid time format. Please use HH:MM format.")


class InvalidTimeRange(ScheduleError, ValueError):
    """End time is not after start time."""

    def __init__(self, start: str, end: str) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"Error: End time {end} must be after start time {start}."
        )
