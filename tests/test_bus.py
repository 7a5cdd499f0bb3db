"""Tests for the synchronous event bus."""

from daily_schedule.domain.bus import EventBus
from daily_schedule.domain.events import TaskConflictDetected
from daily_schedule.services.factory import create_task


def _event(description: str = "Training Session") -> TaskConflictDetected:
    return TaskConflictDetected(
        task=create_task(description, "09:30", "10:30", "High"),
        conflicting_descriptions=["Team Meeting"],
    )


def test_handlers_run_in_subscription_order():
    bus = EventBus()
    order: list[str] = []
    bus.subscribe(TaskConflictDetected, lambda e: order.append("a"))
    bus.subscribe(TaskConflictDetected, lambda e: order.append("b"))

    delivered = bus.publish(_event())

    assert order == ["a", "b"]
    assert delivered == 2
    assert bus.handler_count(TaskConflictDetected) == 2


def test_publish_without_subscribers():
    bus = EventBus()
    assert bus.publish(_event()) == 0
    assert bus.handler_count(TaskConflictDetected) == 0


def test_handlers_only_receive_their_event_type():
    bus = EventBus()
    seen: list = []
    bus.subscribe(str, seen.append)

    bus.publish(_event())

    assert seen == []
