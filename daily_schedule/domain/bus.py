"""Synchronous in-process event bus for schedule notifications."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable


class EventBus:
    """Publish/subscribe bus for schedule events.

    Handlers run synchronously, in the order they subscribed, before
    ``publish`` returns.
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[Any], None]]] = defaultdict(list)

    def subscribe(self, event_type: type, handler: Callable[[Any], None]) -> None:
        self._handlers[event_type].append(handler)

    def handler_count(self, event_type: type) -> int:
        return len(self._handlers.get(event_type, []))

    def publish(self, event: Any) -> int:
        """Deliver *event* to its subscribers; return how many were called."""
        handlers = list(self._handlers.get(type(event), []))
        for handler in handlers:
            handler(event)
        return len(handlers)
