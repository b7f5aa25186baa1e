"""Event bus owned by every mail service and the mail event names."""

from __future__ import annotations

import threading
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, DefaultDict

__all__ = [
    "Event",
    "EventHandler",
    "EventBus",
    "MAIL_EVENTS",
    "PRE_RENDER_EVENT",
    "PRE_SEND_EVENT",
    "POST_SEND_EVENT",
    "SEND_ERROR_EVENT",
]

PRE_RENDER_EVENT = "mail.pre_render"
PRE_SEND_EVENT = "mail.pre_send"
POST_SEND_EVENT = "mail.post_send"
SEND_ERROR_EVENT = "mail.send_error"

# listener method name -> event name
MAIL_EVENTS: dict[str, str] = {
    "on_pre_render": PRE_RENDER_EVENT,
    "on_pre_send": PRE_SEND_EVENT,
    "on_post_send": POST_SEND_EVENT,
    "on_send_error": SEND_ERROR_EVENT,
}


@dataclass(frozen=True)
class Event:
    """Lightweight event descriptor."""

    name: str
    payload: dict[str, Any] = field(default_factory=dict)


EventHandler = Callable[[Event], None]


@dataclass(frozen=True)
class _EventSubscription:
    priority: int
    order: int
    handler: EventHandler


class EventBus:
    """Synchronous event bus with deterministic delivery.

    Handlers with a higher priority run first; equal priorities keep
    subscription order.
    """

    def __init__(self) -> None:
        self._handlers: DefaultDict[str, list[_EventSubscription]] = defaultdict(list)
        self._sequence: DefaultDict[str, int] = defaultdict(int)
        self._lock = threading.Lock()

    def subscribe(self, event_name: str, handler: EventHandler, priority: int = 1) -> None:
        self.on(event_name, handler, priority=priority)

    def on(self, event_name: str, handler: EventHandler, priority: int = 0) -> None:
        """Register a handler for `event_name` with optional priority."""
        with self._lock:
            order = self._sequence[event_name]
            self._sequence[event_name] = order + 1
            self._handlers[event_name].append(
                _EventSubscription(priority=priority, order=order, handler=handler)
            )

    def detach(self, event_name: str, handler: EventHandler) -> int:
        """Remove ``handler`` from ``event_name``, returning how many were removed."""
        with self._lock:
            subscriptions = self._handlers.get(event_name, [])
            kept = [item for item in subscriptions if item.handler != handler]
            removed = len(subscriptions) - len(kept)
            if kept:
                self._handlers[event_name] = kept
            else:
                self._handlers.pop(event_name, None)
        return removed

    def handler_count(self, event_name: str) -> int:
        with self._lock:
            return len(self._handlers.get(event_name, []))

    def emit(self, event_name: str, payload: dict[str, Any] | None = None) -> Event:
        event = Event(event_name, dict(payload or {}))
        with self._lock:
            subscriptions = sorted(
                self._handlers.get(event_name, []),
                key=lambda item: (-item.priority, item.order),
            )
        for subscription in subscriptions:
            subscription.handler(event)
        return event

    publish = emit
