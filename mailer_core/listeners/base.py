"""Listener interface for mail service events."""

from __future__ import annotations

from abc import ABC, abstractmethod

from mailer_core.events import MAIL_EVENTS, Event, EventBus


class MailListener(ABC):
    """React to the lifecycle events of a mail service."""

    @abstractmethod
    def attach(self, events: EventBus, priority: int = 1) -> None:
        """Subscribe to the mail events this listener cares about."""

    def on_pre_render(self, event: Event) -> None:
        """Called before a template is rendered."""

    def on_pre_send(self, event: Event) -> None:
        """Called before a message is handed to the transport."""

    def on_post_send(self, event: Event) -> None:
        """Called after the transport accepted a message."""

    def on_send_error(self, event: Event) -> None:
        """Called when the transport failed."""


class AbstractMailListener(MailListener):
    """Listener subscribing every handler method to its mail event."""

    def attach(self, events: EventBus, priority: int = 1) -> None:
        for method, event_name in MAIL_EVENTS.items():
            events.subscribe(event_name, getattr(self, method), priority)

    def detach(self, events: EventBus) -> None:
        for method, event_name in MAIL_EVENTS.items():
            events.detach(event_name, getattr(self, method))
