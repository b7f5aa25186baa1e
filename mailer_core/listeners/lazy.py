"""Listeners resolved from the service container on first dispatch."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Iterable

from mailer_core.errors import InvalidListenerError
from mailer_core.events import Event, EventBus
from mailer_core.services import ServiceContainer

from .base import MailListener

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LazyListenerDefinition:
    listener: str
    method: str
    event: str
    priority: int = 1


class _LazyInstance:
    """Once-initialized cell holding the listener behind a service name."""

    def __init__(self, name: str, container: ServiceContainer) -> None:
        self.name = name
        self._container = container
        self._lock = threading.Lock()
        self._instance: MailListener | None = None
        self.resolutions = 0

    def get(self, event_name: str) -> MailListener:
        instance = self._instance
        if instance is not None:
            return instance
        with self._lock:
            if self._instance is None:
                self._instance = self._resolve(event_name)
                self.resolutions += 1
            return self._instance

    def _resolve(self, event_name: str) -> MailListener:
        try:
            instance = self._container.get(self.name)
        except KeyError as exc:
            raise InvalidListenerError(
                f"listener service {self.name!r} bound to {event_name!r} is not registered",
                reference=self.name,
                expected=(MailListener.__qualname__,),
                event=event_name,
            ) from exc
        if not isinstance(instance, MailListener):
            raise InvalidListenerError(
                f"listener service {self.name!r} bound to {event_name!r} does not return a "
                f"{MailListener.__qualname__!r} instance",
                reference=self.name,
                expected=(MailListener.__qualname__,),
                event=event_name,
            )
        logger.debug("resolved lazy listener %s on %s", self.name, event_name)
        return instance


class LazyListener:
    """Event handler calling ``method`` on a lazily resolved listener."""

    def __init__(self, definition: LazyListenerDefinition, cell: _LazyInstance) -> None:
        self.definition = definition
        self._cell = cell

    def __call__(self, event: Event) -> Any:
        listener = self._cell.get(event.name)
        return getattr(listener, self.definition.method)(event)


class LazyListenerAggregate:
    """Attach a set of lazy definitions, sharing one instance per service name."""

    def __init__(
        self,
        definitions: Iterable[LazyListenerDefinition],
        container: ServiceContainer,
    ) -> None:
        self.definitions = tuple(definitions)
        self._cells: dict[str, _LazyInstance] = {}
        self.listeners: list[LazyListener] = []
        for definition in self.definitions:
            cell = self._cells.get(definition.listener)
            if cell is None:
                cell = _LazyInstance(definition.listener, container)
                self._cells[definition.listener] = cell
            self.listeners.append(LazyListener(definition, cell))

    def attach(self, events: EventBus) -> None:
        for listener in self.listeners:
            definition = listener.definition
            events.subscribe(definition.event, listener, definition.priority)

    def resolution_count(self, name: str) -> int:
        cell = self._cells.get(name)
        return cell.resolutions if cell is not None else 0
