"""Bind the ``mail_listeners`` of a mail service configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Mapping

from mailer_core.errors import InvalidListenerError
from mailer_core.events import MAIL_EVENTS, EventBus
from mailer_core.services import ServiceContainer

from .base import MailListener
from .lazy import LazyListenerAggregate, LazyListenerDefinition

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 1

_VALID_DECLARATIONS = ("str", "Mapping", MailListener.__qualname__)


@dataclass(frozen=True)
class ListenerDeclaration:
    """A listener reference together with its priority."""

    reference: MailListener | str
    priority: int = DEFAULT_PRIORITY

    @classmethod
    def from_raw(cls, raw: Any) -> "ListenerDeclaration":
        priority: Any = DEFAULT_PRIORITY
        reference = raw
        if isinstance(raw, Mapping):
            if "listener" not in raw:
                raise InvalidListenerError(
                    "listener mapping requires a 'listener' key",
                    reference=raw,
                    expected=_VALID_DECLARATIONS,
                )
            reference = raw["listener"]
            priority = raw.get("priority", DEFAULT_PRIORITY)
            if priority is None:
                priority = DEFAULT_PRIORITY

        if isinstance(priority, bool) or not isinstance(priority, int):
            raise InvalidListenerError(
                f"listener priority must be an integer, got {priority!r}",
                reference=reference,
                expected=("int",),
            )
        if not isinstance(reference, (MailListener, str)):
            raise InvalidListenerError.from_valid_types(_VALID_DECLARATIONS, reference, "listener")
        return cls(reference=reference, priority=priority)


def lazy_definitions(name: str, priority: int) -> list[LazyListenerDefinition]:
    """One definition per known mail event for the listener service ``name``."""

    return [
        LazyListenerDefinition(listener=name, method=method, event=event_name, priority=priority)
        for method, event_name in MAIL_EVENTS.items()
    ]


def attach_mail_listeners(
    events: EventBus,
    container: ServiceContainer,
    config: Mapping[str, Any],
) -> tuple[LazyListenerDefinition, ...]:
    """Attach configured listeners to ``events``.

    Listener instances are attached right away. Service names are only
    resolved when one of their events is emitted. Returns the lazy
    definitions that were registered.
    """

    raw_listeners = config.get("mail_listeners") or []
    if isinstance(raw_listeners, (str, Mapping, MailListener)):
        raw_listeners = [raw_listeners]
    elif not isinstance(raw_listeners, Iterable):
        raise InvalidListenerError.from_valid_types(
            ("list", *_VALID_DECLARATIONS), raw_listeners, "mail_listeners"
        )

    definitions: list[LazyListenerDefinition] = []
    for raw in raw_listeners:
        declaration = ListenerDeclaration.from_raw(raw)
        if isinstance(declaration.reference, MailListener):
            declaration.reference.attach(events, declaration.priority)
            logger.debug(
                "attached listener %s priority=%s",
                type(declaration.reference).__qualname__,
                declaration.priority,
            )
            continue
        definitions.extend(lazy_definitions(declaration.reference, declaration.priority))

    if definitions:
        LazyListenerAggregate(definitions, container).attach(events)
        logger.debug("attached %s lazy listener definition(s)", len(definitions))
    return tuple(definitions)
