"""Mail listeners and their registration."""

from .base import AbstractMailListener, MailListener
from .lazy import LazyListener, LazyListenerAggregate, LazyListenerDefinition
from .registrar import (
    DEFAULT_PRIORITY,
    ListenerDeclaration,
    attach_mail_listeners,
    lazy_definitions,
)

__all__ = [
    "MailListener",
    "AbstractMailListener",
    "LazyListener",
    "LazyListenerAggregate",
    "LazyListenerDefinition",
    "ListenerDeclaration",
    "DEFAULT_PRIORITY",
    "attach_mail_listeners",
    "lazy_definitions",
]
