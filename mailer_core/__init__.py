"""Build configured mail services from named, inheritable config entries."""

from .app import MailerApp
from .config import load_config, merge_config, resolve_config
from .errors import (
    CircularInheritanceError,
    ConfigurationError,
    ConfigurationNotFoundError,
    InvalidListenerError,
    InvalidRendererError,
    InvalidTransportError,
    MailerError,
)
from .events import MAIL_EVENTS, Event, EventBus
from .factory import MailServiceFactory, service_name
from .service import MailService, SendResult
from .services import ServiceContainer

__all__ = [
    "MailerApp",
    "MailService",
    "MailServiceFactory",
    "SendResult",
    "ServiceContainer",
    "Event",
    "EventBus",
    "MAIL_EVENTS",
    "load_config",
    "merge_config",
    "resolve_config",
    "service_name",
    "MailerError",
    "ConfigurationError",
    "ConfigurationNotFoundError",
    "CircularInheritanceError",
    "InvalidTransportError",
    "InvalidRendererError",
    "InvalidListenerError",
]
