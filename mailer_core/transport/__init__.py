"""Mail transports and transport resolution."""

from .base import Transport
from .file import FileTransport
from .in_memory import InMemoryTransport
from .options import DEFAULT_FILE_PATH, FileOptions, SmtpOptions
from .resolver import (
    DEFAULT_TRANSPORT,
    TRANSPORT_ALIASES,
    configure_transport,
    import_transport_class,
    resolve_transport,
)
from .sendmail import SendmailTransport
from .smtp import SmtpTransport

__all__ = [
    "Transport",
    "FileTransport",
    "InMemoryTransport",
    "SendmailTransport",
    "SmtpTransport",
    "FileOptions",
    "SmtpOptions",
    "DEFAULT_FILE_PATH",
    "DEFAULT_TRANSPORT",
    "TRANSPORT_ALIASES",
    "configure_transport",
    "import_transport_class",
    "resolve_transport",
]
