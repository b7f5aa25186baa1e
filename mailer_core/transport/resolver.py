"""Resolve the ``transport`` entry of a mail service configuration."""

from __future__ import annotations

import importlib
import inspect
import logging
from typing import Any, Callable, Mapping, Optional

from mailer_core.errors import InvalidTransportError
from mailer_core.services import ServiceContainer

from .base import Transport
from .file import FileTransport
from .in_memory import InMemoryTransport
from .options import FileOptions, SmtpOptions
from .sendmail import SendmailTransport
from .smtp import SmtpTransport

logger = logging.getLogger(__name__)

DEFAULT_TRANSPORT = "sendmail"

TRANSPORT_ALIASES: dict[str, type[Transport]] = {
    "sendmail": SendmailTransport,
    "smtp": SmtpTransport,
    "file": FileTransport,
    "in_memory": InMemoryTransport,
    "null": InMemoryTransport,
}

_Step = Callable[[Any, ServiceContainer], Optional[Transport]]


def _from_instance(reference: Any, _container: ServiceContainer) -> Transport | None:
    return reference if isinstance(reference, Transport) else None


def _from_alias(reference: Any, _container: ServiceContainer) -> Transport | None:
    transport_cls = TRANSPORT_ALIASES.get(reference)
    return transport_cls() if transport_cls is not None else None


def import_transport_class(reference: str) -> type[Transport] | None:
    """Import ``pkg.module:Class`` or ``pkg.module.Class`` if it names a transport."""

    if ":" in reference:
        module_path, attribute = reference.split(":", 1)
    elif "." in reference:
        module_path, attribute = reference.rsplit(".", 1)
    else:
        return None
    if not module_path or not attribute:
        return None

    try:
        module = importlib.import_module(module_path)
    except (ImportError, TypeError, ValueError):
        return None
    candidate = getattr(module, attribute, None)
    if (
        isinstance(candidate, type)
        and issubclass(candidate, Transport)
        and not inspect.isabstract(candidate)
    ):
        return candidate
    return None


def _from_type_name(reference: Any, _container: ServiceContainer) -> Transport | None:
    transport_cls = import_transport_class(reference)
    if transport_cls is None:
        return None
    try:
        return transport_cls()
    except Exception as exc:
        raise InvalidTransportError(
            f"transport class {reference!r} could not be instantiated: {exc}",
            reference=reference,
            expected=(Transport.__qualname__,),
        ) from exc


def _from_service(reference: Any, container: ServiceContainer) -> Transport | None:
    if not container.has(reference):
        return None
    instance = container.get(reference)
    if isinstance(instance, Transport):
        return instance
    raise InvalidTransportError(
        f"Provided transport service with name {reference!r} does not return a "
        f"{Transport.__qualname__!r} instance",
        reference=reference,
        expected=(Transport.__qualname__,),
    )


# first match wins
_STRING_STEPS: tuple[_Step, ...] = (_from_alias, _from_type_name, _from_service)


def resolve_transport(container: ServiceContainer, config: Mapping[str, Any]) -> Transport:
    """Return a configured transport for the resolved mail service ``config``."""

    reference = config.get("transport")
    if reference is None:
        reference = DEFAULT_TRANSPORT

    transport = _from_instance(reference, container)
    if transport is None:
        if not isinstance(reference, str):
            raise InvalidTransportError.from_valid_types(
                ["str", Transport.__qualname__], reference, "transport"
            )
        for step in _STRING_STEPS:
            transport = step(reference, container)
            if transport is not None:
                break
        else:
            raise InvalidTransportError(
                f"Registered transport {reference!r} is not either one of "
                f"[{', '.join(repr(alias) for alias in TRANSPORT_ALIASES)}], "
                f"a {Transport.__qualname__!r} subclass or a registered service.",
                reference=reference,
                expected=(*TRANSPORT_ALIASES, Transport.__qualname__),
            )

    logger.debug("resolved transport %r to %s", reference, type(transport).__qualname__)
    return configure_transport(transport, config)


def configure_transport(transport: Transport, config: Mapping[str, Any]) -> Transport:
    """Apply ``transport_options`` to the SMTP and file transports."""

    options = config.get("transport_options")
    if isinstance(transport, SmtpTransport):
        transport.set_options(SmtpOptions.from_mapping(options))
    elif isinstance(transport, FileTransport):
        transport.set_options(FileOptions.from_mapping(options))
    return transport
