"""Build mail services from the ``mailer_options.mail_services`` config."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from mailer_core.config import mail_services_from, resolve_config
from mailer_core.errors import ConfigurationNotFoundError
from mailer_core.events import EventBus
from mailer_core.listeners import attach_mail_listeners
from mailer_core.renderer import resolve_renderer
from mailer_core.service import MailService
from mailer_core.services import ServiceContainer
from mailer_core.transport import resolve_transport

CONFIG_SERVICE = "config"
SERVICE_PREFIX = "mailer"
SERVICE_KIND = "mailservice"


def service_name(name: str) -> str:
    """Return the container name under which mail service ``name`` is built."""

    return f"{SERVICE_PREFIX}.{SERVICE_KIND}.{name}"


def _split_requested_name(requested_name: str) -> str | None:
    parts = requested_name.split(".")
    if len(parts) != 3 or parts[0] != SERVICE_PREFIX or parts[1] != SERVICE_KIND:
        return None
    return parts[2] or None


class MailServiceFactory:
    """Abstract factory for ``mailer.mailservice.<name>`` services."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def _mail_services(self, container: ServiceContainer) -> Mapping[str, Mapping[str, Any]]:
        if not container.has(CONFIG_SERVICE):
            return {}
        return mail_services_from(container.get(CONFIG_SERVICE))

    def can_create(self, container: ServiceContainer, requested_name: str) -> bool:
        name = _split_requested_name(requested_name)
        if name is None:
            return False
        return name in self._mail_services(container)

    def __call__(self, container: ServiceContainer, requested_name: str) -> MailService:
        name = _split_requested_name(requested_name)
        services = self._mail_services(container)
        entry = services.get(name) if name is not None else None
        if entry is None:
            raise ConfigurationNotFoundError(requested_name, name)

        config = resolve_config(services, name, entry)
        transport = resolve_transport(container, config)
        renderer = resolve_renderer(container, config)
        mail_service = MailService(transport, renderer, EventBus())
        definitions = attach_mail_listeners(mail_service.events, container, config)

        self.logger.debug(
            "built mail service %s transport=%s renderer=%s lazy_listeners=%s",
            requested_name,
            type(transport).__qualname__,
            type(renderer).__qualname__,
            len(definitions),
        )
        return mail_service
