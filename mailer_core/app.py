"""Host-side wiring for the container, configuration and mail services."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Mapping

from mailer_core.config import ROOT_KEY, load_config, mail_services_from
from mailer_core.factory import CONFIG_SERVICE, MailServiceFactory, service_name
from mailer_core.renderer import DEFAULT_RENDERER_SERVICE, Jinja2MailViewRenderer
from mailer_core.service import MailService
from mailer_core.services import ServiceContainer

ServiceProvider = Callable[[ServiceContainer], Any]


def _default_renderer(container: ServiceContainer) -> Jinja2MailViewRenderer:
    options = container.get(CONFIG_SERVICE).get(ROOT_KEY) or {}
    return Jinja2MailViewRenderer(template_paths=options.get("template_paths") or ())


class MailerApp:
    """Entry point that registers the config and builds mail services on demand."""

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        *,
        config_path: Path | str | None = None,
        logger: logging.Logger | None = None,
        container: ServiceContainer | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger("mailer_core.app")
        self.container = container or ServiceContainer()
        self.config = dict(config) if config is not None else load_config(config_path)
        self.factory = MailServiceFactory(logger=self.logger)
        self._register_services()

    def _register_services(self) -> None:
        self._register_service(CONFIG_SERVICE, lambda _: self.config)
        self._register_service(DEFAULT_RENDERER_SERVICE, _default_renderer)
        for name in mail_services_from(self.config):
            self._register_service(
                service_name(name),
                lambda container, requested=service_name(name): self.factory(container, requested),
            )

    def _register_service(
        self,
        name: str,
        provider: ServiceProvider,
        *,
        singleton: bool = True,
    ) -> None:
        try:
            self.container.register(name, provider, singleton=singleton)
        except ValueError:
            self.logger.debug("service %s already registered, skipping", name)

    def mail_service(self, name: str) -> MailService:
        """Return the mail service configured as ``name``, built once per app."""
        requested = service_name(name)
        if self.container.has(requested):
            return self.container.get(requested)
        return self.factory(self.container, requested)

    def service_names(self) -> tuple[str, ...]:
        return tuple(sorted(mail_services_from(self.config)))
