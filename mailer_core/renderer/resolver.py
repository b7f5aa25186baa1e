"""Resolve the ``renderer`` entry of a mail service configuration."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from mailer_core.errors import InvalidRendererError
from mailer_core.services import ServiceContainer

from .adapters import TemplateEngineMailViewRenderer, ViewModelMailViewRenderer
from .base import MailViewRenderer, TemplateRenderer, ViewRenderer

logger = logging.getLogger(__name__)

DEFAULT_RENDERER_SERVICE = "mailer.view_renderer"

# capability -> wrapper producing a MailViewRenderer
_ADAPTERS: tuple[tuple[type, Callable[[Any], MailViewRenderer]], ...] = (
    (MailViewRenderer, lambda renderer: renderer),
    (TemplateRenderer, TemplateEngineMailViewRenderer),
    (ViewRenderer, ViewModelMailViewRenderer),
)


def adapt_renderer(renderer: Any) -> MailViewRenderer:
    """Return ``renderer`` as a :class:`MailViewRenderer`, wrapping it when needed."""

    for capability, adapter in _ADAPTERS:
        if isinstance(renderer, capability):
            return adapter(renderer)
    raise InvalidRendererError.from_valid_types(
        [capability.__qualname__ for capability, _ in _ADAPTERS],
        renderer,
        "renderer",
    )


def resolve_renderer(container: ServiceContainer, config: Mapping[str, Any]) -> MailViewRenderer:
    """Return the renderer for the resolved mail service ``config``."""

    name = config.get("renderer")
    if name is None:
        name = DEFAULT_RENDERER_SERVICE
    if not isinstance(name, str):
        raise InvalidRendererError.from_valid_types(["str"], name, "renderer")
    if not container.has(name):
        raise InvalidRendererError(
            f"Renderer service {name!r} is not registered",
            reference=name,
            expected=(MailViewRenderer.__qualname__,),
        )

    renderer = adapt_renderer(container.get(name))
    logger.debug("resolved renderer %r to %s", name, type(renderer).__qualname__)
    return renderer
