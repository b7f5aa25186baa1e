"""Renderer interfaces understood by the mail service factory.

``MailViewRenderer`` is the only interface used by :class:`MailService`.
``TemplateRenderer`` (template engines addressed by template name) and
``ViewRenderer`` (renderers consuming a :class:`ViewModel`) are accepted
too and wrapped by an adapter from :mod:`mailer_core.renderer.adapters`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping


class MailViewRenderer(ABC):
    """Turn a template name plus parameters into a message body."""

    @abstractmethod
    def render(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        """Render template ``name`` with ``params``."""


class TemplateRenderer(ABC):
    """Template engine addressed by template name."""

    @abstractmethod
    def render(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        """Render template ``name`` with ``params``."""

    @abstractmethod
    def add_default_param(self, template_name: str, param: str, value: Any) -> None:
        """Provide a value used for ``param`` unless the caller overrides it."""


@dataclass
class ViewModel:
    template: str
    variables: dict[str, Any] = field(default_factory=dict)


class ViewRenderer(ABC):
    """Renderer consuming view models."""

    @abstractmethod
    def render(self, model: ViewModel) -> str:
        """Render ``model`` and return the result."""
