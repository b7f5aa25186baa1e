"""Adapters exposing alternate renderer shapes as :class:`MailViewRenderer`."""

from __future__ import annotations

from typing import Any, Mapping

from .base import MailViewRenderer, TemplateRenderer, ViewModel, ViewRenderer

LAYOUT_PARAM = "layout"
CONTENT_VARIABLE = "content"


class TemplateEngineMailViewRenderer(MailViewRenderer):
    """Delegate to a :class:`TemplateRenderer`."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def render(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        return self.renderer.render(name, dict(params or {}))


class ViewModelMailViewRenderer(MailViewRenderer):
    """Delegate to a :class:`ViewRenderer`, building view models on the fly.

    A ``layout`` parameter names a second template that receives the first
    rendering as its ``content`` variable.
    """

    def __init__(self, renderer: ViewRenderer) -> None:
        self.renderer = renderer

    def render(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        variables = dict(params or {})
        layout = variables.pop(LAYOUT_PARAM, None)
        content = self.renderer.render(ViewModel(template=name, variables=variables))
        if layout is None:
            return content
        layout_variables = {**variables, CONTENT_VARIABLE: content}
        return self.renderer.render(ViewModel(template=layout, variables=layout_variables))
