"""Mail renderers and renderer resolution."""

from .adapters import TemplateEngineMailViewRenderer, ViewModelMailViewRenderer
from .base import MailViewRenderer, TemplateRenderer, ViewModel, ViewRenderer
from .jinja import Jinja2MailViewRenderer
from .resolver import DEFAULT_RENDERER_SERVICE, adapt_renderer, resolve_renderer

__all__ = [
    "MailViewRenderer",
    "TemplateRenderer",
    "ViewRenderer",
    "ViewModel",
    "TemplateEngineMailViewRenderer",
    "ViewModelMailViewRenderer",
    "Jinja2MailViewRenderer",
    "DEFAULT_RENDERER_SERVICE",
    "adapt_renderer",
    "resolve_renderer",
]
