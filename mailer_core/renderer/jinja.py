"""Default mail renderer backed by Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, StrictUndefined

from .base import MailViewRenderer


class Jinja2MailViewRenderer(MailViewRenderer):
    """Render mail templates from directories and/or in-memory sources."""

    def __init__(
        self,
        template_paths: Iterable[Path | str] = (),
        templates: Mapping[str, str] | None = None,
        *,
        autoescape: bool = True,
    ) -> None:
        loaders = []
        if templates:
            loaders.append(DictLoader(dict(templates)))
        paths = [str(path) for path in template_paths]
        if paths:
            loaders.append(FileSystemLoader(paths))
        self._env = Environment(
            loader=ChoiceLoader(loaders),
            undefined=StrictUndefined,
            autoescape=autoescape,
        )

    @property
    def environment(self) -> Environment:
        return self._env

    def render(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        template = self._env.get_template(name)
        return template.render(**dict(params or {}))
