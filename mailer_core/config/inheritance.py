"""Resolve the ``extends`` chain of a mail service configuration entry."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from mailer_core.errors import CircularInheritanceError, ConfigurationError

from .merge import merge_config

EXTENDS_KEY = "extends"

logger = logging.getLogger(__name__)


def resolve_config(
    services: Mapping[str, Mapping[str, Any]],
    name: str,
    entry: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Flatten the configuration of ``name`` with all of its ancestors.

    ``entry`` defaults to ``services[name]``. The returned mapping never
    contains ``extends``; keys from more specific entries win over the keys
    of their ancestors.
    """

    if entry is None:
        if name not in services:
            raise ConfigurationError(
                f"mail service {name!r} is not configured inside mailer_options.mail_services",
                name=name,
            )
        entry = services[name]

    if not isinstance(entry, Mapping):
        raise ConfigurationError(
            f"configuration of mail service {name!r} must be a mapping",
            name=name,
        )

    resolved = merge_config({}, entry)
    visited: list[str] = [name]
    while EXTENDS_KEY in resolved:
        parent = resolved.pop(EXTENDS_KEY)
        if not isinstance(parent, str):
            raise ConfigurationError(
                f"'{EXTENDS_KEY}' of mail service {visited[-1]!r} must be a service name, "
                f"got {type(parent).__name__!r}",
                name=visited[-1],
            )
        if parent in visited:
            raise CircularInheritanceError(parent, visited)
        visited.append(parent)

        ancestor = services.get(parent)
        if ancestor is None:
            raise ConfigurationError(
                f"Provided service {parent!r} to extend from is not configured "
                "inside mailer_options.mail_services",
                name=parent,
            )
        if not isinstance(ancestor, Mapping):
            raise ConfigurationError(
                f"configuration of mail service {parent!r} must be a mapping",
                name=parent,
            )
        resolved = merge_config(ancestor, resolved)

    if len(visited) > 1:
        logger.debug("resolved mail service %s through %s", name, " -> ".join(visited))
    return resolved
