"""Error types raised while building mail services."""

from __future__ import annotations

from typing import Any, Sequence


def _describe(value: Any) -> str:
    if isinstance(value, type):
        return f"class {value.__module__}.{value.__qualname__}"
    if value is None:
        return "None"
    return type(value).__qualname__


class MailerError(Exception):
    """Base type for mailer failures."""


class ConfigurationError(MailerError):
    """Raised when a mail service configuration cannot be used."""

    def __init__(self, message: str, *, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class ConfigurationNotFoundError(ConfigurationError):
    """Raised when the requested mail service is not configured."""

    def __init__(self, requested_name: str, name: str | None) -> None:
        super().__init__(
            f"Requested mail service {requested_name!r} could not be found. Register it as "
            f"{name!r} under the mailer_options.mail_services config entry",
            name=name,
        )
        self.requested_name = requested_name


class CircularInheritanceError(ConfigurationError):
    """Raised when an ``extends`` chain visits the same entry twice."""

    def __init__(self, name: str, chain: Sequence[str]) -> None:
        path = " -> ".join((*chain, name))
        super().__init__(
            f"circular inheritance while resolving mail service config ({path}). Review 'extends'.",
            name=name,
        )
        self.chain = tuple(chain)


class _InvalidReferenceError(MailerError):
    label = "reference"

    def __init__(
        self,
        message: str,
        *,
        reference: Any = None,
        expected: Sequence[str] = (),
    ) -> None:
        super().__init__(message)
        self.reference = reference
        self.expected = tuple(expected)

    @classmethod
    def from_valid_types(cls, valid_types: Sequence[str], value: Any, label: str | None = None):
        """Build an error for a value whose type is not one of ``valid_types``."""

        label = label or cls.label
        message = (
            f"Provided {label} is of type {_describe(value)!r}, "
            f"but one of [{', '.join(repr(t) for t in valid_types)}] was expected"
        )
        return cls(message, reference=value, expected=valid_types)


class InvalidTransportError(_InvalidReferenceError):
    """Raised when a transport reference cannot be resolved to a transport."""

    label = "transport"


class InvalidRendererError(_InvalidReferenceError):
    """Raised when a renderer reference cannot be resolved to a mail renderer."""

    label = "renderer"


class InvalidListenerError(_InvalidReferenceError):
    """Raised when a listener declaration is malformed or unresolvable."""

    label = "listener"

    def __init__(
        self,
        message: str,
        *,
        reference: Any = None,
        expected: Sequence[str] = (),
        event: str | None = None,
    ) -> None:
        super().__init__(message, reference=reference, expected=expected)
        self.event = event


__all__ = [
    "MailerError",
    "ConfigurationError",
    "ConfigurationNotFoundError",
    "CircularInheritanceError",
    "InvalidTransportError",
    "InvalidRendererError",
    "InvalidListenerError",
]
