"""Option objects applied to the SMTP and file transports."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Mapping

from mailer_core.errors import ConfigurationError

DEFAULT_FILE_PATH = "data/mail/output"


def _ensure_mapping(data: Any, label: str) -> Mapping[str, Any]:
    if isinstance(data, Mapping):
        return data
    raise ConfigurationError(f"expected mapping for {label}")


def _check_keys(cls: type, data: Mapping[str, Any], label: str) -> None:
    known = {item.name for item in fields(cls)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigurationError(
            f"unknown {label} option(s): {', '.join(unknown)}; expected any of {sorted(known)}"
        )


@dataclass
class SmtpOptions:
    host: str = "127.0.0.1"
    port: int = 25
    name: str = "localhost"
    connection_class: str = "smtp"
    connection_config: dict[str, Any] = field(default_factory=dict)
    connection_time_limit: float | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "SmtpOptions":
        raw = _ensure_mapping(data or {}, "smtp transport_options")
        _check_keys(cls, raw, "smtp transport")
        options = cls(**raw)
        if options.connection_class not in ("smtp", "plain", "login", "ssl"):
            raise ConfigurationError(
                f"unsupported smtp connection_class {options.connection_class!r}"
            )
        options.port = int(options.port)
        options.connection_config = dict(
            _ensure_mapping(options.connection_config, "smtp connection_config")
        )
        return options


def default_filename(_transport: Any) -> str:
    return f"mail_{int(time.time())}_{uuid.uuid4().hex}.eml"


@dataclass
class FileOptions:
    path: str = DEFAULT_FILE_PATH
    callback: Callable[[Any], str] = default_filename

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "FileOptions":
        raw = dict(_ensure_mapping(data or {}, "file transport_options"))
        _check_keys(cls, raw, "file transport")
        raw.setdefault("path", DEFAULT_FILE_PATH)
        if raw["path"] is None:
            raw["path"] = DEFAULT_FILE_PATH
        if not callable(raw.get("callback", default_filename)):
            raise ConfigurationError("file transport callback must be callable")
        return cls(**raw)
