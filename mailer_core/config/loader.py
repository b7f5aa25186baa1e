"""Load the mailer configuration surface from YAML or TOML files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import tomllib
import yaml
from platformdirs import user_config_dir

from mailer_core.errors import ConfigurationError

DEFAULT_APP_NAME = "mailer"
CONFIG_FILE_NAME = "mailer.yml"
CONFIG_ENV_VAR = "MAILER_CONFIG"

ROOT_KEY = "mailer_options"
SERVICES_KEY = "mail_services"

_YAML_SUFFIXES = {".yml", ".yaml"}
_TOML_SUFFIXES = {".toml"}


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return ``$MAILER_CONFIG`` or the platform-specific default config path."""

    env = os.environ if env is None else env
    if override := env.get(CONFIG_ENV_VAR):
        return Path(override).expanduser()
    base_dir = Path(user_config_dir(DEFAULT_APP_NAME, appauthor=False))
    return base_dir / CONFIG_FILE_NAME


def _ensure_mapping(data: Any, label: str) -> Mapping[str, Any]:
    if isinstance(data, Mapping):
        return data
    raise ConfigurationError(f"expected mapping for {label}")


def load_config(path: Path | str | None = None) -> dict[str, Any]:
    """Read a configuration document; a missing file yields an empty config."""

    config_path = Path(path) if path is not None else default_config_path()
    if not config_path.exists():
        return {}

    suffix = config_path.suffix.lower()
    try:
        if suffix in _YAML_SUFFIXES:
            with config_path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        elif suffix in _TOML_SUFFIXES:
            with config_path.open("rb") as handle:
                data = tomllib.load(handle)
        else:
            raise ConfigurationError(f"unsupported config format {suffix!r} for {config_path}")
    except (OSError, yaml.YAMLError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"unable to read config at {config_path}") from exc

    if data is None:
        return {}
    return dict(_ensure_mapping(data, str(config_path)))


def mail_services_from(config: Mapping[str, Any]) -> Mapping[str, Mapping[str, Any]]:
    """Return the ``mailer_options.mail_services`` section of ``config``."""

    options = _ensure_mapping(config.get(ROOT_KEY) or {}, ROOT_KEY)
    return _ensure_mapping(options.get(SERVICES_KEY) or {}, f"{ROOT_KEY}.{SERVICES_KEY}")
