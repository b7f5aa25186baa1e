"""Configuration helpers for mail services."""

from .inheritance import EXTENDS_KEY, resolve_config
from .loader import (
    CONFIG_ENV_VAR,
    ROOT_KEY,
    SERVICES_KEY,
    default_config_path,
    load_config,
    mail_services_from,
)
from .merge import merge_config

__all__ = [
    "EXTENDS_KEY",
    "CONFIG_ENV_VAR",
    "ROOT_KEY",
    "SERVICES_KEY",
    "default_config_path",
    "load_config",
    "mail_services_from",
    "merge_config",
    "resolve_config",
]
