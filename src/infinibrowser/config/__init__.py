"""Client configuration and config-file discovery."""

from __future__ import annotations

from .config import (
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT_MS,
    ClientConfig,
    load_config,
)
from .paths import resolve_config_path

__all__ = [
    "ClientConfig",
    "DEFAULT_API_URL",
    "DEFAULT_TIMEOUT_MS",
    "load_config",
    "resolve_config_path",
]
