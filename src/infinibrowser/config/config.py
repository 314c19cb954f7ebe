"""Configuration management for the Infinibrowser client."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Final

from infinibrowser.domain.errors import ConfigError
from infinibrowser.platform.http.request import RequestOptions, merge_request_options
from infinibrowser.platform.logging import logger

from .paths import resolve_config_path

DEFAULT_API_URL: Final[str] = "https://infinibrowser.wiki/api"
DEFAULT_TIMEOUT_MS: Final[int] = 1000

ENV_API_URL: Final[str] = "INFINIBROWSER_API_URL"
ENV_TIMEOUT_MS: Final[str] = "INFINIBROWSER_TIMEOUT_MS"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable client settings.

    Attributes:
        api_url: Base URL every endpoint path is appended to.
        timeout_ms: Wall-clock deadline for one whole call, in milliseconds.
        base_request_overrides: Options merged into every request.
    """

    api_url: str = DEFAULT_API_URL
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    base_request_overrides: RequestOptions | None = None

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    def merged(
        self,
        *,
        api_url: str | None = None,
        timeout_ms: int | None = None,
        base_request_overrides: RequestOptions | None = None,
    ) -> ClientConfig:
        """Return a copy with the given fields applied.

        Request overrides are combined with the current ones rather than
        replacing them; headers merge key by key.
        """

        changes: dict[str, Any] = {}
        if api_url is not None:
            changes["api_url"] = api_url
        if timeout_ms is not None:
            changes["timeout_ms"] = timeout_ms
        if base_request_overrides is not None:
            changes["base_request_overrides"] = merge_request_options(
                self.base_request_overrides, base_request_overrides
            )
        return replace(self, **changes)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        logger.error("Failed to load configuration from %s: %s", path, e)
        raise ConfigError(f"Invalid configuration file {path}: {e}") from e


def _parse_timeout(raw: object, source: str) -> int | None:
    """Accept positive integers (or integer strings); warn and ignore anything else."""

    if isinstance(raw, bool):
        value = None
    elif isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            value = None
    if value is None or value <= 0:
        logger.warning("Ignoring invalid timeout_ms from %s: %r", source, raw)
        return None
    return value


def _section_to_changes(section: Mapping[str, Any], source: str) -> dict[str, Any]:
    changes: dict[str, Any] = {}

    api_url = section.get("api_url")
    if isinstance(api_url, str) and api_url.strip():
        changes["api_url"] = api_url.strip()

    if "timeout_ms" in section:
        timeout_ms = _parse_timeout(section["timeout_ms"], source)
        if timeout_ms is not None:
            changes["timeout_ms"] = timeout_ms

    headers = section.get("headers")
    if isinstance(headers, Mapping) and headers:
        changes["base_request_overrides"] = RequestOptions(
            headers={str(key): str(value) for key, value in headers.items()}
        )
    return changes


def load_config(
    path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> ClientConfig:
    """Load client settings from TOML and environment overrides.

    Resolution order, lowest first: built-in defaults, the ``[client]``
    table of the config file, then ``INFINIBROWSER_API_URL`` and
    ``INFINIBROWSER_TIMEOUT_MS``. A missing file is not an error.

    Args:
        path: Explicit config file; overrides ``INFINIBROWSER_CONFIG``.
        env: Environment mapping, defaults to ``os.environ``.

    Returns:
        ClientConfig: Resolved configuration.

    Raises:
        ConfigError: If the config file exists but is not valid TOML.
    """

    mapping = env if env is not None else os.environ
    config_file = resolve_config_path(path, mapping)
    config = ClientConfig()

    if config_file is not None and config_file.is_file():
        document = _read_toml(config_file)
        section = document.get("client", {})
        if isinstance(section, Mapping):
            config = config.merged(**_section_to_changes(section, str(config_file)))
        logger.debug("Configuration loaded from %s", config_file)

    env_section: dict[str, Any] = {}
    if mapping.get(ENV_API_URL):
        env_section["api_url"] = mapping[ENV_API_URL]
    if mapping.get(ENV_TIMEOUT_MS):
        env_section["timeout_ms"] = mapping[ENV_TIMEOUT_MS]
    if env_section:
        config = config.merged(**_section_to_changes(env_section, "environment"))

    return config


__all__ = [
    "ClientConfig",
    "DEFAULT_API_URL",
    "DEFAULT_TIMEOUT_MS",
    "ENV_API_URL",
    "ENV_TIMEOUT_MS",
    "load_config",
]
