"""Tests for ``ClientConfig`` and ``load_config``."""

from __future__ import annotations

import dataclasses
import textwrap
from pathlib import Path

import pytest

from infinibrowser.config.config import (
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT_MS,
    ENV_API_URL,
    ENV_TIMEOUT_MS,
    ClientConfig,
    load_config,
)
from infinibrowser.domain.errors import ConfigError
from infinibrowser.platform.http.request import RequestOptions


def _write(path: Path, content: str) -> Path:
    _ = path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def test_defaults() -> None:
    config = ClientConfig()

    assert config.api_url == "https://infinibrowser.wiki/api"
    assert config.timeout_ms == 1000
    assert config.timeout_seconds == 1.0
    assert config.base_request_overrides is None


def test_config_is_frozen() -> None:
    config = ClientConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.timeout_ms = 5  # pyright: ignore[reportAttributeAccessIssue]


def test_merged_returns_new_config_and_keeps_original() -> None:
    original = ClientConfig(timeout_ms=500)

    merged = original.merged(api_url="http://localhost:8080/api")

    assert merged.api_url == "http://localhost:8080/api"
    assert merged.timeout_ms == 500
    assert original.api_url == DEFAULT_API_URL


def test_merged_combines_header_overrides() -> None:
    original = ClientConfig(
        base_request_overrides=RequestOptions(headers={"User-Agent": "a", "X-Key": "1"})
    )

    merged = original.merged(
        base_request_overrides=RequestOptions(method="GET", headers={"User-Agent": "b"})
    )

    assert merged.base_request_overrides == RequestOptions(
        method="GET", headers={"User-Agent": "b", "X-Key": "1"}
    )


def test_load_config_without_file_uses_defaults(portable_repo_root: Path) -> None:
    config = load_config(env={})

    assert config == ClientConfig()


def test_load_config_reads_client_table(portable_repo_root: Path) -> None:
    config_dir = portable_repo_root / "config"
    config_dir.mkdir()
    _ = _write(
        config_dir / "infinibrowser.toml",
        """
        [client]
        api_url = "http://localhost:3000/api"
        timeout_ms = 2500

        [client.headers]
        User-Agent = "lineage-bot/1.0"
        """,
    )

    config = load_config(env={})

    assert config.api_url == "http://localhost:3000/api"
    assert config.timeout_ms == 2500
    assert config.base_request_overrides == RequestOptions(
        headers={"User-Agent": "lineage-bot/1.0"}
    )


def test_environment_overrides_file(tmp_path: Path) -> None:
    config_file = _write(
        tmp_path / "custom.toml",
        """
        [client]
        api_url = "http://file/api"
        timeout_ms = 2500
        """,
    )

    config = load_config(
        config_file,
        env={ENV_API_URL: "http://env/api", ENV_TIMEOUT_MS: "750"},
    )

    assert config.api_url == "http://env/api"
    assert config.timeout_ms == 750


@pytest.mark.parametrize("raw", ["soon", "0", "-5"])
def test_invalid_env_timeout_is_ignored(portable_repo_root: Path, raw: str) -> None:
    config = load_config(env={ENV_TIMEOUT_MS: raw})

    assert config.timeout_ms == DEFAULT_TIMEOUT_MS


def test_invalid_file_timeout_is_ignored(tmp_path: Path) -> None:
    config_file = _write(
        tmp_path / "custom.toml",
        """
        [client]
        timeout_ms = true
        """,
    )

    assert load_config(config_file, env={}).timeout_ms == DEFAULT_TIMEOUT_MS


def test_malformed_file_raises_config_error(tmp_path: Path) -> None:
    config_file = _write(tmp_path / "broken.toml", "[client\napi_url = ")

    with pytest.raises(ConfigError):
        _ = load_config(config_file, env={})
