"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from infinibrowser.config.paths import (
    ENV_CONFIG_FILE,
    default_config_path,
    resolve_config_path,
)


def test_default_config_path(portable_repo_root: Path) -> None:
    """Default config lives under the repository config/ folder."""

    assert default_config_path() == portable_repo_root / "config" / "infinibrowser.toml"


def test_env_var_overrides_default(portable_repo_root: Path, tmp_path: Path) -> None:
    target = tmp_path / "elsewhere.toml"

    resolved = resolve_config_path(env={ENV_CONFIG_FILE: f"  {target}  "})

    assert resolved == target.resolve()
    assert resolved != default_config_path()


def test_explicit_path_beats_env(portable_repo_root: Path, tmp_path: Path) -> None:
    explicit = tmp_path / "explicit.toml"

    resolved = resolve_config_path(explicit, env={ENV_CONFIG_FILE: str(tmp_path / "env.toml")})

    assert resolved == explicit.resolve()


def test_blank_env_var_falls_back_to_default(portable_repo_root: Path) -> None:
    assert resolve_config_path(env={ENV_CONFIG_FILE: "   "}) == default_config_path()


def test_no_repo_marker_means_no_default_file(monkeypatch: pytest.MonkeyPatch) -> None:
    """Outside a source checkout no file is read, whatever the working directory."""

    import infinibrowser.config.paths as paths

    monkeypatch.setattr(paths, "_detect_repo_root", lambda _start=None: None, raising=True)

    assert default_config_path() is None
    assert resolve_config_path(env={}) is None


def test_load_config_ignores_cwd_config_without_marker(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import infinibrowser.config.paths as paths
    from infinibrowser.config.config import ClientConfig, load_config

    config_dir = tmp_path / "config"
    config_dir.mkdir()
    _ = (config_dir / "infinibrowser.toml").write_text('[client]\napi_url = "http://cwd/api"\n')
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(paths, "_detect_repo_root", lambda _start=None: None, raising=True)

    assert load_config(env={}) == ClientConfig()
