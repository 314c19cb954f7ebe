"""Shared path utilities for configuration locations.

Policy:
- Config: ``INFINIBROWSER_CONFIG`` when set, otherwise
  ``<repo_root>/config/infinibrowser.toml`` where ``repo_root`` is the first
  ancestor of the installed package holding ``pyproject.toml`` or ``.git``.
- No marker found (a regular site-packages install): no default file. The
  current working directory is never consulted.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

ENV_CONFIG_FILE: Final[str] = "INFINIBROWSER_CONFIG"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path | None],
) -> Path | None:
    """Resolve a path from an explicit value, an environment variable, or a default.

    Returns ``None`` when neither override is given and the default factory
    has nothing to offer.
    """

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve() if default_path is not None else None


def _detect_repo_root(start: Path | None = None) -> Path | None:
    """Walk up from ``start`` (this file by default) to a ``pyproject.toml`` or ``.git`` marker."""

    here = (start or Path(__file__).resolve()).parent
    for candidate in (here, *here.parents):
        if (candidate / "pyproject.toml").exists() or (candidate / ".git").exists():
            return candidate
    return None


def default_config_path() -> Path | None:
    """Get the repository config file, or ``None`` outside a source checkout."""
    repo_root = _detect_repo_root()
    if repo_root is None:
        return None
    return (repo_root / "config" / "infinibrowser.toml").resolve()


def resolve_config_path(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path | None:
    """Return the config file to read, honoring ``INFINIBROWSER_CONFIG``."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=ENV_CONFIG_FILE,
        default_factory=default_config_path,
    )


__all__ = [
    "ENV_CONFIG_FILE",
    "default_config_path",
    "resolve_config_path",
    "resolve_overridable_path",
]
