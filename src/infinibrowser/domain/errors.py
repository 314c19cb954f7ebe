"""Where: src/infinibrowser/domain/errors.py
What: Exception hierarchy raised by the Infinibrowser client.
Why: Only preconditions, configuration and opt-in unwrapping raise; everything else is a result.
"""

from __future__ import annotations

from typing import Any


class InfinibrowserError(Exception):
    """Base class for all exceptions raised by this package."""


class EmptyLineageError(InfinibrowserError, ValueError):
    """Raised when a lineage to share contains no steps."""

    def __init__(self, message: str = "Lineage must not be empty") -> None:
        super().__init__(message)


class ConfigError(InfinibrowserError):
    """Raised when a configuration file cannot be parsed."""


class ResultError(InfinibrowserError):
    """Raised by ``unwrap`` when a call did not succeed."""

    def __init__(self, result: Any) -> None:
        self.result: Any = result
        code = getattr(result, "error_code", "UNKNOWN_ERROR")
        detail = getattr(result, "error", None) or getattr(result, "data", None)
        super().__init__(f"{code}: {detail!r}")


__all__ = [
    "ConfigError",
    "EmptyLineageError",
    "InfinibrowserError",
    "ResultError",
]
