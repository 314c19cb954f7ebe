"""Shared result types."""

from __future__ import annotations

from .results import (
    ApplicationError,
    ErrorCode,
    Result,
    Success,
    TransportError,
    TransportErrorCode,
    unwrap,
)

__all__ = [
    "ApplicationError",
    "ErrorCode",
    "Result",
    "Success",
    "TransportError",
    "TransportErrorCode",
    "unwrap",
]
