"""Where: src/infinibrowser/shared/results.py
What: Tagged result variants returned by every client call.
Why: Expected failures travel as values so callers branch on ``ok``/``error_code``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Generic, Literal, TypeAlias, TypeVar

import requests

from infinibrowser.domain.errors import ResultError

T = TypeVar("T")
E = TypeVar("E")


class ErrorCode(StrEnum):
    """Failure discriminants carried by ``ApplicationError`` and ``TransportError``."""

    NOT_OK = "NOT_OK"
    SYNTAX_ERROR = "SYNTAX_ERROR"
    TIMEOUT = "TIMEOUT"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


TransportErrorCode: TypeAlias = Literal["SYNTAX_ERROR", "TIMEOUT", "UNKNOWN_ERROR"]


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """2xx response with a decoded JSON body."""

    data: T
    raw_response: requests.Response = field(repr=False)
    ok: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class ApplicationError(Generic[E]):
    """Non-2xx response whose JSON body describes the failure."""

    data: E
    raw_response: requests.Response = field(repr=False)
    ok: Literal[False] = field(default=False, init=False)
    error_code: Literal["NOT_OK"] = field(default="NOT_OK", init=False)

    @property
    def status(self) -> int:
        return int(self.raw_response.status_code)


@dataclass(frozen=True, slots=True)
class TransportError:
    """The exchange failed before a usable response body was obtained."""

    error_code: TransportErrorCode
    error: BaseException
    ok: Literal[False] = field(default=False, init=False)


Result: TypeAlias = Success[T] | ApplicationError[E] | TransportError


def unwrap(result: Success[T] | ApplicationError[Any] | TransportError) -> T:
    """Return the payload of a successful result.

    Args:
        result: Value produced by a client call.

    Returns:
        The decoded success body.

    Raises:
        ResultError: If ``result`` is an ``ApplicationError`` or ``TransportError``.
    """

    if isinstance(result, Success):
        return result.data
    raise ResultError(result)


__all__ = [
    "ApplicationError",
    "ErrorCode",
    "Result",
    "Success",
    "TransportError",
    "TransportErrorCode",
    "unwrap",
]
