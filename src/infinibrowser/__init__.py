"""Typed client for the Infinibrowser API.

Endpoint methods return ``Success``, ``ApplicationError`` or
``TransportError`` values instead of raising, so expected failures are
handled with ordinary branching.
"""

from __future__ import annotations

from .client import API_URL, DEFAULT_OPTIONS, Infinibrowser, ib
from .config import ClientConfig, load_config
from .domain import EmptyLineageError, InfinibrowserError, ResultError
from .platform.http import RequestOptions
from .platform.logging import setup_logger
from .shared import ApplicationError, ErrorCode, Result, Success, TransportError, unwrap

__version__ = "0.1.0"

__all__ = [
    "API_URL",
    "ApplicationError",
    "ClientConfig",
    "DEFAULT_OPTIONS",
    "EmptyLineageError",
    "ErrorCode",
    "Infinibrowser",
    "InfinibrowserError",
    "RequestOptions",
    "Result",
    "ResultError",
    "Success",
    "TransportError",
    "__version__",
    "ib",
    "load_config",
    "setup_logger",
    "unwrap",
]
