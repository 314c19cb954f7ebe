"""Where: src/infinibrowser/platform/http/transport.py
What: Send one HTTP request under a deadline and classify the outcome.
Why: Every endpoint shares the same send, decode and error-mapping path.
"""

from __future__ import annotations

import json
import socket
import threading
import time
from typing import Any, Final, TypeVar, cast

import requests
from urllib3.exceptions import ConnectTimeoutError, ReadTimeoutError
from urllib3.util import Timeout

from infinibrowser.platform.logging import logger
from infinibrowser.shared.results import (
    ApplicationError,
    ErrorCode,
    Result,
    Success,
    TransportError,
)

from .request import RequestOptions, merge_request_options

T = TypeVar("T")
E = TypeVar("E")

ACCEPT_ENCODING: Final[str] = "gzip, deflate, identity"
_FORCED_OPTIONS: Final[RequestOptions] = RequestOptions(
    headers={"Accept-Encoding": ACCEPT_ENCODING}
)


class DeadlineExceeded(requests.Timeout):
    """The call as a whole outlived its deadline."""


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0


def _response_socket(response: requests.Response) -> socket.socket | None:
    """Return the socket still feeding ``response``, if the body is unread.

    http.client detaches the socket from the connection for ``Connection:
    close`` replies; it then lives behind the buffered response stream.
    """

    connection = getattr(response.raw, "connection", None)
    sock = getattr(connection, "sock", None)
    if isinstance(sock, socket.socket):
        return sock
    stream = getattr(getattr(response.raw, "_fp", None), "fp", None)
    sock = getattr(getattr(stream, "raw", None), "_sock", None)
    return sock if isinstance(sock, socket.socket) else None


def _is_timeout(exc: BaseException) -> bool:
    """Recognise deadline failures, including those requests re-wraps as ``ConnectionError``."""

    if isinstance(exc, requests.Timeout):
        return True
    if isinstance(exc, requests.ConnectionError):
        causes = (*exc.args, exc.__cause__, exc.__context__)
        return any(isinstance(cause, (ReadTimeoutError, ConnectTimeoutError)) for cause in causes)
    return False


class _Watchdog:
    """Shut the response socket down once the remaining budget is spent.

    A blocked body read wakes up with EOF, so a server that stalls or
    trickles bytes cannot hold the call past its deadline.
    """

    def __init__(self, response: requests.Response, remaining: float) -> None:
        self.fired: threading.Event = threading.Event()
        self._sock: socket.socket | None = _response_socket(response)
        self._timer: threading.Timer = threading.Timer(max(0.0, remaining), self._fire)
        self._timer.daemon = True

    def _fire(self) -> None:
        self.fired.set()
        if self._sock is None:
            return
        try:
            # Plain socket shutdown, bypassing any TLS wrapper state.
            socket.socket.shutdown(self._sock, socket.SHUT_RDWR)
        except OSError as exc:
            logger.debug("Socket already closed at deadline: %s", exc)

    def start(self) -> None:
        self._timer.start()

    def cancel(self) -> None:
        self._timer.cancel()


def fetch_with_timeout(
    url: str,
    options: RequestOptions | None = None,
    *,
    timeout_ms: int,
    base_overrides: RequestOptions | None = None,
    session: requests.Session | None = None,
) -> Result[T, E]:
    """Issue a request and return exactly one result value.

    ``base_overrides`` are applied first, then ``options``, then the forced
    ``Accept-Encoding`` header. ``timeout_ms`` is one wall-clock budget for
    the whole call: urllib3's total timeout covers connecting and waiting for
    the headers, and a watchdog timer covers reading the body. The timer is
    cancelled on every exit path.

    Args:
        url: Absolute request URL.
        options: Call-specific method, headers and body.
        timeout_ms: Deadline in milliseconds.
        base_overrides: Client-wide defaults merged under ``options``.
        session: Optional session for connection reuse.

    Returns:
        Result: ``Success`` for 2xx, ``ApplicationError`` for other statuses,
        ``TransportError`` when the body is not JSON, the deadline elapses, or
        the exchange fails for any other reason.
    """

    merged = merge_request_options(base_overrides, options, _FORCED_OPTIONS)
    method = merged.method or "GET"
    budget = timeout_ms / 1000.0
    sender = session if session is not None else requests

    started = time.perf_counter()
    deadline = time.monotonic() + budget
    logger.debug(
        "Sending %s %s",
        method,
        url,
        extra={"request_event": "request.start", "method": method, "url": url},
    )

    response: requests.Response | None = None
    watchdog: _Watchdog | None = None
    try:
        response = sender.request(
            method,
            url,
            headers=dict(merged.headers or {}),
            data=merged.body,
            timeout=Timeout(total=budget, connect=budget, read=budget),
            stream=True,
        )
        watchdog = _Watchdog(response, deadline - time.monotonic())
        watchdog.start()
        try:
            _ = response.content
        finally:
            watchdog.cancel()
        if watchdog.fired.is_set():
            raise DeadlineExceeded(f"response body not received within {timeout_ms} ms")
        if response.encoding is None:
            response.encoding = "utf-8"
        body: Any = json.loads(response.text)
    except json.JSONDecodeError as exc:
        status = response.status_code if response is not None else None
        logger.warning(
            "Infinibrowser returned a non-JSON body for %s %s: %s",
            method,
            url,
            exc,
            extra={
                "request_event": "request.error",
                "method": method,
                "url": url,
                "status": status,
                "error_code": ErrorCode.SYNTAX_ERROR.value,
                "duration_ms": _elapsed_ms(started),
            },
        )
        return TransportError(error_code="SYNTAX_ERROR", error=exc)
    except Exception as exc:
        if _is_timeout(exc) or (watchdog is not None and watchdog.fired.is_set()):
            logger.warning(
                "Infinibrowser request timed out after %d ms: %s %s",
                timeout_ms,
                method,
                url,
                extra={
                    "request_event": "request.error",
                    "method": method,
                    "url": url,
                    "error_code": ErrorCode.TIMEOUT.value,
                    "duration_ms": _elapsed_ms(started),
                },
            )
            return TransportError(error_code="TIMEOUT", error=exc)
        logger.warning(
            "Infinibrowser request failed: %s %s: %s",
            method,
            url,
            exc,
            extra={
                "request_event": "request.error",
                "method": method,
                "url": url,
                "error_code": ErrorCode.UNKNOWN_ERROR.value,
                "duration_ms": _elapsed_ms(started),
            },
        )
        return TransportError(error_code="UNKNOWN_ERROR", error=exc)
    finally:
        if response is not None:
            response.close()

    if not 200 <= response.status_code < 300:
        logger.info(
            "Infinibrowser responded with status %s for %s %s",
            response.status_code,
            method,
            url,
            extra={
                "request_event": "request.not_ok",
                "method": method,
                "url": url,
                "status": response.status_code,
                "error_code": ErrorCode.NOT_OK.value,
                "duration_ms": _elapsed_ms(started),
            },
        )
        return ApplicationError(data=cast(E, body), raw_response=response)

    logger.debug(
        "Received %s for %s %s",
        response.status_code,
        method,
        url,
        extra={
            "request_event": "request.success",
            "method": method,
            "url": url,
            "status": response.status_code,
            "duration_ms": _elapsed_ms(started),
        },
    )
    return Success(data=cast(T, body), raw_response=response)


__all__ = ["ACCEPT_ENCODING", "DeadlineExceeded", "fetch_with_timeout"]
