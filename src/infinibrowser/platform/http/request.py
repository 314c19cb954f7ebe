"""Where: src/infinibrowser/platform/http/request.py
What: Request specifications, option merging and URL construction.
Why: Separate pure request shaping from the network call so both stay testable.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias
from urllib.parse import urlencode, urlsplit, urlunsplit

from requests.structures import CaseInsensitiveDict

ParamValue: TypeAlias = str | int | float | bool | None
Params: TypeAlias = Mapping[str, ParamValue]


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """Partial request specification; ``None`` fields are left unspecified."""

    method: str | None = None
    headers: Mapping[str, str] | None = None
    body: str | bytes | None = None


def merge_request_options(*options: RequestOptions | None) -> RequestOptions:
    """Fold partial specifications left to right.

    Later non-``None`` fields win. Headers accumulate across all inputs and a
    header set more than once keeps the last value (names compare
    case-insensitively).

    Args:
        *options: Specifications in precedence order, lowest first.

    Returns:
        RequestOptions: A single merged specification.
    """

    method: str | None = None
    body: str | bytes | None = None
    headers: CaseInsensitiveDict[str] = CaseInsensitiveDict()
    has_headers = False

    for option in options:
        if option is None:
            continue
        if option.method is not None:
            method = option.method
        if option.body is not None:
            body = option.body
        if option.headers is not None:
            has_headers = True
            headers.update(option.headers)

    return RequestOptions(
        method=method,
        headers=dict(headers.items()) if has_headers else None,
        body=body,
    )


def _stringify(value: str | int | float | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(api_url: str, path: str, params: Params | None = None) -> str:
    """Concatenate ``api_url`` and ``path`` and append query parameters.

    ``None`` values are skipped. An existing query string is kept verbatim and
    new entries are appended after it, so a repeated key yields repeated entries.

    Args:
        api_url: Service base URL, e.g. ``https://infinibrowser.wiki/api``.
        path: Endpoint path starting with ``/``.
        params: Query parameters in the order they should appear.

    Returns:
        str: Absolute request URL.
    """

    url = f"{api_url}{path}"
    if not params:
        return url

    pairs = [(key, _stringify(value)) for key, value in params.items() if value is not None]
    if not pairs:
        return url

    parts = urlsplit(url)
    encoded = urlencode(pairs)
    query = f"{parts.query}&{encoded}" if parts.query else encoded
    return urlunsplit(parts._replace(query=query))


__all__ = [
    "ParamValue",
    "Params",
    "RequestOptions",
    "build_url",
    "merge_request_options",
]
