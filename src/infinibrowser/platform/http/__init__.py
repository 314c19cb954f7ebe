"""HTTP request shaping and transport for the Infinibrowser client."""

from __future__ import annotations

from .request import ParamValue, Params, RequestOptions, build_url, merge_request_options
from .transport import ACCEPT_ENCODING, DeadlineExceeded, fetch_with_timeout

__all__ = [
    "ACCEPT_ENCODING",
    "DeadlineExceeded",
    "ParamValue",
    "Params",
    "RequestOptions",
    "build_url",
    "fetch_with_timeout",
    "merge_request_options",
]
