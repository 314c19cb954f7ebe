"""Shared pytest fixtures for HTTP-facing tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest
import requests

ResponseFactory = Callable[..., requests.Response]


def make_response(
    status: int = 200,
    body: Any = None,
    *,
    text: str | None = None,
    url: str = "https://infinibrowser.wiki/api/item",
    content_type: str = "application/json",
) -> requests.Response:
    """Create a fully-read ``requests.Response`` without touching the network."""

    response = requests.Response()
    response.status_code = status
    response.url = url
    response.headers["Content-Type"] = content_type
    raw = text if text is not None else json.dumps(body)
    response._content = raw.encode("utf-8")  # pyright: ignore[reportPrivateUsage]
    response._content_consumed = True  # pyright: ignore[reportPrivateUsage]
    return response


@pytest.fixture
def response_factory() -> ResponseFactory:
    """Expose ``make_response`` to tests that build canned replies."""

    return make_response
