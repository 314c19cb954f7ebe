"""Where: src/infinibrowser/client.py
What: Facade exposing typed Infinibrowser API endpoints.
Why: Endpoint methods stay one-liners over shared GET/POST primitives.

Responsibilities are split across focused collaborators:
- ``platform.http.request`` builds URLs and merges request options
- ``platform.http.transport`` sends under a deadline and classifies outcomes
- ``domain.lineage`` shapes the share-lineage payload
- ``config`` resolves the API URL, timeout and default request options
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, TypeVar

import requests

from infinibrowser.config import DEFAULT_API_URL, DEFAULT_TIMEOUT_MS, ClientConfig, load_config
from infinibrowser.domain.lineage import build_share_payload
from infinibrowser.domain.types import (
    CustomLineageData,
    InvalidElementId,
    ItemData,
    LineageData,
    OptimizedLineage,
    RecipesData,
    SharedLineage,
    ShareLineageSteps,
    UnknownElement,
    UsesData,
)
from infinibrowser.platform.http import (
    Params,
    RequestOptions,
    build_url,
    fetch_with_timeout,
)
from infinibrowser.shared.results import Result

T = TypeVar("T")
E = TypeVar("E")

API_URL: Final[str] = DEFAULT_API_URL
DEFAULT_OPTIONS: Final[ClientConfig] = ClientConfig(api_url=API_URL, timeout_ms=DEFAULT_TIMEOUT_MS)


class Infinibrowser:
    """Client for the Infinibrowser JSON API.

    Every endpoint returns a ``Result``: callers check ``ok`` (and
    ``error_code`` on failure) before reading ``data``. The only exception
    raised by an endpoint is ``EmptyLineageError`` from ``share_lineage``.

    Example:
        >>> result = ib.get_item("Water")
        >>> if result.ok:
        ...     print(result.data["text"])
    """

    def __init__(
        self,
        config: ClientConfig = DEFAULT_OPTIONS,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self._config: Final[ClientConfig] = config
        self._session: Final[requests.Session | None] = session

    @classmethod
    def from_config_file(
        cls,
        path: Path | str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> Infinibrowser:
        """Build a client from ``load_config``."""

        return cls(load_config(path, env))

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def api_url(self) -> str:
        return self._config.api_url

    @property
    def timeout_ms(self) -> int:
        return self._config.timeout_ms

    def refine(
        self,
        *,
        api_url: str | None = None,
        timeout_ms: int | None = None,
        base_request_overrides: RequestOptions | None = None,
    ) -> Infinibrowser:
        """Return a new client with the given settings layered on top.

        The current client is left untouched. Headers in
        ``base_request_overrides`` merge with the existing ones key by key.
        """

        config = self._config.merged(
            api_url=api_url,
            timeout_ms=timeout_ms,
            base_request_overrides=base_request_overrides,
        )
        return type(self)(config, session=self._session)

    def _fetch(self, url: str, options: RequestOptions) -> Result[T, E]:
        return fetch_with_timeout(
            url,
            options,
            timeout_ms=self._config.timeout_ms,
            base_overrides=self._config.base_request_overrides,
            session=self._session,
        )

    def _get(self, path: str, params: Params | None = None) -> Result[T, E]:
        url = build_url(self._config.api_url, path, params)
        return self._fetch(
            url,
            RequestOptions(method="GET", headers={"Accept": "application/json"}),
        )

    def _post(
        self,
        path: str,
        params: Params | None = None,
        payload: Mapping[str, Any] | None = None,
    ) -> Result[T, E]:
        url = build_url(self._config.api_url, path, params)
        return self._fetch(
            url,
            RequestOptions(
                method="POST",
                headers={"Content-Type": "application/json"},
                body=json.dumps(dict(payload) if payload is not None else {}),
            ),
        )

    def get_item(self, id: str) -> Result[ItemData, UnknownElement]:
        return self._get("/item", {"id": id})

    def get_recipes(self, id: str, *, offset: int = 0) -> Result[RecipesData, UnknownElement]:
        return self._get("/recipes", {"id": id, "offset": offset})

    def get_uses(self, id: str, *, offset: int = 0) -> Result[UsesData, UnknownElement]:
        return self._get("/uses", {"id": id, "offset": offset})

    def get_lineage(self, id: str) -> Result[LineageData, UnknownElement]:
        return self._get("/recipe", {"id": id})

    def get_custom_lineage(self, id: str) -> Result[CustomLineageData, InvalidElementId]:
        return self._get("/recipe/custom", {"id": id})

    def optimize_lineage(self, id: str) -> Result[OptimizedLineage, dict[str, Any]]:
        return self._post("/optimize-lineage", params={"id": id})

    def share_lineage(self, steps: ShareLineageSteps) -> Result[SharedLineage, dict[str, Any]]:
        """Publish a lineage and return its share id.

        Raises:
            EmptyLineageError: If ``steps`` is empty; no request is sent.
        """

        payload = build_share_payload(steps)
        return self._post("/analytics/share", payload=payload)


ib: Final[Infinibrowser] = Infinibrowser(DEFAULT_OPTIONS)


__all__ = [
    "API_URL",
    "DEFAULT_OPTIONS",
    "Infinibrowser",
    "ib",
]
