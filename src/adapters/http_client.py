"""httpx wrapper and the default JSON-RPC provider.

Why a wrapper:
- Standardizes timeouts and headers for every call to the indexer.
- Makes testing easy: naming services accept any `Provider`, and this one
  can be exercised with respx.

Retries and backoff are deliberately left to the caller's transport.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any

import httpx

from core.config import AppSettings
from core.errors import ProviderError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with JSON defaults.

    Why a builder:
    - Centralizes timeouts and headers so every request behaves the same.
    - Keeps the door open for proxies and transport policies in one place.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


class FetchProvider:
    """JSON-RPC 2.0 provider over HTTP POST.

    Implements `core.interfaces.provider.Provider`: posts the envelope to
    `url` and returns the `result` member of the response. HTTP errors
    (`httpx.HTTPStatusError`) and network errors propagate unchanged; an
    `error` member in the body raises `ProviderError`.
    """

    def __init__(
        self,
        url: str,
        *,
        service_name: str = "DAS",
        settings: AppSettings | None = None,
    ) -> None:
        self.url = url
        self.service_name = service_name
        self._settings = settings or AppSettings()
        self._ids = itertools.count(1)

    async def request(self, method: str, params: list[Any]) -> Any:
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        logger.debug("%s -> %s %s", self.service_name, self.url, method)

        async with build_async_client(self._settings) as client:
            response = await client.post(self.url, json=payload)
        response.raise_for_status()

        body = response.json()
        if isinstance(body, dict) and body.get("error"):
            error = body["error"]
            if isinstance(error, dict):
                raise ProviderError(
                    str(error.get("message") or error),
                    method=method,
                    code=error.get("code"),
                )
            raise ProviderError(str(error), method=method)

        if isinstance(body, dict) and "result" in body:
            return body["result"]
        return body
