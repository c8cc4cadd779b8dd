"""Transport adapter – HttpxTransport."""
from __future__ import annotations

from typing import Any

import httpx

from socketlabs_client.errors import TransportError
from socketlabs_client.transport.base import TransportResponse

__all__ = ["HttpxTransport"]


class HttpxTransport:
    """Thin async httpx wrapper with structured error mapping.

    A fresh :class:`httpx.AsyncClient` is opened per request so concurrent
    sends share nothing but this immutable configuration.
    """

    def __init__(
        self,
        proxy_url: str | None = None,
        timeout: float | None = None,
        **client_kwargs: Any,
    ) -> None:
        self._proxy_url = proxy_url or None
        self._timeout = timeout
        self._client_kwargs = client_kwargs

    @property
    def proxy_url(self) -> str | None:
        return self._proxy_url

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = dict(self._client_kwargs)
        if self._proxy_url:
            kwargs["proxy"] = self._proxy_url
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        return httpx.AsyncClient(**kwargs)

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str],
    ) -> TransportResponse:
        try:
            async with self._client() as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.TimeoutException as exc:
            raise TransportError(url, f"HTTP request timed out: POST {url}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise TransportError(url, str(exc) or type(exc).__name__, cause=exc) from exc

        try:
            body = response.json()
        except ValueError:
            body = None
        return TransportResponse(status_code=response.status_code, body=body, text=response.text)
