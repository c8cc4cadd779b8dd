"""Transport errors – the HTTP call produced no usable response."""

from __future__ import annotations

from typing import Any

from socketlabs_client.errors.base import SocketLabsError


class TransportError(SocketLabsError):
    """Connection, proxy or protocol failure before a response arrived."""

    default_code = "transport_error"

    def __init__(
        self,
        endpoint: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not reach '{endpoint}'", **kwargs)
        self.endpoint = endpoint


__all__ = ["TransportError"]
