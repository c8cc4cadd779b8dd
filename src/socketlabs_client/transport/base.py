"""Transport port – post a JSON body, get back status and body."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

__all__ = ["Transport", "TransportResponse"]


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP outcome: status code, decoded JSON body (if any) and text."""

    status_code: int
    body: Any = None
    text: str = ""


@runtime_checkable
class Transport(Protocol):
    """Port: deliver a request body to the Injection API."""

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str],
    ) -> TransportResponse:
        """POST ``payload`` as JSON.

        Any HTTP status is returned as a :class:`TransportResponse`; only a
        missing response raises :class:`~socketlabs_client.errors.TransportError`.
        """
        ...
