"""Testing helpers – FakeTransport for unit tests."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from socketlabs_client.errors import TransportError
from socketlabs_client.transport import TransportResponse

__all__ = ["FakeTransport", "RecordedRequest"]


@dataclass(frozen=True)
class RecordedRequest:
    url: str
    payload: dict[str, Any]
    headers: dict[str, str]


class FakeTransport:
    """In-memory Transport that records requests and replays scripted outcomes.

    Queue outcomes with :meth:`respond` or :meth:`fail`; once the queue is
    empty every request gets ``default``.
    """

    def __init__(self, default: TransportResponse | None = None) -> None:
        self.requests: list[RecordedRequest] = []
        self._outcomes: list[TransportResponse | TransportError] = []
        self._default = default or TransportResponse(
            200, {"errorCode": "Success", "transactionReceipt": "fake-receipt", "messageResults": []}
        )

    def respond(self, status_code: int, body: Any = None) -> "FakeTransport":
        self._outcomes.append(TransportResponse(status_code, body))
        return self

    def fail(self, message: str = "connection refused") -> "FakeTransport":
        self._outcomes.append(TransportError("fake", message))
        return self

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str],
    ) -> TransportResponse:
        self.requests.append(RecordedRequest(url, payload, headers))
        outcome = self._outcomes.pop(0) if self._outcomes else self._default
        if isinstance(outcome, TransportError):
            raise outcome
        return outcome

    # convenience helpers
    @property
    def count(self) -> int:
        return len(self.requests)

    def last(self) -> RecordedRequest | None:
        return self.requests[-1] if self.requests else None
