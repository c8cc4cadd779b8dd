"""Classify Injection API responses into :class:`SendResponse` outcomes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from socketlabs_client.core.result import SendResult, ValidationResult, describe

if TYPE_CHECKING:
    from socketlabs_client.transport import TransportResponse

__all__ = ["AddressResult", "MessageResult", "SendResponse", "parse", "transport_failure"]


@dataclass(frozen=True)
class AddressResult:
    """Per-address acceptance detail inside a :class:`MessageResult`."""

    email_address: str
    accepted: bool
    error_code: str | None = None

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "AddressResult":
        return cls(
            email_address=data.get("emailAddress") or "",
            accepted=bool(data.get("accepted", False)),
            error_code=data.get("errorCode"),
        )


@dataclass(frozen=True)
class MessageResult:
    """Outcome for one message of the request, by position."""

    index: int
    result: SendResult
    address_results: tuple[AddressResult, ...] = ()

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "MessageResult":
        return cls(
            index=_as_index(data.get("index")),
            result=SendResult.from_code(data.get("errorCode")),
            address_results=tuple(
                AddressResult.from_wire(item) for item in _entries(data.get("addressResults"))
            ),
        )


@dataclass(frozen=True)
class SendResponse:
    """Immutable result of a send attempt."""

    result: SendResult
    response_message: str | None = None
    transaction_receipt: str | None = None
    message_results: tuple[MessageResult, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.response_message is None:
            object.__setattr__(self, "response_message", describe(self.result))

    @property
    def succeeded(self) -> bool:
        return self.result is SendResult.SUCCESS

    @classmethod
    def from_validation(cls, validation: ValidationResult) -> "SendResponse":
        return cls(result=validation.result, response_message=validation.response_message)


def transport_failure(message: str | None = None) -> SendResponse:
    """Outcome for a request that never produced a response."""
    return SendResponse(result=SendResult.UNKNOWN_ERROR, response_message=message)


def parse(response: "TransportResponse | None") -> SendResponse:
    """Map a status/body pair onto a :class:`SendResponse`.

    ``None`` means no response arrived and always yields ``UnknownError``.
    A recognised ``errorCode`` in the body wins over the HTTP status;
    without one, the status alone decides.
    """
    if response is None:
        return transport_failure()

    body = response.body if isinstance(response.body, dict) else {}
    code = body.get("errorCode")

    if code:
        result = SendResult.from_code(code)
    elif response.status_code in (401, 403):
        result = SendResult.INVALID_AUTHENTICATION
    elif response.status_code >= 500:
        result = SendResult.INTERNAL_ERROR
    else:
        result = SendResult.UNKNOWN_ERROR

    if result is SendResult.SUCCESS and response.status_code != 200:
        result = SendResult.UNKNOWN_ERROR

    return SendResponse(
        result=result,
        transaction_receipt=body.get("transactionReceipt"),
        message_results=tuple(
            MessageResult.from_wire(item) for item in _entries(body.get("messageResults"))
        ),
    )


def _entries(value: Any) -> list[dict[str, Any]]:
    """Keep only the object entries of a JSON array; anything else reads as empty."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _as_index(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return 0
