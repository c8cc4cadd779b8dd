"""Core send pipeline – validation, request building, response parsing."""
from socketlabs_client.core.factory import InjectionRequestFactory
from socketlabs_client.core.response import (
    AddressResult,
    MessageResult,
    SendResponse,
    parse,
    transport_failure,
)
from socketlabs_client.core.result import SendResult, ValidationResult, describe
from socketlabs_client.core.validator import DEFAULT_MAX_RECIPIENTS, SendValidator

__all__ = [
    "DEFAULT_MAX_RECIPIENTS",
    "AddressResult",
    "InjectionRequestFactory",
    "MessageResult",
    "SendResponse",
    "SendResult",
    "SendValidator",
    "ValidationResult",
    "describe",
    "parse",
    "transport_failure",
]
