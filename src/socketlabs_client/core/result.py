"""Result codes shared by local validation and response parsing."""
from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = ["SendResult", "ValidationResult", "describe"]


class SendResult(enum.StrEnum):
    """Closed set of send outcomes.

    Values match the ``errorCode`` strings returned by the Injection API.
    """

    SUCCESS = "Success"
    WARNING = "Warning"
    INVALID_SERVER_ID = "InvalidServerId"
    INVALID_API_KEY = "InvalidApiKey"
    INVALID_AUTHENTICATION = "InvalidAuthentication"
    ACCOUNT_DISABLED = "AccountDisabled"
    EMAIL_ADDRESS_VALIDATION_FAILED = "EmailAddressValidationFailed"
    RECIPIENT_VALIDATION_FAILED = "RecipientValidationFailed"
    MESSAGE_VALIDATION_FAILED = "MessageValidationFailed"
    ATTACHMENT_VALIDATION_FAILED = "AttachmentValidationFailed"
    TOO_MANY_RECIPIENTS = "TooManyRecipients"
    SERVER_VALIDATION_FAILED = "ServerValidationFailed"
    INTERNAL_ERROR = "InternalError"
    UNKNOWN_ERROR = "UnknownError"

    @classmethod
    def from_code(cls, code: str | None) -> "SendResult":
        """Map an API ``errorCode`` onto a member; unknown codes → ``UNKNOWN_ERROR``."""
        if not code:
            return cls.UNKNOWN_ERROR
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN_ERROR


_DESCRIPTIONS: dict[SendResult, str] = {
    SendResult.SUCCESS: "Successful send of message",
    SendResult.WARNING: "Warnings were found while sending the message",
    SendResult.INVALID_SERVER_ID: "The server id is missing or invalid",
    SendResult.INVALID_API_KEY: "The api key is missing or invalid",
    SendResult.INVALID_AUTHENTICATION: "The server id or api key was rejected",
    SendResult.ACCOUNT_DISABLED: "The account has been disabled",
    SendResult.EMAIL_ADDRESS_VALIDATION_FAILED: "An email address failed validation",
    SendResult.RECIPIENT_VALIDATION_FAILED: "The recipient list failed validation",
    SendResult.MESSAGE_VALIDATION_FAILED: "The message failed validation",
    SendResult.ATTACHMENT_VALIDATION_FAILED: "An attachment failed validation",
    SendResult.TOO_MANY_RECIPIENTS: "The message exceeds the maximum number of recipients",
    SendResult.SERVER_VALIDATION_FAILED: "The server failed to validate the message",
    SendResult.INTERNAL_ERROR: "Internal server error",
    SendResult.UNKNOWN_ERROR: "An unknown error occurred",
}


def describe(result: SendResult) -> str:
    """Return the standard human-readable description of ``result``."""
    return _DESCRIPTIONS[result]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a local check: a result code and the first violation found."""

    result: SendResult
    response_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.result is SendResult.SUCCESS

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(SendResult.SUCCESS)

    @classmethod
    def failure(cls, result: SendResult, message: str | None = None) -> "ValidationResult":
        return cls(result, message or describe(result))
