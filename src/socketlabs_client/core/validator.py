"""Pure rule checks for credentials and message shape."""
from __future__ import annotations

from typing import Any, Iterable

from socketlabs_client.core.result import SendResult, ValidationResult
from socketlabs_client.message import (
    Attachment,
    BasicMessage,
    BulkMessage,
    BulkRecipient,
    CustomHeader,
    EmailAddress,
    MergeData,
    MessageType,
)

__all__ = ["DEFAULT_MAX_RECIPIENTS", "SendValidator", "coerce_server_id"]

#: Injection API per-message recipient limit.
DEFAULT_MAX_RECIPIENTS = 50

_OK = ValidationResult.success()


def _fail(result: SendResult, message: str) -> ValidationResult:
    return ValidationResult.failure(result, message)


class SendValidator:
    """Check credentials and messages before anything goes on the wire.

    Every check short-circuits on the first violation; nothing is
    aggregated. Instances hold only the recipient limit and are safe to
    share.
    """

    def __init__(self, max_recipients: int = DEFAULT_MAX_RECIPIENTS) -> None:
        self._max_recipients = max_recipients

    @property
    def max_recipients(self) -> int:
        return self._max_recipients

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------

    def validate_credentials(self, server_id: Any, api_key: Any) -> ValidationResult:
        if coerce_server_id(server_id) is None:
            return _fail(SendResult.INVALID_SERVER_ID, f"Invalid server id: {server_id!r}")
        if not isinstance(api_key, str) or not api_key.strip():
            return _fail(SendResult.INVALID_API_KEY, "The api key is missing or empty")
        return _OK

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def validate_message(self, message: Any) -> ValidationResult:
        match getattr(message, "message_type", None):
            case MessageType.BASIC if isinstance(message, BasicMessage):
                return self._validate_basic(message)
            case MessageType.BULK if isinstance(message, BulkMessage):
                return self._validate_bulk(message)
            case other:
                return _fail(
                    SendResult.MESSAGE_VALIDATION_FAILED,
                    f"Unsupported message type: {other!r}",
                )

    def _validate_basic(self, message: BasicMessage) -> ValidationResult:
        result = self._check_sender(message)
        if not result.ok:
            return result

        if not message.to:
            return _fail(SendResult.RECIPIENT_VALIDATION_FAILED, "At least one To recipient is required")
        recipients = message.all_recipients()
        result = self._check_recipient_count(len(recipients))
        if not result.ok:
            return result
        for recipient in recipients:
            if not isinstance(recipient, EmailAddress) or not recipient.is_valid:
                return _fail(
                    SendResult.RECIPIENT_VALIDATION_FAILED,
                    f"Invalid recipient address: {_address_text(recipient)!r}",
                )

        return self._check_content(message)

    def _validate_bulk(self, message: BulkMessage) -> ValidationResult:
        result = self._check_sender(message)
        if not result.ok:
            return result

        if not message.to:
            return _fail(SendResult.RECIPIENT_VALIDATION_FAILED, "At least one To recipient is required")
        result = self._check_recipient_count(len(message.to))
        if not result.ok:
            return result
        for recipient in message.to:
            if not isinstance(recipient, BulkRecipient) or not recipient.address.is_valid:
                return _fail(
                    SendResult.RECIPIENT_VALIDATION_FAILED,
                    f"Invalid recipient address: {getattr(recipient, 'email_address', recipient)!r}",
                )
            if not _all_valid(recipient.merge_data):
                return _fail(
                    SendResult.RECIPIENT_VALIDATION_FAILED,
                    f"Merge data for {recipient.email_address!r} has an empty field name",
                )

        result = self._check_content(message)
        if not result.ok:
            return result
        if not _all_valid(message.global_merge_data):
            return _fail(SendResult.MESSAGE_VALIDATION_FAILED, "Global merge data has an empty field name")
        return _OK

    # ------------------------------------------------------------------
    # Shared rules
    # ------------------------------------------------------------------

    def _check_sender(self, message: BasicMessage | BulkMessage) -> ValidationResult:
        sender = message.from_address
        if not isinstance(sender, EmailAddress) or not sender.is_valid:
            return _fail(
                SendResult.EMAIL_ADDRESS_VALIDATION_FAILED,
                f"Invalid From address: {_address_text(sender)!r}",
            )
        reply_to = message.reply_to
        if reply_to is not None and (not isinstance(reply_to, EmailAddress) or not reply_to.is_valid):
            return _fail(
                SendResult.EMAIL_ADDRESS_VALIDATION_FAILED,
                f"Invalid Reply-To address: {_address_text(reply_to)!r}",
            )
        return _OK

    def _check_recipient_count(self, count: int) -> ValidationResult:
        if count > self._max_recipients:
            return _fail(
                SendResult.RECIPIENT_VALIDATION_FAILED,
                f"{count} recipients exceeds the maximum of {self._max_recipients}",
            )
        return _OK

    def _check_content(self, message: BasicMessage | BulkMessage) -> ValidationResult:
        if not message.subject or not message.subject.strip():
            return _fail(SendResult.MESSAGE_VALIDATION_FAILED, "Subject is required")
        if not message.has_body():
            return _fail(SendResult.MESSAGE_VALIDATION_FAILED, "A text or HTML body is required")
        if not _all_valid(message.custom_headers):
            return _fail(SendResult.MESSAGE_VALIDATION_FAILED, "Custom headers need a name and a value")
        for attachment in message.attachments:
            result = self._check_attachment(attachment)
            if not result.ok:
                return result
        return _OK

    def _check_attachment(self, attachment: Attachment) -> ValidationResult:
        if not isinstance(attachment, Attachment) or not attachment.name:
            return _fail(SendResult.ATTACHMENT_VALIDATION_FAILED, "Attachment name is required")
        if not attachment.has_content:
            return _fail(
                SendResult.ATTACHMENT_VALIDATION_FAILED,
                f"Attachment {attachment.name!r} has no content",
            )
        if not _all_valid(attachment.custom_headers):
            return _fail(
                SendResult.ATTACHMENT_VALIDATION_FAILED,
                f"Attachment {attachment.name!r} has an invalid custom header",
            )
        return _OK


def coerce_server_id(value: Any) -> int | None:
    """Return ``value`` as a positive int, or ``None`` when it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        number = int(value)
        return number if number > 0 else None
    return None


def _all_valid(items: Iterable[CustomHeader | MergeData]) -> bool:
    return all(item.is_valid for item in items)


def _address_text(value: Any) -> str | None:
    if isinstance(value, EmailAddress):
        return value.email_address
    return None if value is None else str(value)
