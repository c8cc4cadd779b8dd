"""Turn validated messages into Injection API wire objects."""
from __future__ import annotations

import asyncio
import base64
from pathlib import Path
from typing import Any

from socketlabs_client.core.result import SendResult, ValidationResult
from socketlabs_client.core.validator import SendValidator
from socketlabs_client.errors import MessageBuildError
from socketlabs_client.message import (
    Attachment,
    BasicMessage,
    BulkMessage,
    BulkRecipient,
    CustomHeader,
    EmailAddress,
    MergeData,
    Message,
    MessageType,
)
from socketlabs_client.observability.logging import get_logger

__all__ = ["DELIVERY_ADDRESS_FIELD", "RECIPIENT_NAME_FIELD", "InjectionRequestFactory"]

#: Reserved per-recipient merge fields the Injection API fills into ``%%...%%``.
DELIVERY_ADDRESS_FIELD = "DeliveryAddress"
RECIPIENT_NAME_FIELD = "RecipientName"

_RESERVED_FIELDS = frozenset({DELIVERY_ADDRESS_FIELD, RECIPIENT_NAME_FIELD})

_log = get_logger(__name__)


class InjectionRequestFactory:
    """Build the JSON-serialisable request body for a single message.

    :meth:`generate_request` is a coroutine because path-backed
    attachments are read from disk while the request is built.

    Usage::

        factory = InjectionRequestFactory()
        wire = await factory.generate_request(message)
    """

    def __init__(self, validator: SendValidator | None = None) -> None:
        self._validator = validator or SendValidator()

    async def generate_request(self, message: Message) -> dict[str, Any]:
        """Validate ``message`` and return its wire object.

        Raises
        ------
        MessageBuildError
            When validation fails or an attachment cannot be read/encoded.
        """
        validation = self._validator.validate_message(message)
        if not validation.ok:
            raise MessageBuildError(validation)

        wire: dict[str, Any] = {
            "subject": message.subject,
            "from": message.from_address.to_wire(),  # type: ignore[union-attr]
        }
        if message.reply_to is not None:
            wire["replyTo"] = message.reply_to.to_wire()

        match message.message_type:
            case MessageType.BASIC if isinstance(message, BasicMessage):
                wire["to"] = [address.to_wire() for address in message.to]
                if message.cc:
                    wire["cc"] = [address.to_wire() for address in message.cc]
                if message.bcc:
                    wire["bcc"] = [address.to_wire() for address in message.bcc]
            case MessageType.BULK if isinstance(message, BulkMessage):
                wire["to"] = [recipient.address.to_wire() for recipient in message.to]

        _set_if(wire, "textBody", message.text_body)
        _set_if(wire, "htmlBody", message.html_body)
        _set_if(wire, "apiTemplate", message.api_template)
        if message.custom_headers:
            wire["customHeaders"] = [header.to_wire() for header in message.custom_headers]
        if message.attachments:
            wire["attachments"] = [await self._attachment_to_wire(a) for a in message.attachments]
        _set_if(wire, "mailingId", message.mailing_id)
        _set_if(wire, "messageId", message.message_id)
        _set_if(wire, "charSet", message.charset)

        if isinstance(message, BulkMessage):
            wire["mergeData"] = [_recipient_merge_data(r) for r in message.to]
            if message.global_merge_data:
                wire["globalMergeData"] = [item.to_wire() for item in message.global_merge_data]

        _log.debug(
            "socketlabs.request.built",
            message_type=str(message.message_type),
            recipients=len(wire["to"]),
            attachments=len(message.attachments),
        )
        return wire

    def parse_request(
        self,
        wire: dict[str, Any],
        message_type: MessageType | None = None,
    ) -> Message:
        """Read a wire object produced by :meth:`generate_request` back into a message.

        Attachments come back as in-memory content. Without an explicit
        ``message_type``, a wire object carrying ``mergeData`` is read as bulk.
        """
        if message_type is None:
            message_type = MessageType.BULK if "mergeData" in wire else MessageType.BASIC

        common: dict[str, Any] = {
            "subject": wire.get("subject", ""),
            "from_address": _address_or_none(wire.get("from")),
            "reply_to": _address_or_none(wire.get("replyTo")),
            "text_body": wire.get("textBody"),
            "html_body": wire.get("htmlBody"),
            "api_template": wire.get("apiTemplate"),
            "custom_headers": [CustomHeader.from_wire(h) for h in wire.get("customHeaders", [])],
            "attachments": [_attachment_from_wire(a) for a in wire.get("attachments", [])],
            "mailing_id": wire.get("mailingId"),
            "message_id": wire.get("messageId"),
            "charset": wire.get("charSet"),
        }

        match message_type:
            case MessageType.BASIC:
                return BasicMessage(
                    to=[EmailAddress.from_wire(a) for a in wire.get("to", [])],
                    cc=[EmailAddress.from_wire(a) for a in wire.get("cc", [])],
                    bcc=[EmailAddress.from_wire(a) for a in wire.get("bcc", [])],
                    **common,
                )
            case MessageType.BULK:
                merge_rows = wire.get("mergeData", [])
                recipients = []
                for position, address in enumerate(wire.get("to", [])):
                    row = merge_rows[position] if position < len(merge_rows) else []
                    recipients.append(
                        BulkRecipient(
                            email_address=address["emailAddress"],
                            friendly_name=address.get("friendlyName"),
                            merge_data=tuple(
                                MergeData.from_wire(item)
                                for item in row
                                if item.get("field") not in _RESERVED_FIELDS
                            ),
                        )
                    )
                return BulkMessage(
                    to=recipients,
                    global_merge_data=[MergeData.from_wire(m) for m in wire.get("globalMergeData", [])],
                    **common,
                )
        raise MessageBuildError(
            ValidationResult.failure(
                SendResult.MESSAGE_VALIDATION_FAILED,
                f"Unsupported message type: {message_type!r}",
            )
        )

    async def _attachment_to_wire(self, attachment: Attachment) -> dict[str, Any]:
        try:
            if attachment.content:
                content = attachment.content
            elif attachment.path is not None:
                content = await asyncio.to_thread(Path(attachment.path).read_bytes)
            else:
                content = b""
            encoded = base64.b64encode(content).decode("ascii")
        except (OSError, TypeError) as exc:
            _log.warning("socketlabs.attachment.unreadable", attachment=attachment.name, error=str(exc))
            raise MessageBuildError(
                ValidationResult.failure(
                    SendResult.ATTACHMENT_VALIDATION_FAILED,
                    f"Attachment {attachment.name!r} could not be encoded: {exc}",
                ),
                cause=exc,
            ) from exc

        payload: dict[str, Any] = {
            "name": attachment.name,
            "content": encoded,
            "contentType": attachment.mime_type,
        }
        _set_if(payload, "contentId", attachment.content_id)
        if attachment.custom_headers:
            payload["customHeaders"] = [h.to_wire() for h in attachment.custom_headers]
        return payload


def _set_if(target: dict[str, Any], key: str, value: Any) -> None:
    if value is not None and value != "":
        target[key] = value


def _recipient_merge_data(recipient: BulkRecipient) -> list[dict[str, Any]]:
    row = [MergeData(DELIVERY_ADDRESS_FIELD, recipient.email_address).to_wire()]
    if recipient.friendly_name:
        row.append(MergeData(RECIPIENT_NAME_FIELD, recipient.friendly_name).to_wire())
    row.extend(item.to_wire() for item in recipient.merge_data)
    return row


def _address_or_none(data: dict[str, Any] | None) -> EmailAddress | None:
    return EmailAddress.from_wire(data) if data else None


def _attachment_from_wire(data: dict[str, Any]) -> Attachment:
    return Attachment(
        name=data["name"],
        mime_type=data.get("contentType", "application/octet-stream"),
        content=base64.b64decode(data.get("content", "")),
        content_id=data.get("contentId"),
        custom_headers=tuple(CustomHeader.from_wire(h) for h in data.get("customHeaders", [])),
    )
