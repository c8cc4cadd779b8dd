"""Basic and bulk message shapes, discriminated by ``message_type``."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar

from socketlabs_client.message.address import EmailAddress
from socketlabs_client.message.attachment import Attachment
from socketlabs_client.message.headers import CustomHeader, MergeData

__all__ = ["BasicMessage", "BulkMessage", "BulkRecipient", "Message", "MessageType"]


class MessageType(enum.StrEnum):
    BASIC = "basic"
    BULK = "bulk"


@dataclass(frozen=True)
class BulkRecipient:
    """A bulk-send recipient with its own merge data."""

    email_address: str
    friendly_name: str | None = None
    merge_data: tuple[MergeData, ...] = field(default_factory=tuple)

    @property
    def address(self) -> EmailAddress:
        return EmailAddress(self.email_address, self.friendly_name)


@dataclass
class _MessageBase:
    subject: str = ""
    from_address: EmailAddress | None = None
    reply_to: EmailAddress | None = None
    text_body: str | None = None
    html_body: str | None = None
    api_template: int | str | None = None
    attachments: list[Attachment] = field(default_factory=list)
    custom_headers: list[CustomHeader] = field(default_factory=list)
    message_id: str | None = None
    mailing_id: str | None = None
    charset: str | None = None

    def has_body(self) -> bool:
        return bool(self.text_body) or bool(self.html_body)


@dataclass
class BasicMessage(_MessageBase):
    """A single message addressed to explicit To/Cc/Bcc lists."""

    message_type: ClassVar[MessageType] = MessageType.BASIC

    to: list[EmailAddress] = field(default_factory=list)
    cc: list[EmailAddress] = field(default_factory=list)
    bcc: list[EmailAddress] = field(default_factory=list)

    def all_recipients(self) -> list[EmailAddress]:
        """Return combined to + cc + bcc recipient list."""
        return [*self.to, *self.cc, *self.bcc]


@dataclass
class BulkMessage(_MessageBase):
    """One message template sent to many recipients with merge data."""

    message_type: ClassVar[MessageType] = MessageType.BULK

    to: list[BulkRecipient] = field(default_factory=list)
    global_merge_data: list[MergeData] = field(default_factory=list)


type Message = BasicMessage | BulkMessage
