"""Message model – addresses, attachments, headers and message shapes."""
from socketlabs_client.message.address import EmailAddress
from socketlabs_client.message.attachment import Attachment
from socketlabs_client.message.headers import CustomHeader, MergeData
from socketlabs_client.message.message import (
    BasicMessage,
    BulkMessage,
    BulkRecipient,
    Message,
    MessageType,
)

__all__ = [
    "Attachment",
    "BasicMessage",
    "BulkMessage",
    "BulkRecipient",
    "CustomHeader",
    "EmailAddress",
    "MergeData",
    "Message",
    "MessageType",
]
