"""
socketlabs_client – SocketLabs Injection API client.

Import path convention::

    from socketlabs_client import SocketLabsClient, BasicMessage, EmailAddress
    from socketlabs_client.core import SendResult
    from socketlabs_client.errors import SendError
"""

__version__ = "0.1.0"

from socketlabs_client.client import SocketLabsClient  # noqa: E402
from socketlabs_client.core import SendResponse, SendResult  # noqa: E402
from socketlabs_client.errors import SendError, SocketLabsError  # noqa: E402
from socketlabs_client.message import (  # noqa: E402
    Attachment,
    BasicMessage,
    BulkMessage,
    BulkRecipient,
    CustomHeader,
    EmailAddress,
    MergeData,
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
    "MessageType",
    "SendError",
    "SendResponse",
    "SendResult",
    "SocketLabsClient",
    "SocketLabsError",
    "__version__",
]
