"""Send-pipeline errors – build failures and rejected sends."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from socketlabs_client.errors.base import SocketLabsError

if TYPE_CHECKING:
    from socketlabs_client.core.response import SendResponse
    from socketlabs_client.core.result import SendResult, ValidationResult


class MessageBuildError(SocketLabsError):
    """The request factory could not turn a message into a wire object."""

    default_code = "message_build_failed"

    def __init__(self, validation: "ValidationResult", **kwargs: Any) -> None:
        super().__init__(
            validation.response_message or str(validation.result),
            result=validation.result,
            **kwargs,
        )
        self.validation = validation


class SendError(SocketLabsError):
    """A send did not end in ``Success``.

    ``response`` holds the outcome: a local validation failure, a
    transport failure normalised to ``UnknownError``, or the parsed
    rejection from the Injection API.
    """

    default_code = "send_failed"
    result: "SendResult"

    def __init__(self, response: "SendResponse", **kwargs: Any) -> None:
        super().__init__(
            response.response_message or str(response.result),
            result=response.result,
            **kwargs,
        )
        self.response = response


__all__ = ["MessageBuildError", "SendError"]
