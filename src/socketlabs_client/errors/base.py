"""Root error class for the socketlabs-client error hierarchy."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from socketlabs_client.core.result import SendResult


class SocketLabsError(Exception):
    """Root of the error hierarchy.

    Errors raised on the send path carry the :class:`SendResult` that
    describes them, so callers can branch on one closed set of codes
    whether the failure was local or reported by the Injection API.

    Args:
        message: Human-readable description.
        result: Send outcome code, when the error belongs to a send.
        code: Machine-readable slug (defaults to ``default_code``).
        cause: Original exception that triggered this error.
    """

    default_code: str = "socketlabs_error"

    def __init__(
        self,
        message: str,
        *,
        result: "SendResult | None" = None,
        code: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.result = result
        self.code = code or self.default_code
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        if self.result is None:
            return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"
        return f"{type(self).__name__}(result={str(self.result)!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Flatten to a log-friendly dict; ``result`` appears only on send errors."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.result is not None:
            payload["result"] = str(self.result)
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["SocketLabsError"]
