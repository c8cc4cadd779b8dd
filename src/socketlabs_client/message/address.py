"""Email address value object."""

from __future__ import annotations

import dataclasses
import re
from typing import Any, Final

_EMAIL_PATTERN: Final = re.compile(
    r"^[a-zA-Z0-9._%+\-']+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$"
)


@dataclasses.dataclass(frozen=True, slots=True)
class EmailAddress:
    """An address with an optional display name.

    Construction never fails; :class:`~socketlabs_client.core.validator.SendValidator`
    rejects malformed addresses before a send.
    """

    email_address: str
    friendly_name: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.email_address, str):
            object.__setattr__(self, "email_address", self.email_address.strip())

    def __str__(self) -> str:
        if self.friendly_name:
            return f"{self.friendly_name} <{self.email_address}>"
        return self.email_address

    @property
    def is_valid(self) -> bool:
        """``True`` when the address looks like ``local@domain.tld``."""
        return isinstance(self.email_address, str) and bool(
            _EMAIL_PATTERN.match(self.email_address)
        )

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"emailAddress": self.email_address}
        if self.friendly_name:
            payload["friendlyName"] = self.friendly_name
        return payload

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "EmailAddress":
        return cls(data["emailAddress"], data.get("friendlyName"))


__all__ = ["EmailAddress"]
