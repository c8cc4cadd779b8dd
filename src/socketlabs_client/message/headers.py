"""Name/value pairs attached to messages: custom headers and merge data."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["CustomHeader", "MergeData"]


@dataclass(frozen=True)
class CustomHeader:
    """A single extra MIME header, e.g. ``X-Campaign: spring``."""

    name: str
    value: str

    @property
    def is_valid(self) -> bool:
        return bool(self.name and self.name.strip()) and bool(self.value and str(self.value).strip())

    def to_wire(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "CustomHeader":
        return cls(data["name"], data["value"])


@dataclass(frozen=True)
class MergeData:
    """A named substitution value for bulk sends (``%%field%%`` → value)."""

    field: str
    value: str

    @property
    def is_valid(self) -> bool:
        return bool(self.field and self.field.strip())

    def to_wire(self) -> dict[str, Any]:
        return {"field": self.field, "value": self.value}

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "MergeData":
        return cls(data["field"], data.get("value", ""))
