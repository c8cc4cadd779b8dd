"""Message attachments backed by in-memory bytes or a file on disk."""
from __future__ import annotations

import mimetypes
from dataclasses import dataclass, field
from pathlib import Path

from socketlabs_client.message.headers import CustomHeader

__all__ = ["Attachment"]

_DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class Attachment:
    """A file attachment for a message.

    Exactly one of ``content`` or ``path`` is normally set. A path-backed
    attachment is read when the request is built, not at construction.
    Set ``content_id`` to reference the attachment inline from the HTML
    body (``<img src="cid:logo">``).
    """

    name: str
    mime_type: str = _DEFAULT_MIME_TYPE
    content: bytes | None = None
    path: str | Path | None = None
    content_id: str | None = None
    custom_headers: tuple[CustomHeader, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.path is not None and not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))

    def __repr__(self) -> str:  # pragma: no cover
        size = len(self.content) if self.content is not None else None
        return (
            f"Attachment(name={self.name!r}, mime_type={self.mime_type!r}, "
            f"size={size}, path={self.path!r}, content_id={self.content_id!r})"
        )

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        *,
        name: str | None = None,
        mime_type: str | None = None,
        content_id: str | None = None,
    ) -> "Attachment":
        """Build an attachment that loads ``path`` lazily.

        ``name`` defaults to the file name and ``mime_type`` is guessed from
        the extension.
        """
        path = Path(path)
        if mime_type is None:
            mime_type = mimetypes.guess_type(path.name)[0] or _DEFAULT_MIME_TYPE
        return cls(
            name=name or path.name,
            mime_type=mime_type,
            path=path,
            content_id=content_id,
        )

    @property
    def is_inline(self) -> bool:
        return bool(self.content_id)

    @property
    def has_content(self) -> bool:
        return bool(self.content) or self.path is not None
