"""
File attachment reference carried by a message.

The attachment itself holds no content; bytes are fetched on demand through a
``FileReader`` using :attr:`FileAttachment.key`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

FileType = Literal["image", "text", "document", "video", "audio", "other"]


@dataclass(frozen=True)
class FileAttachment:
    """Reference to a stored file.

    Attributes:
        id: Storage id of the file.
        ext: Extension including the leading dot (``".md"``).
        type: Coarse file category.
        origin_name: Name the user uploaded the file under.
    """

    id: str
    ext: str
    type: FileType
    origin_name: str

    @property
    def key(self) -> str:
        """Access key understood by the file reader (``id + ext``)."""
        return f"{self.id}{self.ext}"

    @property
    def is_textual(self) -> bool:
        return self.type in ("text", "document")


__all__ = ["FileAttachment", "FileType"]
