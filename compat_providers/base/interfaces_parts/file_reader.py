"""FileReader Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileReader(Protocol):
    """Reads stored attachments by key (``FileAttachment.key``).

    Failures propagate to the caller of the operation that needed the file.
    """

    async def read(self, key: str) -> str:  # pragma: no cover - interface
        """Return the text content of the file."""
        ...

    async def read_as_inline_image(self, key: str) -> str:  # pragma: no cover - interface
        """Return the image as a ``data:<mime>;base64,...`` URL."""
        ...


__all__ = ["FileReader"]
