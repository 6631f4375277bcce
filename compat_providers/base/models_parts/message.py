"""
Conversation message DTO.

Messages are immutable once built; the encoder turns them into wire dicts and
never mutates them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

from .file_attachment import FileAttachment

Role = Literal["system", "user", "assistant", "developer"]


@dataclass(frozen=True)
class Message:
    """A single conversation turn.

    Attributes:
        role: Author role.
        content: Plain text of the turn.
        files: Attachments in upload order, or ``None``.
        is_preset: True for canned example turns shipped with an assistant.
        is_context_clear: True for the marker inserted when the user clears
            the context; earlier turns are not sent to the model.
    """

    role: Role
    content: str = ""
    files: Optional[Tuple[FileAttachment, ...]] = None
    is_preset: bool = False
    is_context_clear: bool = False

    def has_files(self) -> bool:
        return bool(self.files)


__all__ = ["Message", "Role"]
