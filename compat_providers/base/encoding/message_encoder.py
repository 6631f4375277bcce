"""Message encoder: ``Message`` -> OpenAI chat message dict.

Two encodings depending on the provider:

* Providers that accept multi-part content get a list of parts: the message
  text first, then one part per usable attachment in upload order (images
  only for vision models).
* Providers limited to string content get the attachment bodies inlined after
  the text, separated by ``FILE_DIVIDER``. Images cannot be inlined and are
  dropped.

Attachments that cannot be represented are skipped without error. Failures
from the file reader propagate.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ...config.defaults import FILE_DIVIDER, FILE_HEADER_TEMPLATE
from ..capabilities import ProviderCapabilities, get_provider_capabilities, is_vision_model
from ..interfaces import FileReader
from ..models import FileAttachment, Message, Model

ContentPart = Dict[str, Any]
EncodedMessage = Dict[str, Any]


class MessageEncoder:
    """Encode messages for one provider."""

    def __init__(self, file_reader: FileReader, capabilities: Optional[ProviderCapabilities] = None) -> None:
        self._file_reader = file_reader
        self._capabilities = capabilities

    def _caps(self, model: Model) -> ProviderCapabilities:
        return self._capabilities or get_provider_capabilities(model.provider)

    async def encode(self, message: Message, model: Model) -> EncodedMessage:
        if not message.files:
            return {"role": message.role, "content": message.content}
        if not self._caps(model).supports_files:
            return {"role": message.role, "content": await self._inline_files(message)}
        return {"role": message.role, "content": await self._content_parts(message, model)}

    async def encode_all(self, messages: List[Message], model: Model) -> List[EncodedMessage]:
        return [await self.encode(m, model) for m in messages]

    async def _read_text(self, file: FileAttachment) -> str:
        return (await self._file_reader.read(file.key)).strip()

    async def _inline_files(self, message: Message) -> str:
        textual = [f for f in message.files or () if f.is_textual]
        if not textual:
            return message.content
        block = ""
        for file in textual:
            body = FILE_HEADER_TEMPLATE.format(name=file.origin_name, content=await self._read_text(file))
            block += body + FILE_DIVIDER
        return message.content + FILE_DIVIDER + block

    async def _content_parts(self, message: Message, model: Model) -> List[ContentPart]:
        parts: List[ContentPart] = [{"type": "text", "text": message.content}]
        vision = is_vision_model(model)
        for file in message.files or ():
            if file.type == "image":
                if not vision:
                    continue
                url = await self._file_reader.read_as_inline_image(file.key)
                parts.append({"type": "image_url", "image_url": {"url": url}})
            elif file.is_textual:
                text = await self._read_text(file)
                parts.append({"type": "text", "text": f"{file.origin_name}\n{text}"})
        return parts


__all__ = ["MessageEncoder", "EncodedMessage", "ContentPart"]
