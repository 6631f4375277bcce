from .message_encoder import ContentPart, EncodedMessage, MessageEncoder

__all__ = ["ContentPart", "EncodedMessage", "MessageEncoder"]
