"""
Provider-agnostic data model public surface.

Re-exports the one-class-per-file implementations under
``compat_providers.base.models_parts``.
"""

from .models_parts.assistant import Assistant, AssistantSettings, CustomParameter, ReasoningEffort
from .models_parts.check_result import CheckResult
from .models_parts.completion_chunk import ChunkKind, CompletionChunk
from .models_parts.completion_metrics import CompletionMetrics
from .models_parts.completion_result import CompletionResult
from .models_parts.file_attachment import FileAttachment, FileType
from .models_parts.message import Message, Role
from .models_parts.model import Model
from .models_parts.model_descriptor import ModelDescriptor
from .models_parts.suggestion import Suggestion
from .models_parts.usage import Usage

__all__ = [
    "Assistant",
    "AssistantSettings",
    "CustomParameter",
    "ReasoningEffort",
    "CheckResult",
    "ChunkKind",
    "CompletionChunk",
    "CompletionMetrics",
    "CompletionResult",
    "FileAttachment",
    "FileType",
    "Message",
    "Role",
    "Model",
    "ModelDescriptor",
    "Suggestion",
    "Usage",
]
