"""Type definitions for modelruntime."""

from .messages import Message, MessageRole, ContentBlock
from .requests import ChatRequest
from .responses import (
    StreamChunk,
    StreamChoice,
    DeltaMessage,
    ModelUsage,
    ChatFinalResult,
    ModelCard,
    ModelList,
)
from .common import AgentRuntimeErrorType, FinishReason, CamelModel

__all__ = [
    # Messages
    "Message",
    "MessageRole",
    "ContentBlock",
    # Requests
    "ChatRequest",
    # Responses
    "StreamChunk",
    "StreamChoice",
    "DeltaMessage",
    "ModelUsage",
    "ChatFinalResult",
    "ModelCard",
    "ModelList",
    # Common
    "AgentRuntimeErrorType",
    "FinishReason",
    "CamelModel",
]
