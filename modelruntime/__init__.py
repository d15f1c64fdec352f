"""modelruntime - uniform streaming chat interface over heterogeneous vendor chat APIs."""

__version__ = "0.1.0"

from modelruntime.config import ProviderSettings, RuntimeConfig, load_config
from modelruntime.providers import BaseProvider, CrewHubProvider, get_provider
from modelruntime.streaming import ChatStreamCallbacks, ChatStreamResponse
from modelruntime.types import (
    AgentRuntimeErrorType,
    ChatFinalResult,
    ChatRequest,
    Message,
    ModelCard,
    ModelUsage,
    StreamChunk,
)
from modelruntime.exceptions import (
    ModelRuntimeError,
    ChatCompletionError,
    StreamEmissionError,
    classify_error,
)

__all__ = [
    # Version
    "__version__",
    # Configuration
    "ProviderSettings",
    "RuntimeConfig",
    "load_config",
    # Providers
    "BaseProvider",
    "CrewHubProvider",
    "get_provider",
    # Streaming
    "ChatStreamCallbacks",
    "ChatStreamResponse",
    # Types
    "AgentRuntimeErrorType",
    "ChatFinalResult",
    "ChatRequest",
    "Message",
    "ModelCard",
    "ModelUsage",
    "StreamChunk",
    # Exceptions
    "ModelRuntimeError",
    "ChatCompletionError",
    "StreamEmissionError",
    "classify_error",
]
