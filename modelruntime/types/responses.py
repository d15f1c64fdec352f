"""Response type definitions."""

from datetime import date
from typing import Literal, Optional
from pydantic import BaseModel, Field

from .common import CamelModel


class DeltaMessage(BaseModel):
    """Delta message in a streaming chunk."""
    
    role: Optional[str] = None
    content: Optional[str] = None


class StreamChoice(BaseModel):
    """Choice in a streaming chunk."""
    
    index: int = 0
    delta: DeltaMessage
    finish_reason: Optional[str] = None


class StreamChunk(BaseModel):
    """Streaming completion chunk."""
    
    id: str
    object: Literal["chat.completion.chunk"] = "chat.completion.chunk"
    created: int
    model: str
    choices: list[StreamChoice]

    @property
    def content(self) -> str:
        """Text delta carried by the first choice."""
        if not self.choices:
            return ""
        return self.choices[0].delta.content or ""

    @property
    def finish_reason(self) -> Optional[str]:
        """Finish reason of the first choice, if any."""
        if not self.choices:
            return None
        return self.choices[0].finish_reason


class ModelUsage(CamelModel):
    """Estimated token usage reported once a stream completes."""

    input_text_tokens: int = 0
    output_text_tokens: int = 0
    total_tokens: int = 0


class ChatFinalResult(CamelModel):
    """Payload handed to the final-result callback."""

    text: str
    usage: ModelUsage


class ModelCard(CamelModel):
    """Canonical model descriptor derived from a vendor model listing."""

    id: str
    display_name: str
    description: str = ""
    context_window_tokens: Optional[int] = None
    function_call: bool = False
    vision: bool = False
    enabled: bool = True
    released_at: str = Field(default_factory=lambda: date.today().isoformat())


class ModelList(BaseModel):
    """List of available models."""
    
    object: Literal["list"] = "list"
    data: list[ModelCard]
