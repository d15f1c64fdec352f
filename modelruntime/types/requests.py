"""Request type definitions."""

from typing import Optional
from pydantic import BaseModel, Field

from .messages import Message


class ChatRequest(BaseModel):
    """Canonical chat request.

    Generation parameters left as ``None`` are treated as absent and are not
    forwarded to the vendor. ``stream`` is ``None`` unless the caller set it
    explicitly; providers fall back to their configured default.
    """
    
    model: str
    messages: list[Message]
    temperature: Optional[float] = Field(default=None, ge=0, le=2)
    top_p: Optional[float] = Field(default=None, ge=0, le=1)
    max_tokens: Optional[int] = Field(default=None, ge=1)
    presence_penalty: Optional[float] = Field(default=None, ge=-2, le=2)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2, le=2)
    stream: Optional[bool] = None
    
    model_config = {"frozen": True}
