"""Message type definitions."""

from typing import Literal, Optional, Union
from pydantic import BaseModel


MessageRole = Literal["system", "user", "assistant"]


class ContentBlock(BaseModel):
    """Content block for multimodal messages.

    ``type`` is left open and no field is required beyond it: unknown kinds
    and text parts without ``text`` flatten to empty text.
    """
    
    type: str
    text: Optional[str] = None
    image_url: Optional[dict[str, str]] = None
    
    model_config = {"extra": "allow"}


class Message(BaseModel):
    """Chat message in the canonical format."""
    
    role: MessageRole
    content: Union[str, list[ContentBlock]] = ""
    
    model_config = {"frozen": True}
    
    @classmethod
    def system(cls, content: str) -> "Message":
        """Create a system message."""
        return cls(role="system", content=content)
    
    @classmethod
    def user(cls, content: str) -> "Message":
        """Create a user message."""
        return cls(role="user", content=content)
    
    @classmethod
    def assistant(cls, content: str) -> "Message":
        """Create an assistant message."""
        return cls(role="assistant", content=content)
    
    @classmethod
    def with_image(cls, text: str, image_url: str) -> "Message":
        """Create a user message with text and image."""
        return cls(
            role="user",
            content=[
                ContentBlock(type="text", text=text),
                ContentBlock(type="image_url", image_url={"url": image_url}),
            ]
        )
