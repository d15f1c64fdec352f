"""Flattening of canonical multi-part messages into plain vendor text."""

from typing import Any, Iterable, Union

from modelruntime.types import ContentBlock, Message


def image_placeholder(url: str) -> str:
    """Placeholder token embedding an image reference in flat text."""
    return f"[Image: {url}]"


def _part_text(part: Union[ContentBlock, dict[str, Any]]) -> str:
    if isinstance(part, ContentBlock):
        part = part.model_dump()
    kind = part.get("type")
    if kind == "text":
        return part.get("text") or ""
    if kind == "image_url":
        return image_placeholder((part.get("image_url") or {}).get("url", ""))
    return ""


def flatten_content(content: Union[str, list, None]) -> str:
    """Concatenate content parts in order; unknown part kinds become empty text."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    return "".join(_part_text(part) for part in content)


def convert_messages(messages: Iterable[Union[Message, dict[str, Any]]]) -> list[dict[str, str]]:
    """Convert canonical messages into ``{"role", "content"}`` dicts with string content.
    
    Args:
        messages: Canonical messages (models or plain dicts)
        
    Returns:
        Messages in the flat textual form vendors expect
    """
    converted = []
    for msg in messages:
        if isinstance(msg, Message):
            role, content = msg.role, msg.content
        else:
            role, content = msg.get("role"), msg.get("content")
        converted.append({"role": role, "content": flatten_content(content)})
    return converted
