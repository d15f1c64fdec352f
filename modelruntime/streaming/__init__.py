"""Chunk synthesis and SSE emission for canonical chat streams."""

from .synthesizer import (
    DEFAULT_NUM_CHUNKS,
    chunk_size_for,
    create_stream_chunks,
    split_text,
)
from .emitter import (
    DONE_EVENT,
    SSE_HEADERS,
    ChatStreamCallbacks,
    ChatStreamResponse,
    emit_stream,
    format_sse,
)

__all__ = [
    "DEFAULT_NUM_CHUNKS",
    "chunk_size_for",
    "create_stream_chunks",
    "split_text",
    "DONE_EVENT",
    "SSE_HEADERS",
    "ChatStreamCallbacks",
    "ChatStreamResponse",
    "emit_stream",
    "format_sse",
]
