"""Manufacture a chunk sequence from one complete vendor response.

Vendors without a native incremental stream return the whole completion at
once. The text is sliced into at most ``num_chunks`` ordered pieces, each
wrapped in a ``chat.completion.chunk`` envelope; only the final piece carries
a finish reason.
"""

import math
import time
from typing import Optional

from modelruntime.types import DeltaMessage, FinishReason, StreamChoice, StreamChunk


DEFAULT_NUM_CHUNKS = 10


def chunk_size_for(length: int, num_chunks: int = DEFAULT_NUM_CHUNKS) -> int:
    """Slice length for a text of ``length`` characters (never below 1)."""
    return max(1, math.ceil(length / max(1, num_chunks)))


def split_text(text: str, num_chunks: int = DEFAULT_NUM_CHUNKS) -> list[str]:
    """Split text into ordered slices; empty text yields a single empty slice."""
    if not text:
        return [""]
    size = chunk_size_for(len(text), num_chunks)
    return [text[i:i + size] for i in range(0, len(text), size)]


def create_stream_chunks(
    text: str,
    *,
    model: str,
    finish_reason: Optional[str] = None,
    num_chunks: int = DEFAULT_NUM_CHUNKS,
) -> list[StreamChunk]:
    """Wrap the slices of ``text`` in stream chunk envelopes.
    
    Args:
        text: Complete response text
        model: Model id reported on every chunk
        finish_reason: Vendor finish reason, ``"stop"`` when missing
        num_chunks: Upper bound on the number of slices
        
    Returns:
        Chunks in emission order
    """
    created_ms = int(time.time() * 1000)
    created = created_ms // 1000
    slices = split_text(text, num_chunks)
    last = len(slices) - 1

    chunks = []
    offset = 0
    for position, piece in enumerate(slices):
        chunks.append(StreamChunk(
            id=f"chatcmpl-{created_ms}-{offset}",
            created=created,
            model=model,
            choices=[StreamChoice(
                index=0,
                delta=DeltaMessage(content=piece),
                finish_reason=(finish_reason or FinishReason.STOP) if position == last else None,
            )],
        ))
        offset += len(piece)
    return chunks
