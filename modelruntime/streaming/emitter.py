"""Server-Sent-Events emission of canonical stream chunks."""

import asyncio
import inspect
import logging
from dataclasses import dataclass
from typing import Any, AsyncIterator, Awaitable, Callable, Optional, Sequence, Union

from modelruntime.exceptions import StreamEmissionError
from modelruntime.types import ChatFinalResult, StreamChunk
from modelruntime.utils.usage import estimate_usage

logger = logging.getLogger(__name__)

DONE_EVENT = b"data: [DONE]\n\n"

SSE_HEADERS = {
    "Content-Type": "text/event-stream",
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}

OnText = Callable[[str], Union[Awaitable[None], None]]
OnFinal = Callable[[ChatFinalResult], Union[Awaitable[None], None]]


@dataclass
class ChatStreamCallbacks:
    """Consumer callbacks driven by the emitter.

    Attributes:
        on_text: Called with each non-empty text delta, in chunk order
        on_final: Called once with the full text and estimated usage
    """
    on_text: Optional[OnText] = None
    on_final: Optional[OnFinal] = None


async def _invoke(func: Callable[..., Any], *args: Any) -> None:
    result = func(*args)
    if inspect.isawaitable(result):
        await result


def format_sse(chunk: StreamChunk) -> bytes:
    """Frame one chunk as a ``data:`` event."""
    return f"data: {chunk.model_dump_json(exclude_none=True)}\n\n".encode("utf-8")


async def emit_stream(
    chunks: Sequence[StreamChunk],
    *,
    text: str,
    total_tokens: int = 0,
    callback: Optional[ChatStreamCallbacks] = None,
    chunk_delay: float = 0.0,
) -> AsyncIterator[bytes]:
    """Emit chunks as SSE frames, driving the consumer callbacks.
    
    ``on_text`` is awaited before its chunk is written, so callbacks never
    overlap and run in chunk order. ``on_final`` runs exactly once after the
    last chunk and before the ``[DONE]`` sentinel, so a consumer that stops
    reading at ``[DONE]`` has already seen it complete.
    
    Args:
        chunks: Chunks in emission order
        text: Full response text handed to ``on_final``
        total_tokens: Vendor-reported token total
        callback: Optional consumer callbacks
        chunk_delay: Pause in seconds between consecutive chunks
        
    Yields:
        Encoded SSE frames
        
    Raises:
        StreamEmissionError: If a callback or encoding step fails mid-stream
    """
    on_text = callback.on_text if callback else None
    on_final = callback.on_final if callback else None
    index = 0

    try:
        for index, chunk in enumerate(chunks):
            if index > 0 and chunk_delay > 0:
                await asyncio.sleep(chunk_delay)

            content = chunk.content
            if on_text is not None and content:
                await _invoke(on_text, content)

            yield format_sse(chunk)

        index = len(chunks)
        if on_final is not None:
            await _invoke(
                on_final,
                ChatFinalResult(text=text, usage=estimate_usage(total_tokens)),
            )

        yield DONE_EVENT
    except Exception as e:
        logger.exception(f"Streaming error at chunk {index}: {e}")
        raise StreamEmissionError(f"Stream failed at chunk {index}: {e}", index=index) from e


class ChatStreamResponse:
    """An SSE byte stream plus the headers it must be served with.

    Iterate it with ``async for`` to receive the encoded frames. A failure
    during emission surfaces from the iteration as ``StreamEmissionError``.
    """

    media_type = "text/event-stream"

    def __init__(self, body: AsyncIterator[bytes]) -> None:
        self.body = body
        self.headers = dict(SSE_HEADERS)

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self.body

    async def read(self) -> bytes:
        """Consume the whole stream and return its bytes."""
        return b"".join([frame async for frame in self.body])

    async def aclose(self) -> None:
        """Close the underlying generator without draining it."""
        aclose = getattr(self.body, "aclose", None)
        if aclose is not None:
            await aclose()
