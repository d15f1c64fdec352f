"""Chat completion routes."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import StreamingResponse

from modelruntime.proxy.dependencies import resolve_provider
from modelruntime.proxy.schemas import ChatCompletionBody

router = APIRouter(tags=["chat"])
logger = logging.getLogger(__name__)


@router.post("/chat/completions")
async def chat_completion(body: ChatCompletionBody, http_request: Request) -> StreamingResponse:
    """Create a chat completion, always answered as an SSE stream.

    ``model`` may carry a provider prefix, e.g. ``crewhub/emailcrew``, or the
    provider may be named in the ``provider`` field.
    """
    provider, model_name = resolve_provider(http_request, body.model, body.provider)
    request = body.model_copy(update={"model": model_name})

    logger.info(f"Chat request: provider={provider.provider_name}, model={model_name}")
    stream = await provider.chat(request)

    return StreamingResponse(
        stream,
        media_type=stream.media_type,
        headers=stream.headers,
    )
