"""Request bodies accepted by the runtime server."""

from typing import Optional

from pydantic import Field

from modelruntime.types import ChatRequest


class ChatCompletionBody(ChatRequest):
    """Chat request as posted to ``/v1/chat/completions``.

    ``provider`` selects the adapter explicitly. Without it the adapter comes
    from a ``provider/`` prefix on ``model``, then from the registered model
    ids, then the default provider.
    """

    provider: Optional[str] = Field(default=None, description="Provider identifier")
