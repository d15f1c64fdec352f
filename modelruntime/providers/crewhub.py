"""CrewHub provider adapter.

CrewHub is an email-processing AI platform with its own chat API. The API is
not OpenAI-compatible and answers each completion with a single blocking
payload, so the adapter slices that payload into a paced SSE stream.

API shape:
    POST {base_url}/chat/completions  {messages, model, parameters, stream}
    GET  {base_url}/models            [{id, name, description, max_tokens, capabilities, status}]
"""

import asyncio
import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel, Field, model_validator

from modelruntime.config import ProviderSettings
from modelruntime.exceptions import ChatCompletionError, VendorAPIError
from modelruntime.streaming import (
    ChatStreamCallbacks,
    ChatStreamResponse,
    create_stream_chunks,
    emit_stream,
)
from modelruntime.types import ChatRequest, ModelCard
from modelruntime.utils.messages import convert_messages

from .base import BaseProvider, ModelInfo, ProviderCapabilities, run_abortable
from .registry import register_provider

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "emailcrew"

# Substituted when a failed response carries no decodable error body
GENERIC_ERROR_BODY = {"error": {"code": "UNKNOWN", "message": "Unknown error"}}

INVALID_RESPONSE_MESSAGE = "Invalid response from CrewHub"


class CrewHubParameters(BaseModel):
    """Generation parameters; unset values are dropped from the request body."""

    frequency_penalty: Optional[float] = None
    max_tokens: Optional[int] = None
    presence_penalty: Optional[float] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None


class CrewHubRequest(BaseModel):
    messages: list[dict[str, str]]
    model: str
    parameters: CrewHubParameters
    stream: bool = True


class CrewHubData(BaseModel):
    finish_reason: Optional[str] = None
    model: Optional[str] = None
    response: Optional[str] = ""
    tokens_used: Optional[int] = 0


class CrewHubErrorBody(BaseModel):
    code: Optional[str] = None
    message: Optional[str] = None


class CrewHubResponse(BaseModel):
    """CrewHub completion envelope: exactly one of ``data`` or ``error``."""

    success: bool = False
    data: Optional[CrewHubData] = None
    error: Optional[CrewHubErrorBody] = None

    @model_validator(mode="after")
    def validate_envelope(self) -> "CrewHubResponse":
        if (self.data is None) == (self.error is None):
            raise ValueError("response must carry exactly one of 'data' or 'error'")
        return self


class CrewHubModel(BaseModel):
    id: str
    name: str
    description: str = ""
    max_tokens: Optional[int] = None
    capabilities: list[str] = Field(default_factory=list)
    status: str = "inactive"


@register_provider("crewhub", models=[
    "emailcrew",
])
class CrewHubProvider(BaseProvider):
    """CrewHub provider adapter.

    Configuration:
        api_key: CrewHub API key, sent as a bearer token
        base_url: API root (default: https://api.crewhub.ai/v1)

    Example:
        provider = CrewHubProvider(ProviderSettings(api_key="ch-..."))
        stream = await provider.chat(request)
        async for frame in stream:
            ...
    """

    provider_name = "crewhub"
    capabilities = ProviderCapabilities(
        chat=True,
        streaming=True,  # Synthesized from blocking responses
        embeddings=False,
        tools=True,
        vision=False,
    )

    def __init__(self, settings: Optional[ProviderSettings] = None) -> None:
        """Initialize the CrewHub provider.

        Args:
            settings: Provider settings; defaults point at the public API
        """
        super().__init__(settings)

    def _get_client(self) -> httpx.AsyncClient:
        """Get configured HTTP client."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                **self.get_headers(),
                "Content-Type": "application/json",
            },
            timeout=self.settings.timeout,
        )

    async def chat(
        self,
        request: ChatRequest,
        *,
        signal: Optional[asyncio.Event] = None,
        callback: Optional[ChatStreamCallbacks] = None,
    ) -> ChatStreamResponse:
        """Execute a chat request and stream the answer back as SSE frames."""
        try:
            crewhub_request = self.transform_request(request)
            response = await self._send_request(crewhub_request, signal=signal)
            return self.transform_output(response, callback)
        except ChatCompletionError:
            raise
        except Exception as e:
            error = self.transform_error(e)
            logger.warning(
                f"CrewHub chat failed: type={error.error_type.value}, "
                f"code={error.code}, message={error.message}"
            )
            raise error from e

    async def _send_request(
        self,
        request: CrewHubRequest,
        *,
        signal: Optional[asyncio.Event] = None,
    ) -> CrewHubResponse:
        """POST one completion request; no retries at this layer.

        Raises:
            VendorAPIError: On a non-2xx status, carrying the decoded error body
            RequestAbortedError: If ``signal`` fires before the response arrives
        """
        client = self._get_client()
        logger.debug(f"CrewHub request: model={request.model}, stream={request.stream}")

        try:
            response = await run_abortable(
                client.post(
                    "/chat/completions",
                    json=request.model_dump(exclude_none=True),
                    headers={"X-Client-Version": self.settings.client_version},
                ),
                signal,
            )
            if not response.is_success:
                raise VendorAPIError(
                    self._decode_error_body(response),
                    status_code=response.status_code,
                )
            return CrewHubResponse.model_validate(response.json())
        finally:
            await client.aclose()

    @staticmethod
    def _decode_error_body(response: httpx.Response) -> dict[str, Any]:
        """Decode an error body, substituting a generic one when undecodable."""
        try:
            body = response.json()
        except ValueError:
            return {"error": dict(GENERIC_ERROR_BODY["error"])}
        if not isinstance(body, dict):
            return {"error": dict(GENERIC_ERROR_BODY["error"])}
        return body

    def transform_request(self, request: ChatRequest) -> CrewHubRequest:
        """Transform a canonical request to CrewHub format.

        CrewHub request format:
        {
            "messages": [{"role": "user", "content": "Hello!"}],
            "model": "emailcrew",
            "parameters": {"temperature": 0.7, "max_tokens": 256},
            "stream": true
        }
        """
        return CrewHubRequest(
            messages=convert_messages(request.messages),
            model=request.model,
            parameters=CrewHubParameters(
                frequency_penalty=request.frequency_penalty,
                max_tokens=request.max_tokens,
                presence_penalty=request.presence_penalty,
                temperature=request.temperature,
                top_p=request.top_p,
            ),
            stream=(
                request.stream if request.stream is not None
                else self.settings.stream_by_default
            ),
        )

    def transform_output(
        self,
        response: CrewHubResponse,
        callback: Optional[ChatStreamCallbacks] = None,
    ) -> ChatStreamResponse:
        """Turn a complete CrewHub response into a paced canonical stream.

        Raises:
            VendorAPIError: If the envelope does not report success
        """
        if not response.success or response.data is None:
            error = response.error or CrewHubErrorBody()
            raise VendorAPIError({
                "error": {
                    "code": error.code,
                    "message": error.message or INVALID_RESPONSE_MESSAGE,
                },
            })

        data = response.data
        text = data.response or ""
        chunks = create_stream_chunks(
            text,
            model=data.model or DEFAULT_MODEL,
            finish_reason=data.finish_reason,
            num_chunks=self.settings.num_chunks,
        )
        return ChatStreamResponse(emit_stream(
            chunks,
            text=text,
            total_tokens=data.tokens_used or 0,
            callback=callback,
            chunk_delay=self.settings.chunk_delay,
        ))

    async def models(self) -> list[ModelCard]:
        """Fetch the model catalog; failures degrade to an empty list."""
        client = self._get_client()

        try:
            response = await client.get("/models")
            response.raise_for_status()
            return self.transform_models(response.json())
        except Exception as e:
            logger.error(f"CrewHub models fetch error: {e}")
            return []
        finally:
            await client.aclose()

    def transform_models(self, raw_models: Any) -> list[ModelCard]:
        """Map a CrewHub model listing to model cards, keeping active models.

        CrewHub model format:
        {
            "id": "emailcrew",
            "name": "EmailCrew",
            "description": "...",
            "max_tokens": 128000,
            "capabilities": ["function_calling"],
            "status": "active"
        }
        """
        if isinstance(raw_models, dict):
            raw_models = raw_models.get("data", [])

        cards = []
        for raw in raw_models:
            model = CrewHubModel.model_validate(raw)
            if model.status != "active":
                continue
            cards.append(ModelCard(
                id=model.id,
                display_name=model.name,
                description=model.description,
                context_window_tokens=model.max_tokens,
                function_call="function_calling" in model.capabilities,
                vision="vision" in model.capabilities,
            ))
        return cards

    def get_model_info(self, model: str) -> ModelInfo:
        """Get information about a model."""
        model_configs = {
            "emailcrew": {"max_tokens": 128000, "max_output_tokens": 8192, "supports_tools": True},
        }

        config = model_configs.get(model, {
            "max_tokens": 4096,
            "max_output_tokens": 4096,
            "supports_tools": False,
        })

        return ModelInfo(
            id=model,
            name=model,
            max_tokens=config["max_tokens"],
            max_output_tokens=config["max_output_tokens"],
            supports_vision=False,
            supports_tools=config["supports_tools"],
            supports_streaming=True,
            provider="crewhub",
        )
