"""Base provider interface for modelruntime."""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Optional, TypeVar

from modelruntime.config import ProviderSettings
from modelruntime.exceptions import ChatCompletionError, RequestAbortedError, classify_error
from modelruntime.streaming import ChatStreamCallbacks, ChatStreamResponse
from modelruntime.types import ChatRequest, ModelCard

T = TypeVar("T")


async def run_abortable(awaitable: Awaitable[T], signal: Optional[asyncio.Event]) -> T:
    """Await ``awaitable`` unless ``signal`` is set first.

    Args:
        awaitable: The operation to run, typically an HTTP call
        signal: Optional event set by the caller to abort the operation

    Returns:
        The operation's result

    Raises:
        RequestAbortedError: If the signal fired before the operation finished
    """
    if signal is None:
        return await awaitable

    task = asyncio.ensure_future(awaitable)
    if signal.is_set():
        task.cancel()
        raise RequestAbortedError()

    waiter = asyncio.ensure_future(signal.wait())
    try:
        done, _ = await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        task.cancel()
        raise
    finally:
        waiter.cancel()

    if task in done:
        return task.result()

    task.cancel()
    try:
        await task
    except asyncio.CancelledError:
        pass
    raise RequestAbortedError()


@dataclass
class ProviderCapabilities:
    """Provider capabilities."""

    chat: bool = True
    streaming: bool = True
    embeddings: bool = False
    tools: bool = False
    vision: bool = False


@dataclass
class ModelInfo:
    """Static provider model information."""
    
    id: str
    name: str
    max_tokens: int
    max_output_tokens: int = 0
    supports_vision: bool = False
    supports_tools: bool = False
    supports_streaming: bool = True
    provider: str = ""


class BaseProvider(ABC):
    """Base class for all provider runtime adapters.

    An adapter holds configuration only, so one instance can serve
    concurrent ``chat`` calls.
    """
    
    provider_name: str = ""
    capabilities: ProviderCapabilities = ProviderCapabilities()
    
    def __init__(self, settings: Optional[ProviderSettings] = None) -> None:
        """Initialize the provider.
        
        Args:
            settings: Provider settings (API key, base URL, stream pacing)
        """
        self.settings = settings or ProviderSettings()
    
    @property
    def api_key(self) -> Optional[str]:
        return self.settings.api_key
    
    @property
    def base_url(self) -> str:
        return self.settings.base_url
    
    @abstractmethod
    async def chat(
        self,
        request: ChatRequest,
        *,
        signal: Optional[asyncio.Event] = None,
        callback: Optional[ChatStreamCallbacks] = None,
    ) -> ChatStreamResponse:
        """Execute a chat request and return its canonical SSE stream.
        
        Args:
            request: The canonical chat request
            signal: Optional event; setting it aborts the vendor call
            callback: Optional consumer callbacks driven during emission
            
        Returns:
            The canonical stream response
            
        Raises:
            ChatCompletionError: If the vendor call fails
        """
        pass
    
    @abstractmethod
    async def models(self) -> list[ModelCard]:
        """List the vendor's available models; never raises."""
        pass
    
    @abstractmethod
    def transform_request(self, request: ChatRequest) -> Any:
        """Transform a canonical request to the provider format.
        
        Args:
            request: The chat request
            
        Returns:
            Provider-specific request body
        """
        pass
    
    @abstractmethod
    def get_model_info(self, model: str) -> ModelInfo:
        """Get information about a model.
        
        Args:
            model: The model name
            
        Returns:
            Model information
        """
        pass
    
    def transform_error(self, error: Any) -> ChatCompletionError:
        """Classify any error raised while serving a request.
        
        Args:
            error: Vendor error, decoded error body, or exception
            
        Returns:
            Error from the closed taxonomy, tagged with this provider
        """
        return classify_error(error, endpoint=self.base_url, provider=self.provider_name)
    
    def get_headers(self, api_key: Optional[str] = None) -> dict[str, str]:
        """Get authentication headers.
        
        Args:
            api_key: Optional API key override
            
        Returns:
            Headers dictionary
        """
        key = api_key or self.api_key
        if not key:
            return {}
        return {"Authorization": f"Bearer {key}"}
