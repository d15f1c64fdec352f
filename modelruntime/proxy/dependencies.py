"""Request-scoped dependencies for the runtime server."""

from typing import Optional

from fastapi import Request

from modelruntime.config import RuntimeConfig
from modelruntime.providers.base import BaseProvider
from modelruntime.providers.registry import ProviderRegistry


def get_config(request: Request) -> RuntimeConfig:
    """Get the runtime configuration from app state."""
    return request.app.state.config


def resolve_provider(
    request: Request,
    model: str,
    provider: Optional[str] = None,
) -> tuple[BaseProvider, str]:
    """Pick the provider for ``model`` and the model id to send to it.

    Provider instances hold configuration only and are shared across requests.

    Raises:
        ModelNotSupportedError: If the selected provider is not registered
    """
    provider_class, model_name = ProviderRegistry.resolve(model, provider)
    return get_provider_instance(request, provider_class.provider_name), model_name


def get_provider_instance(request: Request, provider_name: str) -> BaseProvider:
    """Return the shared adapter instance for a provider, creating it on first use.

    Raises:
        KeyError: If the provider is not registered
    """
    instances: dict[str, BaseProvider] = request.app.state.providers
    if provider_name not in instances:
        provider_class = ProviderRegistry.get(provider_name)
        settings = get_config(request).get_provider_settings(provider_name)
        instances[provider_name] = provider_class(settings)
    return instances[provider_name]
