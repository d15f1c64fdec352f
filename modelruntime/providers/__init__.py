"""Provider adapters for modelruntime."""

from .base import BaseProvider, ModelInfo, ProviderCapabilities, run_abortable
from .registry import ProviderRegistry, register_provider, get_provider

# Import providers to auto-register them
from .crewhub import CrewHubProvider

__all__ = [
    "BaseProvider",
    "ModelInfo",
    "ProviderCapabilities",
    "run_abortable",
    "ProviderRegistry",
    "register_provider",
    "get_provider",
    # Provider classes
    "CrewHubProvider",
]
