"""Provider registry: which adapter serves a provider name or model id."""

from typing import Callable, Optional, Type

from modelruntime.exceptions import ModelNotSupportedError
from .base import BaseProvider

DEFAULT_PROVIDER = "crewhub"


class ProviderRegistry:
    """Class-level table of adapters, filled by ``@register_provider`` at import."""

    _adapters: dict[str, Type[BaseProvider]] = {}
    _known_models: dict[str, str] = {}  # model id -> provider name

    @classmethod
    def register(
        cls,
        name: str,
        adapter: Type[BaseProvider],
        models: Optional[list[str]] = None,
    ) -> None:
        cls._adapters[name] = adapter
        cls._known_models.update(dict.fromkeys(models or [], name))

    @classmethod
    def get(cls, name: str) -> Type[BaseProvider]:
        """Return the adapter class registered under ``name``.

        Raises:
            KeyError: If nothing is registered under that name
        """
        try:
            return cls._adapters[name]
        except KeyError:
            raise KeyError(f"Provider '{name}' is not registered") from None

    @classmethod
    def names(cls) -> list[str]:
        return sorted(cls._adapters)

    @classmethod
    def resolve(
        cls,
        model: str,
        provider: Optional[str] = None,
        default: str = DEFAULT_PROVIDER,
    ) -> tuple[Type[BaseProvider], str]:
        """Split a requested model into its adapter and the vendor model id.

        Lookup order is the explicit ``provider``, then a ``provider/`` prefix
        on ``model``, then the registered model ids, then ``default``. Ids the
        vendor lists at runtime need no registration.

        Examples:
            resolve("emailcrew")                      -> (CrewHubProvider, "emailcrew")
            resolve("crewhub/visioncrew")             -> (CrewHubProvider, "visioncrew")
            resolve("visioncrew", provider="crewhub") -> (CrewHubProvider, "visioncrew")

        Raises:
            ModelNotSupportedError: If the selected provider is not registered,
                or the prefix contradicts ``provider``
        """
        prefix, sep, rest = model.partition("/")
        if sep:
            if provider is not None and provider != prefix:
                raise ModelNotSupportedError(model, provider)
            provider, model = prefix, rest
        elif provider is None:
            provider = cls._known_models.get(model, default)

        if provider not in cls._adapters:
            raise ModelNotSupportedError(model, provider)
        return cls._adapters[provider], model


def register_provider(
    name: str,
    models: Optional[list[str]] = None,
) -> Callable[[Type[BaseProvider]], Type[BaseProvider]]:
    """Class decorator registering an adapter and naming it ``name``."""
    def decorator(adapter: Type[BaseProvider]) -> Type[BaseProvider]:
        ProviderRegistry.register(name, adapter, models)
        adapter.provider_name = name
        return adapter
    return decorator


def get_provider(name: str) -> Type[BaseProvider]:
    """Get a provider class by name."""
    return ProviderRegistry.get(name)
