"""Configuration management for provider runtimes."""

import os
from dataclasses import dataclass, field
from typing import Any, Optional

import yaml

from modelruntime.exceptions import ConfigError


DEFAULT_CREWHUB_BASE_URL = "https://api.crewhub.ai/v1"

# Environment fallbacks per provider: (api key variable, base URL variable)
PROVIDER_ENV_VARS: dict[str, tuple[str, str]] = {
    "crewhub": ("CREWHUB_API_KEY", "CREWHUB_BASE_URL"),
}


@dataclass
class ProviderSettings:
    """Settings for one provider runtime.

    ``stream_by_default`` is the streaming flag sent to the vendor when a
    request leaves ``stream`` unset. ``num_chunks`` and ``chunk_delay`` control
    how a blocking vendor response is paced out as a stream.
    """
    api_key: Optional[str] = None
    base_url: str = DEFAULT_CREWHUB_BASE_URL
    timeout: float = 60.0
    stream_by_default: bool = True
    num_chunks: int = 10
    chunk_delay: float = 0.05
    client_version: str = "1.0.0"

    def __post_init__(self) -> None:
        if self.num_chunks < 1:
            raise ConfigError(f"num_chunks must be >= 1, got {self.num_chunks}")
        if self.chunk_delay < 0:
            raise ConfigError(f"chunk_delay must be >= 0, got {self.chunk_delay}")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be > 0, got {self.timeout}")
        self.base_url = self.base_url.rstrip("/")


@dataclass
class GeneralConfig:
    """General server configuration."""
    log_level: str = "INFO"


@dataclass
class RuntimeConfig:
    """Full runtime configuration."""
    providers: dict[str, ProviderSettings] = field(default_factory=dict)
    general: GeneralConfig = field(default_factory=GeneralConfig)

    def get_provider_settings(self, provider: str) -> ProviderSettings:
        """Return settings for a provider, built from the environment if absent."""
        if provider not in self.providers:
            self.providers[provider] = settings_from_env(provider)
        return self.providers[provider]


def _resolve_env_vars(value: Any) -> Any:
    """Resolve environment variables in configuration values.

    Supports format: os.environ/VAR_NAME or ${VAR_NAME}

    Args:
        value: Configuration value

    Returns:
        Resolved value
    """
    if isinstance(value, str):
        if value.startswith("os.environ/"):
            env_var = value[11:]
            return os.environ.get(env_var)
        elif value.startswith("${") and value.endswith("}"):
            env_var = value[2:-1]
            return os.environ.get(env_var)
    elif isinstance(value, dict):
        return {k: _resolve_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_resolve_env_vars(v) for v in value]
    return value


def settings_from_env(provider: str, **overrides: Any) -> ProviderSettings:
    """Build provider settings from environment variables.

    Args:
        provider: Provider identifier
        **overrides: Explicit values taking precedence over the environment

    Returns:
        Provider settings
    """
    key_var, base_var = PROVIDER_ENV_VARS.get(
        provider, (f"{provider.upper()}_API_KEY", f"{provider.upper()}_BASE_URL")
    )
    values: dict[str, Any] = {}
    if os.environ.get(key_var):
        values["api_key"] = os.environ[key_var]
    if os.environ.get(base_var):
        values["base_url"] = os.environ[base_var]
    values.update({k: v for k, v in overrides.items() if v is not None})
    return ProviderSettings(**values)


def _parse_provider(name: str, data: Optional[dict[str, Any]]) -> ProviderSettings:
    data = _resolve_env_vars(data or {})
    known = set(ProviderSettings.__dataclass_fields__)
    unknown = set(data) - known
    if unknown:
        raise ConfigError(
            f"Unknown settings for provider '{name}': {', '.join(sorted(unknown))}"
        )
    try:
        return settings_from_env(name, **data)
    except TypeError as e:
        raise ConfigError(f"Invalid settings for provider '{name}': {e}") from e


def load_config(config_path: Optional[str] = None) -> RuntimeConfig:
    """Load configuration from file.

    Args:
        config_path: Path to configuration file. If None, uses default locations.

    Returns:
        Runtime configuration
    """
    # Default config locations
    if config_path is None:
        search_paths = [
            "config.yaml",
            "config/config.yaml",
            "/etc/modelruntime/config.yaml",
        ]
        for path in search_paths:
            if os.path.exists(path):
                config_path = path
                break

    config = RuntimeConfig()

    if config_path and os.path.exists(config_path):
        with open(config_path, "r") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Failed to parse {config_path}: {e}") from e

        if data:
            if not isinstance(data, dict):
                raise ConfigError(f"{config_path} must contain a mapping")

            for name, provider_data in (data.get("providers") or {}).items():
                config.providers[name] = _parse_provider(name, provider_data)

            if "general_settings" in data:
                general = data["general_settings"] or {}
                config.general = GeneralConfig(
                    log_level=general.get("log_level", "INFO"),
                )

    return config
