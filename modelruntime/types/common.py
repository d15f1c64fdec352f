"""Common type definitions shared across the runtime."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AgentRuntimeErrorType(str, Enum):
    """Closed error taxonomy exposed to callers.

    Vendor error vocabularies are open-ended; every vendor code maps onto
    exactly one of these kinds, with ``PROVIDER_BIZ_ERROR`` as the catch-all.
    """

    INVALID_PROVIDER_API_KEY = "InvalidProviderAPIKey"
    QUOTA_LIMIT_REACHED = "QuotaLimitReached"
    MODEL_NOT_FOUND = "ModelNotFound"
    PROVIDER_BIZ_ERROR = "ProviderBizError"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid error type values."""
        return [t.value for t in cls]


class FinishReason(str):
    """Possible finish reasons."""
    
    STOP = "stop"
    LENGTH = "length"
    TOOL_CALLS = "tool_calls"
    CONTENT_FILTER = "content_filter"


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys on the canonical wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
