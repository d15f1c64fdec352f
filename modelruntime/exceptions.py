"""Custom exceptions and vendor error classification for modelruntime."""

from typing import Any, Optional

from modelruntime.types.common import AgentRuntimeErrorType


UNKNOWN_ERROR_CODE = "UNKNOWN_ERROR"
UNKNOWN_ERROR_MESSAGE = "Unknown error"

# Vendor codes with a dedicated kind; every other code is a ProviderBizError.
ERROR_CODE_MAP: dict[str, AgentRuntimeErrorType] = {
    "INVALID_API_KEY": AgentRuntimeErrorType.INVALID_PROVIDER_API_KEY,
    "AUTHENTICATION_FAILED": AgentRuntimeErrorType.INVALID_PROVIDER_API_KEY,
    "RATE_LIMIT_EXCEEDED": AgentRuntimeErrorType.QUOTA_LIMIT_REACHED,
    "MODEL_NOT_FOUND": AgentRuntimeErrorType.MODEL_NOT_FOUND,
}


class ModelRuntimeError(Exception):
    """Base exception for all modelruntime errors."""

    def __init__(self, message: str, *, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ChatCompletionError(ModelRuntimeError):
    """Classified provider error surfaced to callers.

    Attributes:
        error_type: Kind from the closed taxonomy
        endpoint: Base URL of the provider that failed
        provider: Provider identifier
    """

    def __init__(
        self,
        message: str,
        *,
        error_type: AgentRuntimeErrorType,
        endpoint: str,
        provider: str,
        code: Optional[str] = None,
    ) -> None:
        super().__init__(message, code=code)
        self.error_type = error_type
        self.endpoint = endpoint
        self.provider = provider

    def __str__(self) -> str:
        return f"{self.error_type.value}: {self.message}"

    def to_payload(self) -> dict[str, str]:
        """Return the canonical error shape."""
        return {
            "errorType": self.error_type.value,
            "error": self.message,
            "endpoint": self.endpoint,
            "provider": self.provider,
        }


class VendorAPIError(ModelRuntimeError):
    """Vendor returned a failure; ``body`` holds the decoded vendor error body."""

    def __init__(
        self,
        body: dict[str, Any],
        *,
        status_code: Optional[int] = None,
    ) -> None:
        body = body if isinstance(body, dict) else {}
        error = body.get("error")
        error = error if isinstance(error, dict) else {}
        super().__init__(
            error.get("message") or body.get("message") or UNKNOWN_ERROR_MESSAGE,
            code=error.get("code"),
        )
        self.body = body
        self.status_code = status_code


class RequestAbortedError(ModelRuntimeError):
    """The caller's cancellation signal fired before the vendor answered."""

    def __init__(self, message: str = "The request was aborted") -> None:
        super().__init__(message, code="ABORTED")


class StreamEmissionError(ModelRuntimeError):
    """Emission failed after the stream had started.

    Raised to the stream consumer in place of a silent truncation.
    """

    def __init__(self, message: str, *, index: int) -> None:
        super().__init__(message, code="STREAM_ERROR")
        self.index = index


class ModelNotSupportedError(ModelRuntimeError):
    """Model is not supported by any registered provider."""

    def __init__(self, model: str, provider: Optional[str] = None) -> None:
        message = f"Model '{model}' is not supported"
        if provider:
            message += f" by provider '{provider}'"
        super().__init__(message, code="model_not_supported")
        self.model = model
        self.provider = provider


class ConfigError(ModelRuntimeError):
    """Invalid runtime configuration."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="config_error")


def _extract_error_body(error: Any) -> dict[str, Any]:
    if isinstance(error, VendorAPIError):
        error = error.body
    if isinstance(error, dict):
        body = error.get("error")
        if isinstance(body, dict):
            return body
    return {}


def classify_error(error: Any, *, endpoint: str, provider: str) -> ChatCompletionError:
    """Map any error value onto the closed taxonomy.

    Accepts a ``VendorAPIError``, a decoded vendor body such as
    ``{"error": {"code": ..., "message": ...}}``, or an unrelated exception.
    Never raises.

    Args:
        error: The error value to classify
        endpoint: Provider base URL reported back to the caller
        provider: Provider identifier reported back to the caller

    Returns:
        A classified ChatCompletionError
    """
    if isinstance(error, ChatCompletionError):
        return error

    body = _extract_error_body(error)
    code = body.get("code") or UNKNOWN_ERROR_CODE
    message = body.get("message")
    if not message and isinstance(error, BaseException):
        message = getattr(error, "message", None) or str(error)
    message = str(message) if message else UNKNOWN_ERROR_MESSAGE

    error_type = ERROR_CODE_MAP.get(str(code), AgentRuntimeErrorType.PROVIDER_BIZ_ERROR)
    return ChatCompletionError(
        message,
        error_type=error_type,
        endpoint=endpoint,
        provider=provider,
        code=str(code),
    )
