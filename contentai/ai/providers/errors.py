"""
Provider Errors - Failure taxonomy for LLM provider calls.

Every failed provider call is classified into exactly one of these kinds.
The orchestrator uses the kind to pick the diagnostic banner it prepends to
fallback content; none of them are fatal.

Classification order matters: OpenAI reports exhausted quota as HTTP 429
with code "insufficient_quota", so quota markers are checked before the
generic rate-limit ones.
"""

from enum import Enum
from typing import Optional, Union


class ErrorKind(str, Enum):
    """Classified failure kinds surfaced in the response envelope."""
    AUTH = "auth"
    QUOTA = "quota"
    RATE_LIMIT = "rate_limit"
    SAFETY = "safety"
    UNKNOWN = "unknown"


class ProviderError(Exception):
    """Base class for classified provider failures."""

    kind: ErrorKind = ErrorKind.UNKNOWN
    diagnostic: str = "The AI provider returned an unexpected error."

    def __init__(
        self,
        message: str = "",
        provider: Optional[str] = None,
        diagnostic: Optional[str] = None,
    ):
        if diagnostic:
            self.diagnostic = diagnostic
        super().__init__(message or self.diagnostic)
        self.message = message or self.diagnostic
        self.provider = provider


class AuthError(ProviderError):
    kind = ErrorKind.AUTH
    diagnostic = "The API key was rejected. Check that your provider credential is valid."


class QuotaError(ProviderError):
    kind = ErrorKind.QUOTA
    diagnostic = "Your provider quota is exhausted. Check your plan and billing details."


class RateLimitError(ProviderError):
    kind = ErrorKind.RATE_LIMIT
    diagnostic = "Too many requests were sent to the provider. Wait a moment and try again."


class SafetyError(ProviderError):
    kind = ErrorKind.SAFETY
    diagnostic = "The request was blocked by the provider's content filter. Try rephrasing it."


class UnknownProviderError(ProviderError):
    kind = ErrorKind.UNKNOWN
    diagnostic = "The AI provider could not be reached or returned an unexpected error."


ERROR_CLASSES = {
    ErrorKind.AUTH: AuthError,
    ErrorKind.QUOTA: QuotaError,
    ErrorKind.RATE_LIMIT: RateLimitError,
    ErrorKind.SAFETY: SafetyError,
    ErrorKind.UNKNOWN: UnknownProviderError,
}

# Lower-cased markers found in OpenAI / Gemini error payloads
_QUOTA_MARKERS = ("insufficient_quota", "quota_exceeded", "exceeded your current quota", "billing")
_AUTH_MARKERS = (
    "api_key_invalid",
    "invalid_api_key",
    "incorrect api key",
    "api key not valid",
    "unauthorized",
    "permission_denied",
    "api key not configured",
    "api key missing",
)
_RATE_MARKERS = ("rate_limit", "rate limit", "too many requests", "resource_exhausted")
_SAFETY_MARKERS = ("safety", "content_filter", "content_policy", "block_reason", "blocked by safety")


def classify_error(error: Union[BaseException, str, None]) -> ErrorKind:
    """
    Map an exception (or error message) to an ErrorKind.

    Looks at the HTTP status code carried by SDK exceptions (``status_code``
    on openai errors, ``code`` on google-genai errors) and at well-known
    markers in the message.
    """
    if error is None:
        return ErrorKind.UNKNOWN

    if isinstance(error, ProviderError):
        return error.kind

    message = str(error).lower()

    status = None
    if isinstance(error, BaseException):
        status = getattr(error, "status_code", None) or getattr(error, "code", None)
        if not isinstance(status, int):
            status = None

    if any(marker in message for marker in _QUOTA_MARKERS):
        return ErrorKind.QUOTA
    if status in (401, 403) or any(marker in message for marker in _AUTH_MARKERS):
        return ErrorKind.AUTH
    if status == 429 or any(marker in message for marker in _RATE_MARKERS):
        return ErrorKind.RATE_LIMIT
    if any(marker in message for marker in _SAFETY_MARKERS):
        return ErrorKind.SAFETY
    return ErrorKind.UNKNOWN


def error_from_kind(kind: ErrorKind, message: str = "", provider: Optional[str] = None) -> ProviderError:
    """Build the ProviderError subclass instance for a kind."""
    return ERROR_CLASSES.get(kind, UnknownProviderError)(message, provider=provider)
