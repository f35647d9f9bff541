"""
AI Providers Module - Unified clients for multiple LLM providers.

This module provides consistent interfaces to different AI providers:
- Google Gemini (default)
- OpenAI (GPT models)

Each provider has the same interface, making them interchangeable:
    response = await provider.generate(prompt, **kwargs)

Only one provider is active at a time; which one is decided by
configuration (settings.ACTIVE_PROVIDER), not per request.
"""

from typing import Optional

from contentai.ai.providers.base import AIProvider, AIResponse, ProviderType, TokenUsage
from contentai.ai.providers.errors import (
    ErrorKind,
    ProviderError,
    AuthError,
    QuotaError,
    RateLimitError,
    SafetyError,
    UnknownProviderError,
    classify_error,
    error_from_kind,
)
from contentai.ai.providers.gemini import GeminiProvider
from contentai.ai.providers.openai_provider import OpenAIProvider

PROVIDER_CLASSES = {
    ProviderType.GEMINI: GeminiProvider,
    ProviderType.OPENAI: OpenAIProvider,
}


def create_provider(
    provider: str,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
) -> AIProvider:
    """
    Build a provider instance by name.

    Raises:
        ValueError: If the provider name is not supported
    """
    try:
        provider_type = ProviderType(provider.lower())
    except ValueError:
        raise ValueError(f"Unsupported provider: {provider}")
    return PROVIDER_CLASSES[provider_type](model=model, api_key=api_key)


__all__ = [
    "AIProvider",
    "AIResponse",
    "ProviderType",
    "TokenUsage",
    "ErrorKind",
    "ProviderError",
    "AuthError",
    "QuotaError",
    "RateLimitError",
    "SafetyError",
    "UnknownProviderError",
    "classify_error",
    "error_from_kind",
    "GeminiProvider",
    "OpenAIProvider",
    "create_provider",
]
