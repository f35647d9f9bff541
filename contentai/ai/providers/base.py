"""
Base AI Provider - Abstract interface for all LLM providers.

This module defines the contract that all AI providers must follow.
It ensures consistent behavior regardless of which provider is used.

Design Pattern: Strategy Pattern
================================
The base class defines the interface, and each provider implements it.
This allows the orchestrator to switch between providers without code changes.

Example:
    provider = GeminiProvider(api_key="...")
    response = await provider.generate("Hello, world!")
    print(response.content)
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Any, Callable, Dict, Tuple
from enum import Enum
import logging

from contentai.ai.providers.errors import ErrorKind, classify_error

# Configure logging for AI operations
logger = logging.getLogger("contentai.ai")

# Callback invoked with each streamed text chunk
ChunkCallback = Callable[[str], None]

# Placeholder values shipped in example .env files
_PLACEHOLDER_KEYS = {"your_gemini_api_key_here", "your_openai_api_key_here"}


class ProviderType(str, Enum):
    """Enum of supported AI providers."""
    GEMINI = "gemini"
    OPENAI = "openai"


@dataclass
class TokenUsage:
    """
    Token usage statistics for an AI request.

    Used for:
    - Cost tracking (tokens = money)
    - Rate limiting awareness
    """
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def __post_init__(self):
        """Calculate total if not provided."""
        if self.total_tokens == 0:
            self.total_tokens = self.prompt_tokens + self.completion_tokens


@dataclass
class AIResponse:
    """
    Standardized response from any AI provider.

    All providers return this same structure, making it easy to:
    - Process responses uniformly
    - Log and monitor across providers
    - Handle errors consistently

    Attributes:
        content: The generated text response
        provider: Which provider generated this response
        model: The specific model used
        usage: Token usage statistics
        latency_ms: How long the request took
        success: Whether the request succeeded
        error: Error message if failed
        error_kind: Classified failure kind if failed
        raw_response: Original provider response (for debugging)
        metadata: Additional provider-specific data
        created_at: Timestamp of the response
    """
    content: str
    provider: ProviderType
    model: str
    usage: TokenUsage = field(default_factory=TokenUsage)
    latency_ms: float = 0.0
    success: bool = True
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    raw_response: Optional[Any] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "content": self.content[:100] + "..." if len(self.content) > 100 else self.content,
            "provider": self.provider.value,
            "model": self.model,
            "tokens": {
                "prompt": self.usage.prompt_tokens,
                "completion": self.usage.completion_tokens,
                "total": self.usage.total_tokens,
            },
            "latency_ms": self.latency_ms,
            "success": self.success,
            "error": self.error,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "created_at": self.created_at.isoformat(),
        }


class AIProvider(ABC):
    """
    Abstract base class for AI providers.

    All AI providers (Gemini, OpenAI) must implement this interface.

    Responsibilities:
    - Generate text responses from prompts (plain and streamed)
    - Clamp sampling parameters to the provider's valid range
    - Handle errors gracefully (classified, never raised)
    - Track token usage and latency

    Subclasses declare their limits as class attributes:
        TEMPERATURE_RANGE = (0.0, 1.0)
        MAX_TOKENS_LIMIT = 8192
    """

    provider_type: ProviderType
    TEMPERATURE_RANGE: Tuple[float, float] = (0.0, 1.0)
    MAX_TOKENS_LIMIT: int = 4096

    def __init__(self, model: str, api_key: Optional[str] = None):
        self.model = model
        self.api_key: Optional[str] = None
        self._client = None
        if api_key:
            self.set_credential(api_key)
        else:
            logger.warning(f"{self.provider_type.value} API key not configured - provider unavailable")

    # ---------------------------------------------------------------------------
    # CREDENTIALS
    # ---------------------------------------------------------------------------

    def set_credential(self, api_key: str) -> None:
        """
        Install an API key and rebuild the SDK client.

        Placeholder or obviously truncated keys leave the provider unconfigured.
        """
        if not self._looks_like_key(api_key):
            logger.warning(f"Ignoring invalid {self.provider_type.value} API key")
            self.api_key = None
            self._client = None
            return
        self.api_key = api_key
        self._client = self._build_client(api_key)
        logger.info(f"{self.provider_type.value} provider configured with model: {self.model}")

    def is_configured(self) -> bool:
        """True when a credential is installed and the client is ready."""
        return self._client is not None and self.api_key is not None

    @staticmethod
    def _looks_like_key(api_key: Optional[str]) -> bool:
        if not api_key:
            return False
        key = api_key.strip()
        return key not in _PLACEHOLDER_KEYS and len(key) > 10

    @abstractmethod
    def _build_client(self, api_key: str) -> Any:
        """Create the provider SDK client for a key."""
        pass

    # ---------------------------------------------------------------------------
    # GENERATION
    # ---------------------------------------------------------------------------

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 2000,
        model: Optional[str] = None,
        **kwargs
    ) -> AIResponse:
        """
        Generate a response from the AI model.

        Args:
            prompt: The user's message
            system_prompt: Optional system instructions for the model
            temperature: Creativity level, clamped to TEMPERATURE_RANGE
            max_tokens: Maximum tokens in the response, clamped to MAX_TOKENS_LIMIT
            model: Requested model id (catalog ids are mapped to a provider model)
            **kwargs: Provider-specific options

        Returns:
            AIResponse with the generated content

        Raises:
            This method should NOT raise exceptions.
            Errors are captured in AIResponse.error / AIResponse.error_kind
        """
        pass

    @abstractmethod
    async def generate_stream(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 2000,
        model: Optional[str] = None,
        on_chunk: Optional[ChunkCallback] = None,
        **kwargs
    ) -> AIResponse:
        """
        Stream a response, invoking on_chunk for every text delta.

        Returns the same AIResponse as generate() once the stream ends.
        """
        pass

    # ---------------------------------------------------------------------------
    # HELPERS
    # ---------------------------------------------------------------------------

    def clamp_temperature(self, temperature: float) -> float:
        low, high = self.TEMPERATURE_RANGE
        return max(low, min(high, float(temperature)))

    def clamp_max_tokens(self, max_tokens: int) -> int:
        return max(1, min(self.MAX_TOKENS_LIMIT, int(max_tokens)))

    def resolve_model(self, model: Optional[str]) -> str:
        """
        Map a requested model id to a model this provider serves.

        Catalog ids like "creative-writer" or another provider's model fall
        back to the provider's default model.
        """
        if model and self._serves_model(model):
            return model
        return self.model

    def _serves_model(self, model: str) -> bool:
        return model.startswith(self.provider_type.value)

    def _measure_latency(self, start_time: float) -> float:
        """Calculate latency in milliseconds."""
        return (time.perf_counter() - start_time) * 1000

    def _create_error_response(
        self,
        error: Any,
        model: str,
        latency_ms: float = 0.0
    ) -> AIResponse:
        """
        Create a standardized error response.

        Used when a provider fails to ensure consistent error handling.
        """
        kind = classify_error(error)
        logger.error(f"AI Provider Error [{self.provider_type.value}] ({kind.value}): {error}")
        return AIResponse(
            content="",
            provider=self.provider_type,
            model=model,
            latency_ms=latency_ms,
            success=False,
            error=str(error),
            error_kind=kind,
        )
