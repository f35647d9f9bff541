"""
OpenAI Provider - GPT client for content tasks.

Uses the official async SDK so an in-flight request is aborted when the
awaiting task is cancelled (the orchestrator relies on this for its timeout).

Valid ranges (chat completions):
- temperature: 0.0 - 2.0
- max_tokens: 1 - 4096

API Documentation: https://platform.openai.com/docs/api-reference
"""

import time
import logging
from typing import Optional, Any, Dict, List

from openai import AsyncOpenAI

from contentai.core.config import settings
from contentai.ai.providers.base import (
    AIProvider,
    AIResponse,
    ChunkCallback,
    ProviderType,
    TokenUsage
)

logger = logging.getLogger("contentai.ai.openai")


class OpenAIProvider(AIProvider):
    """
    OpenAI GPT provider implementation.

    Usage:
        provider = OpenAIProvider(api_key="sk-...")
        response = await provider.generate(
            "Write a blog post about solar energy",
            system_prompt="You are a professional content writer.",
        )

        # Streaming:
        response = await provider.generate_stream(prompt, on_chunk=print)
    """

    provider_type = ProviderType.OPENAI
    TEMPERATURE_RANGE = (0.0, 2.0)
    MAX_TOKENS_LIMIT = 4096

    def __init__(self, model: str = None, api_key: str = None):
        """
        Initialize the OpenAI provider.

        Args:
            model: Default model name (default: from settings.OPENAI_MODEL)
            api_key: API key (default: unconfigured)
        """
        super().__init__(model=model or settings.OPENAI_MODEL, api_key=api_key)

    def _build_client(self, api_key: str) -> AsyncOpenAI:
        return AsyncOpenAI(api_key=api_key)

    def _serves_model(self, model: str) -> bool:
        return model.startswith(("gpt-", "o1", "o3", "o4", "chatgpt-"))

    @staticmethod
    def _build_messages(prompt: str, system_prompt: Optional[str]) -> List[Dict[str, str]]:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        return messages

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
        Generate a response using OpenAI GPT.

        Args:
            prompt: The user's message
            system_prompt: Optional system instructions
            temperature: Creativity (clamped to 0-2)
            max_tokens: Maximum response length (clamped to 1-4096)
            model: Requested model id

        Returns:
            AIResponse with the generated content
        """
        start_time = time.perf_counter()
        model_name = self.resolve_model(model)

        if not self._client:
            return self._create_error_response(
                error="OpenAI API key not configured",
                model=model_name,
                latency_ms=self._measure_latency(start_time)
            )

        try:
            response = await self._client.chat.completions.create(
                model=model_name,
                messages=self._build_messages(prompt, system_prompt),
                temperature=self.clamp_temperature(temperature),
                max_tokens=self.clamp_max_tokens(max_tokens),
            )

            latency_ms = self._measure_latency(start_time)

            choice = response.choices[0] if response.choices else None
            content = (choice.message.content if choice else None) or ""

            if not content:
                finish_reason = choice.finish_reason if choice else None
                if finish_reason == "content_filter":
                    return self._create_error_response("content_filter", model_name, latency_ms)
                return self._create_error_response(
                    "No content generated from OpenAI", model_name, latency_ms
                )

            usage = TokenUsage(
                prompt_tokens=response.usage.prompt_tokens if response.usage else 0,
                completion_tokens=response.usage.completion_tokens if response.usage else 0,
            )

            logger.info(f"OpenAI request completed in {latency_ms:.0f}ms, tokens: {usage.total_tokens}")

            return AIResponse(
                content=content,
                provider=self.provider_type,
                model=model_name,
                usage=usage,
                latency_ms=latency_ms,
                success=True,
                raw_response=response,
            )

        except Exception as e:
            latency_ms = self._measure_latency(start_time)
            logger.error(f"OpenAI generation failed: {e}")
            return self._create_error_response(
                error=e,
                model=model_name,
                latency_ms=latency_ms
            )

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
        Stream a response using OpenAI GPT.

        Each content delta is passed to on_chunk as it arrives; the full
        text is returned in the final AIResponse.
        """
        start_time = time.perf_counter()
        model_name = self.resolve_model(model)

        if not self._client:
            return self._create_error_response(
                error="OpenAI API key not configured",
                model=model_name,
                latency_ms=self._measure_latency(start_time)
            )

        try:
            stream = await self._client.chat.completions.create(
                model=model_name,
                messages=self._build_messages(prompt, system_prompt),
                temperature=self.clamp_temperature(temperature),
                max_tokens=self.clamp_max_tokens(max_tokens),
                stream=True,
            )

            parts = []
            async for chunk in stream:
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta.content or ""
                if delta:
                    parts.append(delta)
                    if on_chunk:
                        on_chunk(delta)

            latency_ms = self._measure_latency(start_time)
            content = "".join(parts)

            if not content:
                return self._create_error_response(
                    "No content generated from OpenAI", model_name, latency_ms
                )

            logger.info(f"OpenAI stream completed in {latency_ms:.0f}ms, chunks: {len(parts)}")

            return AIResponse(
                content=content,
                provider=self.provider_type,
                model=model_name,
                latency_ms=latency_ms,
                success=True,
                metadata={"streamed": True, "chunks": len(parts)},
            )

        except Exception as e:
            latency_ms = self._measure_latency(start_time)
            logger.error(f"OpenAI streaming failed: {e}")
            return self._create_error_response(
                error=e,
                model=model_name,
                latency_ms=latency_ms
            )
