"""
Gemini Provider - Google's GenAI SDK.

Calls go through the SDK's async surface (client.aio) so a request can be
cancelled from the event loop.

Valid ranges:
- temperature: 0.0 - 1.0
- max_output_tokens: 1 - 8192
"""

import time
import logging
from typing import Optional, Any

from google import genai
from google.genai import types

from contentai.core.config import settings
from contentai.ai.providers.base import (
    AIProvider,
    AIResponse,
    ChunkCallback,
    ProviderType,
    TokenUsage
)

logger = logging.getLogger("contentai.ai.gemini")

# Catalog ids that name retired or generic Gemini models
LEGACY_MODEL_IDS = {"gemini-pro", "gemini-pro-vision", "gemini-flash"}


class GeminiProvider(AIProvider):
    provider_type = ProviderType.GEMINI
    TEMPERATURE_RANGE = (0.0, 1.0)
    MAX_TOKENS_LIMIT = 8192

    def __init__(self, model: str = None, api_key: str = None):
        super().__init__(model=model or settings.GEMINI_MODEL, api_key=api_key)

    def _build_client(self, api_key: str) -> genai.Client:
        return genai.Client(api_key=api_key)

    def _serves_model(self, model: str) -> bool:
        return model.startswith("gemini-") and model not in LEGACY_MODEL_IDS

    def _config(self, system_prompt, temperature, max_tokens) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            temperature=self.clamp_temperature(temperature),
            max_output_tokens=self.clamp_max_tokens(max_tokens),
            top_p=0.8,
            top_k=40,
            system_instruction=system_prompt,
        )

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 2000,
        model: Optional[str] = None,
        **kwargs
    ) -> AIResponse:
        start_time = time.perf_counter()
        model_name = self.resolve_model(model)

        if not self._client:
            return self._error("Gemini API key not configured", model_name, start_time)

        try:
            response = await self._client.aio.models.generate_content(
                model=model_name,
                contents=prompt,
                config=self._config(system_prompt, temperature, max_tokens),
            )

            latency_ms = self._measure_latency(start_time)
            content = response.text or ""

            if not content:
                return self._error(self._empty_reason(response), model_name, start_time)

            return AIResponse(
                content=content,
                provider=self.provider_type,
                model=model_name,
                usage=self._extract_usage(response),
                latency_ms=latency_ms,
                success=True,
                raw_response=response,
            )

        except Exception as e:
            logger.error(f"Gemini generation failed: {e}")
            return self._error(e, model_name, start_time)

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
        start_time = time.perf_counter()
        model_name = self.resolve_model(model)

        if not self._client:
            return self._error("Gemini API key not configured", model_name, start_time)

        try:
            stream = await self._client.aio.models.generate_content_stream(
                model=model_name,
                contents=prompt,
                config=self._config(system_prompt, temperature, max_tokens),
            )

            parts = []
            last_chunk = None
            async for chunk in stream:
                last_chunk = chunk
                text = chunk.text or ""
                if text:
                    parts.append(text)
                    if on_chunk:
                        on_chunk(text)

            content = "".join(parts)
            if not content:
                return self._error(self._empty_reason(last_chunk), model_name, start_time)

            return AIResponse(
                content=content,
                provider=self.provider_type,
                model=model_name,
                usage=self._extract_usage(last_chunk),
                latency_ms=self._measure_latency(start_time),
                success=True,
                metadata={"streamed": True, "chunks": len(parts)},
            )

        except Exception as e:
            logger.error(f"Gemini streaming failed: {e}")
            return self._error(e, model_name, start_time)

    # --- HELPERS ---

    def _extract_usage(self, response) -> TokenUsage:
        # The SDK returns None when no usage was reported
        usage = getattr(response, "usage_metadata", None) if response is not None else None
        if not usage:
            return TokenUsage()
        return TokenUsage(
            prompt_tokens=usage.prompt_token_count or 0,
            completion_tokens=usage.candidates_token_count or 0,
        )

    def _empty_reason(self, response: Any) -> str:
        """Explain an empty response; a SAFETY block is reported as such."""
        feedback = getattr(response, "prompt_feedback", None) if response is not None else None
        if feedback is not None and getattr(feedback, "block_reason", None):
            return f"SAFETY: prompt blocked ({feedback.block_reason})"
        candidates = getattr(response, "candidates", None) if response is not None else None
        if candidates:
            finish_reason = str(getattr(candidates[0], "finish_reason", "") or "")
            if "SAFETY" in finish_reason.upper():
                return "SAFETY: response blocked by safety filters"
        return "No content generated from Gemini"

    def _error(self, error, model_name, start_time):
        return self._create_error_response(
            error=error, model=model_name, latency_ms=self._measure_latency(start_time)
        )
