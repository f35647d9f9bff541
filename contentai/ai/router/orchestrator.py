"""
Request Orchestrator - one entry point for every content task.

Decides how a ContentTask is answered and always returns a ResponseEnvelope:

┌──────────────────────────────────────────────────────────────────┐
│                        ContentTask                               │
└───────────────────────────┬──────────────────────────────────────┘
                            │
              provider configured?
            ┌───────────────┴────────────────┐
           YES                               NO
            │                                │
            ▼                                ▼
   one provider call                 synthetic delay
   (timeout, no retry)               LocalSynthesizer
            │                                │
     ┌──────┴───────┐                        │
  success        failure                     │
     │              │                        │
     ▼              ▼                        ▼
  PROVIDER      FALLBACK                 SIMULATED
  0.75-0.98     banner + local content   0.50-0.70
                0.10-0.30

If the local synthesizer itself fails the envelope carries an error block
with confidence 0.1 (source ERROR). process() never raises; only task
cancellation propagates.
"""

import asyncio
import logging
import random
import time
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from contentai.ai.monitoring import ai_logger, ai_metrics
from contentai.ai.monitoring.logger import AILogger
from contentai.ai.monitoring.metrics import AIMetrics
from contentai.ai.prompts import build_system_prompt
from contentai.ai.providers import (
    AIProvider,
    AIResponse,
    ProviderError,
    TokenUsage,
    UnknownProviderError,
    classify_error,
    create_provider,
    error_from_kind,
)
from contentai.ai.providers.base import ChunkCallback
from contentai.ai.schemas import ContentTask, ResponseEnvelope, ResponseSource
from contentai.ai.scoring import build_suggestions, calculate_confidence
from contentai.ai.synthesizer import SIMULATION_NOTICE, LocalSynthesizer

logger = logging.getLogger("contentai.ai.router")


@dataclass
class OrchestratorConfig:
    """
    Explicit wiring for the orchestrator.

    Attributes:
        provider: The active provider, or None for simulation-only mode
        request_timeout: Seconds to wait for a provider before falling back
        simulation_delay: (min, max) seconds of synthetic delay in simulation mode
    """
    provider: Optional[AIProvider] = None
    request_timeout: float = 30.0
    simulation_delay: Tuple[float, float] = (0.5, 1.5)


class _ChunkRelay:
    """Forwards provider chunks and remembers whether any got through."""

    def __init__(self, on_chunk: ChunkCallback):
        self._on_chunk = on_chunk
        self.emitted = False

    def __call__(self, text: str) -> None:
        self.emitted = True
        self._on_chunk(text)


def fallback_banner(error: ProviderError) -> str:
    """Diagnostic line prepended to fallback content."""
    return (
        f"> **{type(error).__name__}:** {error.diagnostic} "
        "Showing locally generated demo content instead."
    )


class RequestOrchestrator:
    """
    Routes content tasks to the active provider or the local synthesizer.

    Usage:
        orchestrator = RequestOrchestrator(OrchestratorConfig(provider=gemini))
        envelope = await orchestrator.process(task)
        print(envelope.source, envelope.confidence)
    """

    def __init__(
        self,
        config: Optional[OrchestratorConfig] = None,
        synthesizer: Optional[LocalSynthesizer] = None,
        rng: Optional[random.Random] = None,
        ai_log: Optional[AILogger] = None,
        metrics: Optional[AIMetrics] = None,
    ):
        self.config = config or OrchestratorConfig()
        self.rng = rng or random.Random()
        self.synthesizer = synthesizer or LocalSynthesizer(self.rng)
        self._log = ai_log or ai_logger
        self._metrics = metrics or ai_metrics
        logger.info(f"Request orchestrator initialized (mode: {self.mode})")

    # ---------------------------------------------------------------------------
    # STATUS
    # ---------------------------------------------------------------------------

    @property
    def provider(self) -> Optional[AIProvider]:
        return self.config.provider

    @property
    def is_live(self) -> bool:
        """True when a provider with a valid credential is wired in."""
        return self.provider is not None and self.provider.is_configured()

    @property
    def mode(self) -> str:
        return "live" if self.is_live else "simulation"

    def use_provider(self, provider: Optional[AIProvider]) -> None:
        """Swap the active provider (e.g. after a credential update)."""
        self.config.provider = provider
        logger.info(f"Active provider set to {provider.provider_type.value if provider else None} (mode: {self.mode})")

    def status(self) -> Dict[str, Any]:
        provider = self.provider
        return {
            "mode": self.mode,
            "provider": provider.provider_type.value if provider else None,
            "configured": self.is_live,
            "model": provider.model if provider else None,
            "request_timeout": self.config.request_timeout,
        }

    # ---------------------------------------------------------------------------
    # PROCESSING
    # ---------------------------------------------------------------------------

    async def process(
        self,
        task: ContentTask,
        on_chunk: Optional[ChunkCallback] = None,
        on_reset: Optional[Callable[[], None]] = None,
    ) -> ResponseEnvelope:
        """
        Answer a content task.

        Args:
            task: The content task
            on_chunk: Optional callback for streamed text. Provider output is
                forwarded as it arrives; simulated and fallback content is
                delivered as a single chunk.
            on_reset: Called when provider chunks were already forwarded and
                the call then failed. The caller drops what it received;
                the fallback content follows as a single chunk, so the
                stream after the reset equals envelope.content.

        Returns:
            ResponseEnvelope, whichever path produced it
        """
        request_id = str(uuid.uuid4())
        start_time = time.perf_counter()
        provider = self.provider if self.is_live else None

        self._log.log_request(
            request_id=request_id,
            prompt=task.prompt,
            task_kind=task.task_kind.value,
            model=task.config.model_id,
            provider=provider.provider_type.value if provider else None,
            enhancers=list(task.config.enhancers),
        )

        if provider is None:
            return await self._simulate(task, request_id, start_time, on_chunk)

        relay = _ChunkRelay(on_chunk) if on_chunk is not None else None
        response, failure = await self._call_provider(provider, task, relay)
        if failure is None:
            return self._finish(
                task,
                request_id,
                start_time,
                content=response.content,
                source=ResponseSource.PROVIDER,
                provider=provider.provider_type.value,
                tokens=response.usage,
            )

        self._log.log_fallback(
            request_id=request_id,
            provider=provider.provider_type.value,
            error_kind=failure.kind.value,
            error=failure.message,
        )
        if relay is not None and relay.emitted:
            if on_reset is not None:
                on_reset()
            else:
                logger.warning(f"Request {request_id}: partial provider output was streamed before the fallback")
        return self._fallback(task, request_id, start_time, failure, on_chunk)

    async def _call_provider(
        self,
        provider: AIProvider,
        task: ContentTask,
        on_chunk: Optional[ChunkCallback],
    ) -> Tuple[Optional[AIResponse], Optional[ProviderError]]:
        """Make the single provider attempt. Returns (response, failure)."""
        name = provider.provider_type.value
        timeout = self.config.request_timeout
        kwargs = dict(
            prompt=task.prompt,
            system_prompt=build_system_prompt(task),
            temperature=task.config.temperature,
            max_tokens=task.config.max_tokens,
            model=task.config.model_id,
        )

        try:
            if on_chunk is not None:
                call = provider.generate_stream(on_chunk=on_chunk, **kwargs)
            else:
                call = provider.generate(**kwargs)
            response = await asyncio.wait_for(call, timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning(f"{name} did not answer within {timeout}s")
            return None, UnknownProviderError(
                f"Request timed out after {timeout}s",
                provider=name,
                diagnostic=f"The provider did not respond within {timeout:g} seconds.",
            )
        except Exception as e:
            # Providers report failures in AIResponse; this covers bugs in them
            logger.error(f"{name} raised unexpectedly: {e}")
            return None, error_from_kind(classify_error(e), str(e), provider=name)

        if not response.success:
            kind = response.error_kind or classify_error(response.error)
            return response, error_from_kind(kind, response.error or "", provider=name)

        if not response.content.strip():
            return response, UnknownProviderError("Provider returned empty content", provider=name)

        return response, None

    async def _simulate(
        self,
        task: ContentTask,
        request_id: str,
        start_time: float,
        on_chunk: Optional[ChunkCallback],
    ) -> ResponseEnvelope:
        low, high = self.config.simulation_delay
        if high > 0:
            await asyncio.sleep(self.rng.uniform(max(0.0, low), high))

        body = self._synthesize(task, request_id)
        if body is None:
            return self._error(task, request_id, start_time, "Content generation failed.")

        content = f"{SIMULATION_NOTICE}\n\n{body}"
        if on_chunk is not None:
            on_chunk(content)
        return self._finish(task, request_id, start_time, content=content, source=ResponseSource.SIMULATED)

    def _fallback(
        self,
        task: ContentTask,
        request_id: str,
        start_time: float,
        failure: ProviderError,
        on_chunk: Optional[ChunkCallback],
    ) -> ResponseEnvelope:
        banner = fallback_banner(failure)
        body = self._synthesize(task, request_id, fallback=True)
        if body is None:
            return self._error(
                task, request_id, start_time, banner,
                provider=failure.provider, error_kind=failure.kind,
            )

        content = f"{banner}\n\n{body}"
        if on_chunk is not None:
            on_chunk(content)
        return self._finish(
            task,
            request_id,
            start_time,
            content=content,
            source=ResponseSource.FALLBACK,
            provider=failure.provider,
            error_kind=failure.kind,
        )

    def _synthesize(self, task: ContentTask, request_id: str, fallback: bool = False) -> Optional[str]:
        try:
            return self.synthesizer.synthesize(task, fallback=fallback)
        except Exception as e:
            logger.exception("Local synthesis failed")
            self._log.log_error(
                request_id=request_id,
                error=str(e),
                stage="synthesis",
                metadata={"task_kind": task.task_kind.value},
            )
            return None

    def _error(
        self,
        task: ContentTask,
        request_id: str,
        start_time: float,
        headline: str,
        provider: Optional[str] = None,
        error_kind=None,
    ) -> ResponseEnvelope:
        content = f"{headline}\n\nNo content could be produced for this request. Please try again."
        return self._finish(
            task,
            request_id,
            start_time,
            content=content,
            source=ResponseSource.ERROR,
            provider=provider,
            error_kind=error_kind,
        )

    def _finish(
        self,
        task: ContentTask,
        request_id: str,
        start_time: float,
        content: str,
        source: ResponseSource,
        provider: Optional[str] = None,
        tokens: Optional[TokenUsage] = None,
        error_kind=None,
    ) -> ResponseEnvelope:
        """Score, log and record an envelope."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        enhancers = list(task.config.enhancers)

        envelope = ResponseEnvelope(
            content=content,
            model_id=task.config.model_id,
            confidence=calculate_confidence(
                source, task.task_kind, task.config.model_id, content, enhancers, self.rng
            ),
            elapsed_ms=elapsed_ms,
            enhancements_applied=enhancers,
            suggestions=build_suggestions(task.task_kind, task.prompt, content, self.rng),
            source=source,
            provider=provider,
            error_kind=error_kind,
        )

        self._log.log_response(
            request_id=request_id,
            source=source.value,
            model=envelope.model_id,
            confidence=envelope.confidence,
            latency_ms=elapsed_ms,
            content_length=len(content),
            provider=provider,
            tokens=tokens.total_tokens if tokens else 0,
            error_kind=error_kind.value if error_kind else None,
        )
        self._metrics.record_request(
            request_id=request_id,
            source=source.value,
            model=envelope.model_id,
            latency_ms=elapsed_ms,
            confidence=envelope.confidence,
            provider=provider,
            tokens=tokens,
            error_kind=error_kind.value if error_kind else None,
        )
        return envelope


# ---------------------------------------------------------------------------
# FACTORY
# ---------------------------------------------------------------------------

def _env_key(settings, provider_name: str) -> Optional[str]:
    keys = {
        "gemini": settings.GEMINI_API_KEY,
        "openai": settings.OPENAI_API_KEY,
    }
    return keys.get(provider_name) or None


def build_provider(settings, credential_store=None) -> Optional[AIProvider]:
    """
    Build the active provider from settings.

    A key in the credential store wins over the *_API_KEY environment value.
    An unknown ACTIVE_PROVIDER leaves the orchestrator in simulation mode.
    """
    name = settings.ACTIVE_PROVIDER.lower()
    stored = credential_store.get(name) if credential_store is not None else None
    try:
        return create_provider(name, api_key=stored or _env_key(settings, name))
    except ValueError as e:
        logger.warning(f"{e} - running in simulation mode")
        return None


def build_orchestrator(settings, credential_store=None) -> RequestOrchestrator:
    """Wire a RequestOrchestrator from application settings."""
    config = OrchestratorConfig(
        provider=build_provider(settings, credential_store),
        request_timeout=settings.AI_REQUEST_TIMEOUT,
        simulation_delay=(settings.SIMULATION_DELAY_MIN, settings.SIMULATION_DELAY_MAX),
    )
    return RequestOrchestrator(config)
