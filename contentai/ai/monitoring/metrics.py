"""
AI Metrics - Usage tracking for the content orchestrator.

Tracks, in memory:
- Requests by source (provider / simulated / fallback / error)
- Requests and tokens by provider
- Failure kinds (auth, quota, rate_limit, safety, unknown)
- Latency and confidence averages

Exposed through GET /content/stats. Nothing is persisted; restarting the
process resets the counters.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional

from contentai.ai.providers.base import TokenUsage


@dataclass
class RequestMetrics:
    """Metrics for a single orchestrated request."""
    request_id: str
    source: str
    model: str
    latency_ms: float
    confidence: float
    provider: Optional[str] = None
    tokens: TokenUsage = field(default_factory=TokenUsage)
    error_kind: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def success(self) -> bool:
        return self.source in ("provider", "simulated")


@dataclass
class AggregatedMetrics:
    """Aggregated metrics since startup (or the last reset)."""
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    total_tokens: int = 0
    total_prompt_tokens: int = 0
    total_completion_tokens: int = 0
    total_latency_ms: float = 0.0
    total_confidence: float = 0.0
    requests_by_source: Dict[str, int] = field(default_factory=dict)
    requests_by_provider: Dict[str, int] = field(default_factory=dict)
    tokens_by_provider: Dict[str, int] = field(default_factory=dict)
    errors_by_kind: Dict[str, int] = field(default_factory=dict)

    @property
    def avg_latency_ms(self) -> float:
        """Average latency per request."""
        if self.total_requests == 0:
            return 0.0
        return self.total_latency_ms / self.total_requests

    @property
    def avg_confidence(self) -> float:
        if self.total_requests == 0:
            return 0.0
        return self.total_confidence / self.total_requests

    @property
    def success_rate(self) -> float:
        """Success rate as a percentage."""
        if self.total_requests == 0:
            return 0.0
        return (self.successful_requests / self.total_requests) * 100

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "total_requests": self.total_requests,
            "successful_requests": self.successful_requests,
            "failed_requests": self.failed_requests,
            "success_rate": f"{self.success_rate:.1f}%",
            "total_tokens": self.total_tokens,
            "prompt_tokens": self.total_prompt_tokens,
            "completion_tokens": self.total_completion_tokens,
            "avg_latency_ms": round(self.avg_latency_ms, 2),
            "avg_confidence": round(self.avg_confidence, 3),
            "requests_by_source": dict(self.requests_by_source),
            "requests_by_provider": dict(self.requests_by_provider),
            "tokens_by_provider": dict(self.tokens_by_provider),
            "errors_by_kind": dict(self.errors_by_kind),
        }


class AIMetrics:
    """
    Tracks and aggregates orchestrator metrics.

    A "successful" request is one answered by a provider or by simulation
    mode; fallback and error envelopes count as failures.

    Usage:
        metrics = AIMetrics()
        metrics.record_request(
            request_id="abc123",
            source="provider",
            model="gemini-2.5-flash",
            latency_ms=250.5,
            confidence=0.91,
            provider="gemini",
            tokens=TokenUsage(100, 50),
        )
        print(metrics.get_stats().to_dict())
    """

    def __init__(self, max_history: int = 1000):
        """
        Initialize metrics tracker.

        Args:
            max_history: Maximum number of requests to keep in memory
        """
        self._history: List[RequestMetrics] = []
        self._max_history = max_history
        self._lock = Lock()
        self._aggregated = AggregatedMetrics()

    def record_request(
        self,
        request_id: str,
        source: str,
        model: str,
        latency_ms: float,
        confidence: float,
        provider: Optional[str] = None,
        tokens: Optional[TokenUsage] = None,
        error_kind: Optional[str] = None,
    ) -> RequestMetrics:
        """Record metrics for a completed request."""
        metrics = RequestMetrics(
            request_id=request_id,
            source=source,
            model=model,
            latency_ms=latency_ms,
            confidence=confidence,
            provider=provider,
            tokens=tokens or TokenUsage(),
            error_kind=error_kind,
        )

        with self._lock:
            self._history.append(metrics)

            if len(self._history) > self._max_history:
                self._history = self._history[-self._max_history:]

            self._update_aggregated(metrics)

        return metrics

    def _update_aggregated(self, metrics: RequestMetrics) -> None:
        """Update aggregated metrics with a new request."""
        agg = self._aggregated
        agg.total_requests += 1

        if metrics.success:
            agg.successful_requests += 1
        else:
            agg.failed_requests += 1

        agg.total_tokens += metrics.tokens.total_tokens
        agg.total_prompt_tokens += metrics.tokens.prompt_tokens
        agg.total_completion_tokens += metrics.tokens.completion_tokens
        agg.total_latency_ms += metrics.latency_ms
        agg.total_confidence += metrics.confidence

        agg.requests_by_source[metrics.source] = agg.requests_by_source.get(metrics.source, 0) + 1

        if metrics.provider:
            agg.requests_by_provider[metrics.provider] = \
                agg.requests_by_provider.get(metrics.provider, 0) + 1
            agg.tokens_by_provider[metrics.provider] = \
                agg.tokens_by_provider.get(metrics.provider, 0) + metrics.tokens.total_tokens

        if metrics.error_kind:
            agg.errors_by_kind[metrics.error_kind] = agg.errors_by_kind.get(metrics.error_kind, 0) + 1

    def get_stats(self) -> AggregatedMetrics:
        """Get current aggregated statistics."""
        with self._lock:
            return self._aggregated

    def get_recent_requests(self, limit: int = 10) -> List[RequestMetrics]:
        """Get recent requests, newest first."""
        with self._lock:
            return list(reversed(self._history[-limit:]))

    def reset(self) -> None:
        """Reset all metrics (useful for testing)."""
        with self._lock:
            self._history = []
            self._aggregated = AggregatedMetrics()


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
ai_metrics = AIMetrics()
